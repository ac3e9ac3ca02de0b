"""Tests for alias-aware struct deduplication."""

from __future__ import annotations

import itertools
import logging

import pytest

from service_docs import (
    ServiceDocsSettings,
    SpecificationArgumentError,
    StructInfo,
    dedupe_structs,
    prefer_aliased,
)

_QUIET = ServiceDocsSettings(warn_on_alias_conflict=False)

_FOO = StructInfo("foo", [])
_FOO_BAR = _FOO.with_alias("bar")
_FOO_BAZ = _FOO.with_alias("baz")
_QUX = StructInfo("qux", [])
_QUX_Q = _QUX.with_alias("q")

_POOL = (_FOO, _FOO_BAR, _FOO_BAZ, _QUX, _QUX_Q, StructInfo("solo", []))


def _samples() -> list[tuple[StructInfo, ...]]:
    samples: list[tuple[StructInfo, ...]] = [()]
    for size in range(1, 4):
        samples.extend(itertools.product(_POOL, repeat=size))
    return samples


def _aliased_names(structs: tuple[StructInfo, ...]) -> set[str]:
    return {struct.name for struct in structs if struct.is_aliased}


@pytest.mark.parametrize("structs", _samples())
def test_dedup_properties(structs: tuple[StructInfo, ...]) -> None:
    """Names are unique, aliases win, and order follows first occurrence."""
    result = dedupe_structs(structs, settings=_QUIET)
    names = [struct.name for struct in result]

    assert len(names) == len(set(names))
    assert names == list(dict.fromkeys(struct.name for struct in structs))
    assert _aliased_names(result) == _aliased_names(structs)
    assert dedupe_structs(result, settings=_QUIET) == result


@pytest.mark.parametrize("structs", [s for s in _samples() if len(s) == 3])
def test_alias_preference_is_order_independent(structs: tuple[StructInfo, ...]) -> None:
    """Permuting the input never changes which names end up aliased."""
    expected = {struct.name: struct.is_aliased for struct in dedupe_structs(structs, settings=_QUIET)}
    for permutation in itertools.permutations(structs):
        result = dedupe_structs(permutation, settings=_QUIET)
        assert {struct.name: struct.is_aliased for struct in result} == expected


def test_first_aliased_occurrence_wins() -> None:
    """Among several aliased entries the first one seen is kept."""
    assert dedupe_structs([_FOO, _FOO_BAZ, _FOO_BAR], settings=_QUIET) == (_FOO_BAZ,)
    assert dedupe_structs([_FOO_BAR, _FOO, _FOO_BAZ], settings=_QUIET) == (_FOO_BAR,)


def test_later_aliased_entry_keeps_first_slot() -> None:
    """An aliased replacement occupies the slot of the first occurrence."""
    result = dedupe_structs([_FOO, _QUX, _FOO_BAR], settings=_QUIET)
    assert result == (_FOO_BAR, _QUX)


def test_prefer_aliased_merge_rule() -> None:
    """The merge rule only replaces a non-aliased survivor."""
    assert prefer_aliased(_FOO, _FOO_BAR) is _FOO_BAR
    assert prefer_aliased(_FOO_BAR, _FOO) is _FOO_BAR
    assert prefer_aliased(_FOO_BAR, _FOO_BAZ) is _FOO_BAR
    assert prefer_aliased(_FOO, _FOO) is _FOO


def test_conflicting_aliases_log_warning(caplog: pytest.LogCaptureFixture) -> None:
    """Two different aliases for one name are reported."""
    with caplog.at_level(logging.WARNING, logger="service_docs.dedup"):
        result = dedupe_structs([_FOO_BAR, _FOO_BAZ], settings=ServiceDocsSettings())
    assert result == (_FOO_BAR,)
    assert any("conflicting aliases" in record.getMessage() for record in caplog.records)


def test_conflict_warning_can_be_disabled(caplog: pytest.LogCaptureFixture) -> None:
    """Disabling the warning leaves the outcome unchanged."""
    with caplog.at_level(logging.WARNING, logger="service_docs.dedup"):
        result = dedupe_structs([_FOO_BAR, _FOO_BAZ], settings=_QUIET)
    assert result == (_FOO_BAR,)
    assert not caplog.records


def test_same_alias_does_not_warn(caplog: pytest.LogCaptureFixture) -> None:
    """Repeating an identical aliased struct is a plain duplicate."""
    with caplog.at_level(logging.WARNING, logger="service_docs.dedup"):
        dedupe_structs([_FOO_BAR, _FOO_BAR], settings=ServiceDocsSettings())
    assert not caplog.records


def test_settings_resolve_from_environment(
    monkeypatch: pytest.MonkeyPatch,
    caplog: pytest.LogCaptureFixture,
) -> None:
    """Omitted settings are read from the environment."""
    monkeypatch.setenv("SERVICE_DOCS_WARN_ALIAS_CONFLICT", "false")
    with caplog.at_level(logging.WARNING, logger="service_docs.dedup"):
        dedupe_structs([_FOO_BAR, _FOO_BAZ])
    assert not caplog.records


@pytest.mark.parametrize(
    ("structs", "match"),
    [
        (None, "structs is required"),
        ([_FOO, None], r"structs\[1\] is required"),
        ([_FOO, "foo"], r"structs\[1\] must be StructInfo, got str"),
        ("foo", "structs must be an iterable"),
    ],
)
def test_invalid_inputs_are_rejected(structs: object, match: str) -> None:
    """Missing or mistyped inputs raise the invalid-argument error."""
    with pytest.raises(SpecificationArgumentError, match=match):
        dedupe_structs(structs, settings=_QUIET)  # type: ignore[arg-type]
