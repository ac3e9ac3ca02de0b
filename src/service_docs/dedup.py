"""Struct deduplication keyed by canonical name."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from service_docs.config import ServiceDocsSettings, resolve_settings
from service_docs.errors import SpecificationArgumentError
from service_docs.named_types import StructInfo
from utils.validation import ensure_items

_LOGGER = logging.getLogger(__name__)


def prefer_aliased(existing: StructInfo, incoming: StructInfo) -> StructInfo:
    """Pick the survivor between two structs sharing a canonical name.

    The incoming struct replaces the existing one only when it is aliased
    and the existing one is not, so the first aliased occurrence wins.

    Returns
    -------
    StructInfo
        The struct to keep.
    """
    if incoming.is_aliased and not existing.is_aliased:
        return incoming
    return existing


def dedupe_structs(
    structs: Iterable[StructInfo] | None,
    *,
    settings: ServiceDocsSettings | None = None,
) -> tuple[StructInfo, ...]:
    """Collapse structs sharing a canonical name into one entry per name.

    Parameters
    ----------
    structs
        Struct descriptors in input order.
    settings
        Optional settings; resolved from the environment when omitted.

    Returns
    -------
    tuple[StructInfo, ...]
        One struct per name, ordered by the first occurrence of each name.
        When any entry for a name is aliased, the survivor is aliased.

    Raises
    ------
    SpecificationArgumentError
        If ``structs`` is missing or holds a missing or non-struct entry.
    """
    items = ensure_items(
        structs,
        label="structs",
        item_type=StructInfo,
        error_type=SpecificationArgumentError,
    )
    resolved = settings if settings is not None else resolve_settings()
    survivors: dict[str, StructInfo] = {}
    for struct in items:
        existing = survivors.get(struct.name)
        if existing is None:
            survivors[struct.name] = struct
            continue
        survivor = prefer_aliased(existing, struct)
        _LOGGER.debug(
            "Collapsed duplicate struct %r (alias=%r, kept alias=%r)",
            struct.name,
            struct.alias,
            survivor.alias,
        )
        if (
            resolved.warn_on_alias_conflict
            and existing.is_aliased
            and struct.is_aliased
            and existing.alias != struct.alias
        ):
            _LOGGER.warning(
                "Struct %r has conflicting aliases %r and %r; keeping %r",
                struct.name,
                existing.alias,
                struct.alias,
                existing.alias,
            )
        survivors[struct.name] = survivor
    return tuple(survivors.values())


__all__ = ["dedupe_structs", "prefer_aliased"]
