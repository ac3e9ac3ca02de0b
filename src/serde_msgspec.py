"""msgspec struct bases and canonical encoding for descriptor trees."""

from __future__ import annotations

import msgspec


class StructBaseStrict(
    msgspec.Struct,
    frozen=True,
    kw_only=True,
    omit_defaults=True,
    repr_omit_defaults=True,
    forbid_unknown_fields=True,
):
    """Base struct for keyword-only settings."""


class StructBaseValue(
    msgspec.Struct,
    frozen=True,
    omit_defaults=True,
    repr_omit_defaults=True,
    forbid_unknown_fields=True,
):
    """Base struct for positional, immutable descriptor values."""


# Struct fields and mapping keys are both emitted in sorted order.
CANONICAL_JSON_ENCODER = msgspec.json.Encoder(order="sorted")


def canonical_json(obj: object) -> bytes:
    """Encode an object as JSON with a stable key order.

    Parameters
    ----------
    obj
        Struct tree or builtin payload.

    Returns
    -------
    bytes
        JSON payload whose bytes depend only on the object's content.
    """
    return CANONICAL_JSON_ENCODER.encode(obj)


def replace[T: msgspec.Struct](struct: T, **changes: object) -> T:
    """Return a copy of a frozen struct with some fields overridden."""
    return msgspec.structs.replace(struct, **changes)


__all__ = [
    "CANONICAL_JSON_ENCODER",
    "StructBaseStrict",
    "StructBaseValue",
    "canonical_json",
    "replace",
]
