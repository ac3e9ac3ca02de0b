"""Argument and collection validation utilities."""

from __future__ import annotations

from collections.abc import Iterable


def ensure_items[T](
    value: Iterable[T] | None,
    *,
    label: str,
    item_type: type[T] | tuple[type[T], ...],
    error_type: type[Exception] = TypeError,
) -> tuple[T, ...]:
    """Validate an iterable of items and freeze it into a tuple.

    Parameters
    ----------
    value
        Iterable to validate. Strings and bytes are rejected.
    label
        Descriptive label for error messages.
    item_type
        Type (or types) every item must be an instance of.
    error_type
        Exception type to raise on validation failure.

    Returns
    -------
    tuple[T, ...]
        The validated items in input order.

    Raises
    ------
    error_type
        If value is missing, is not iterable, or holds a missing or
        mistyped item.
    """
    if value is None:
        msg = f"{label} is required"
        raise error_type(msg)
    if isinstance(value, (str, bytes)) or not isinstance(value, Iterable):
        msg = f"{label} must be an iterable, got {type(value).__name__}"
        raise error_type(msg)
    items = tuple(value)
    for index, item in enumerate(items):
        if item is None:
            msg = f"{label}[{index}] is required"
            raise error_type(msg)
        if not isinstance(item, item_type):
            type_name = (
                item_type.__name__
                if isinstance(item_type, type)
                else " | ".join(t.__name__ for t in item_type)
            )
            msg = f"{label}[{index}] must be {type_name}, got {type(item).__name__}"
            raise error_type(msg)
    return items


def ensure_name(value: object, *, label: str, error_type: type[Exception] = ValueError) -> str:
    """Validate that value is a non-empty identifier string.

    Parameters
    ----------
    value
        Value to validate.
    label
        Descriptive label for error messages.
    error_type
        Exception type to raise on validation failure.

    Returns
    -------
    str
        The validated name.
    """
    if not isinstance(value, str) or not value.strip():
        msg = f"{label} must be a non-empty string, got {value!r}"
        raise error_type(msg)
    return value


__all__ = ["ensure_items", "ensure_name"]
