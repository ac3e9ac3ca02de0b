"""Descriptors for documented named types: structs, enums and exceptions."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Protocol, runtime_checkable

import msgspec

from serde_msgspec import StructBaseValue, replace
from service_docs.descriptions import EMPTY_DESCRIPTION, DescriptionInfo
from service_docs.errors import SpecificationArgumentError
from service_docs.fields import FieldInfo, freeze_fields
from service_docs.type_signatures import TypeSignature
from utils.validation import ensure_items, ensure_name


@runtime_checkable
class NamedTypeInfo(Protocol):
    """Protocol shared by every descriptor that is addressed by name."""

    @property
    def name(self) -> str:
        """Return the canonical name of the type."""
        ...

    @property
    def description(self) -> DescriptionInfo:
        """Return the documentation attached to the type."""
        ...

    def find_named_types(self) -> Iterator[TypeSignature]:
        """Yield named signatures this type refers to."""
        ...


def _ensure_alias(alias: str | None, *, owner: str) -> str | None:
    if alias is None:
        return None
    return ensure_name(alias, label=f"{owner}.alias", error_type=SpecificationArgumentError)


class StructInfo(StructBaseValue, frozen=True):
    """A documented structural type.

    ``name`` is the canonical key used to deduplicate structs within a
    specification. ``alias`` is an optional alternate display name; an
    aliased struct takes precedence over a non-aliased struct of the same
    name.
    """

    name: str
    fields: tuple[FieldInfo, ...]
    alias: str | None = None
    description: DescriptionInfo = EMPTY_DESCRIPTION

    def __post_init__(self) -> None:
        """Validate the name and alias and freeze fields into a tuple."""
        ensure_name(self.name, label="StructInfo.name", error_type=SpecificationArgumentError)
        _ensure_alias(self.alias, owner=f"StructInfo({self.name!r})")
        fields = freeze_fields(self.fields, owner=f"StructInfo({self.name!r})")
        msgspec.structs.force_setattr(self, "fields", fields)

    @property
    def is_aliased(self) -> bool:
        """Return True when an alias is attached."""
        return self.alias is not None

    @property
    def display_name(self) -> str:
        """Return the alias when present, otherwise the canonical name."""
        return self.alias if self.alias is not None else self.name

    def with_alias(self, alias: str) -> StructInfo:
        """Return a copy of this struct carrying ``alias``.

        Returns
        -------
        StructInfo
            New struct identical to this one except for its alias.
        """
        _ensure_alias(alias, owner=f"StructInfo({self.name!r})")
        return replace(self, alias=alias)

    def with_description(self, description: DescriptionInfo) -> StructInfo:
        """Return a copy of this struct with a new description."""
        return replace(self, description=description)

    def find_named_types(self) -> Iterator[TypeSignature]:
        """Yield named signatures referenced by the struct's fields."""
        for field in self.fields:
            yield from field.find_named_types()


class EnumValueInfo(StructBaseValue, frozen=True):
    """A single member of a documented enum."""

    name: str
    int_value: int | None = None
    description: DescriptionInfo = EMPTY_DESCRIPTION

    def __post_init__(self) -> None:
        """Validate the member name."""
        ensure_name(self.name, label="EnumValueInfo.name", error_type=SpecificationArgumentError)


class EnumInfo(StructBaseValue, frozen=True):
    """A documented enumeration and its members in declaration order."""

    name: str
    values: tuple[EnumValueInfo, ...]
    alias: str | None = None
    description: DescriptionInfo = EMPTY_DESCRIPTION

    def __post_init__(self) -> None:
        """Validate the name and alias and freeze values into a tuple."""
        ensure_name(self.name, label="EnumInfo.name", error_type=SpecificationArgumentError)
        _ensure_alias(self.alias, owner=f"EnumInfo({self.name!r})")
        values = ensure_items(
            self.values,
            label=f"EnumInfo({self.name!r}).values",
            item_type=EnumValueInfo,
            error_type=SpecificationArgumentError,
        )
        msgspec.structs.force_setattr(self, "values", values)

    def with_alias(self, alias: str) -> EnumInfo:
        """Return a copy of this enum carrying ``alias``."""
        _ensure_alias(alias, owner=f"EnumInfo({self.name!r})")
        return replace(self, alias=alias)

    def with_description(self, description: DescriptionInfo) -> EnumInfo:
        """Return a copy of this enum with a new description."""
        return replace(self, description=description)

    def find_named_types(self) -> Iterator[TypeSignature]:
        """Enums reference no other types."""
        return iter(())


class ExceptionInfo(StructBaseValue, frozen=True):
    """A documented exception type and the fields it carries."""

    name: str
    fields: tuple[FieldInfo, ...]
    description: DescriptionInfo = EMPTY_DESCRIPTION

    def __post_init__(self) -> None:
        """Validate the name and freeze fields into a tuple."""
        ensure_name(self.name, label="ExceptionInfo.name", error_type=SpecificationArgumentError)
        msgspec.structs.force_setattr(
            self, "fields", freeze_fields(self.fields, owner=f"ExceptionInfo({self.name!r})")
        )

    def with_description(self, description: DescriptionInfo) -> ExceptionInfo:
        """Return a copy of this exception with a new description."""
        return replace(self, description=description)

    def find_named_types(self) -> Iterator[TypeSignature]:
        """Yield named signatures referenced by the exception's fields."""
        for field in self.fields:
            yield from field.find_named_types()


__all__ = [
    "EnumInfo",
    "EnumValueInfo",
    "ExceptionInfo",
    "NamedTypeInfo",
    "StructInfo",
]
