"""Field descriptors shared by structs, exceptions and method parameters."""

from __future__ import annotations

from collections.abc import Iterator
from enum import StrEnum

import msgspec

from serde_msgspec import StructBaseValue
from service_docs.descriptions import EMPTY_DESCRIPTION, DescriptionInfo
from service_docs.errors import SpecificationArgumentError
from service_docs.type_signatures import TypeSignature
from utils.validation import ensure_items, ensure_name


class FieldLocation(StrEnum):
    """Where a field is carried in a request."""

    PATH = "path"
    HEADER = "header"
    QUERY = "query"
    BODY = "body"
    UNSPECIFIED = "unspecified"


class FieldRequirement(StrEnum):
    """Whether a field must be present."""

    REQUIRED = "required"
    OPTIONAL = "optional"
    UNSPECIFIED = "unspecified"


class FieldInfo(StructBaseValue, frozen=True):
    """A named, typed member of a struct, exception or parameter list."""

    name: str
    type_signature: TypeSignature
    location: FieldLocation = FieldLocation.UNSPECIFIED
    requirement: FieldRequirement = FieldRequirement.UNSPECIFIED
    description: DescriptionInfo = EMPTY_DESCRIPTION
    child_fields: tuple[FieldInfo, ...] = ()

    def __post_init__(self) -> None:
        """Validate required members and freeze child fields."""
        ensure_name(self.name, label="FieldInfo.name", error_type=SpecificationArgumentError)
        if not isinstance(self.type_signature, TypeSignature):
            msg = f"FieldInfo {self.name!r} requires a TypeSignature, got {self.type_signature!r}"
            raise SpecificationArgumentError(msg)
        children = ensure_items(
            self.child_fields,
            label=f"FieldInfo({self.name!r}).child_fields",
            item_type=FieldInfo,
            error_type=SpecificationArgumentError,
        )
        msgspec.structs.force_setattr(self, "child_fields", children)

    def find_named_types(self) -> Iterator[TypeSignature]:
        """Yield named signatures used by this field and its children."""
        yield from self.type_signature.find_named_types()
        for child in self.child_fields:
            yield from child.find_named_types()


def freeze_fields(fields: object, *, owner: str) -> tuple[FieldInfo, ...]:
    """Validate a field sequence for a descriptor and return it as a tuple.

    Returns
    -------
    tuple[FieldInfo, ...]
        Fields in declaration order.
    """
    return ensure_items(
        fields,  # type: ignore[arg-type]
        label=f"{owner}.fields",
        item_type=FieldInfo,
        error_type=SpecificationArgumentError,
    )


__all__ = ["FieldInfo", "FieldLocation", "FieldRequirement", "freeze_fields"]
