"""Service and method descriptors."""

from __future__ import annotations

from collections.abc import Iterator

import msgspec

from serde_msgspec import StructBaseValue
from service_docs.descriptions import EMPTY_DESCRIPTION, DescriptionInfo
from service_docs.errors import SpecificationArgumentError
from service_docs.fields import FieldInfo
from service_docs.type_signatures import TypeSignature
from utils.validation import ensure_items, ensure_name


class MethodInfo(StructBaseValue, frozen=True):
    """A documented service method."""

    name: str
    return_type: TypeSignature
    parameters: tuple[FieldInfo, ...] = ()
    exception_types: tuple[TypeSignature, ...] = ()
    description: DescriptionInfo = EMPTY_DESCRIPTION

    def __post_init__(self) -> None:
        """Validate members and freeze sequences into tuples."""
        ensure_name(self.name, label="MethodInfo.name", error_type=SpecificationArgumentError)
        if not isinstance(self.return_type, TypeSignature):
            msg = f"MethodInfo {self.name!r} requires a return TypeSignature, got {self.return_type!r}"
            raise SpecificationArgumentError(msg)
        owner = f"MethodInfo({self.name!r})"
        msgspec.structs.force_setattr(
            self,
            "parameters",
            ensure_items(
                self.parameters,
                label=f"{owner}.parameters",
                item_type=FieldInfo,
                error_type=SpecificationArgumentError,
            ),
        )
        msgspec.structs.force_setattr(
            self,
            "exception_types",
            ensure_items(
                self.exception_types,
                label=f"{owner}.exception_types",
                item_type=TypeSignature,
                error_type=SpecificationArgumentError,
            ),
        )

    def find_named_types(self) -> Iterator[TypeSignature]:
        """Yield named signatures from the return, parameter and exception types."""
        yield from self.return_type.find_named_types()
        for param in self.parameters:
            yield from param.find_named_types()
        for exception_type in self.exception_types:
            yield from exception_type.find_named_types()


class ServiceInfo(StructBaseValue, frozen=True):
    """A documented service and its methods."""

    name: str
    methods: tuple[MethodInfo, ...]
    description: DescriptionInfo = EMPTY_DESCRIPTION

    def __post_init__(self) -> None:
        """Validate the name and freeze methods into a tuple."""
        ensure_name(self.name, label="ServiceInfo.name", error_type=SpecificationArgumentError)
        methods = ensure_items(
            self.methods,
            label=f"ServiceInfo({self.name!r}).methods",
            item_type=MethodInfo,
            error_type=SpecificationArgumentError,
        )
        msgspec.structs.force_setattr(self, "methods", methods)

    def find_method(self, name: str) -> MethodInfo | None:
        """Return the first method called ``name``, if any."""
        return next((method for method in self.methods if method.name == name), None)

    def find_named_types(self) -> Iterator[TypeSignature]:
        """Yield named signatures used by every method of the service."""
        for method in self.methods:
            yield from method.find_named_types()


__all__ = ["MethodInfo", "ServiceInfo"]
