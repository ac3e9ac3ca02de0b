"""Type signatures referenced by fields, methods and exceptions."""

from __future__ import annotations

from collections.abc import Iterator
from enum import StrEnum

import msgspec

from serde_msgspec import StructBaseValue
from service_docs.errors import SpecificationArgumentError
from utils.validation import ensure_items, ensure_name


class TypeSignatureKind(StrEnum):
    """Shape of a type signature."""

    BASE = "base"
    NAMED = "named"
    OPTIONAL = "optional"
    ITERABLE = "iterable"
    MAP = "map"
    CONTAINER = "container"


_PARAMETERIZED = frozenset(
    {
        TypeSignatureKind.OPTIONAL,
        TypeSignatureKind.ITERABLE,
        TypeSignatureKind.MAP,
        TypeSignatureKind.CONTAINER,
    }
)


class TypeSignature(StructBaseValue, frozen=True):
    """A type as it appears in documentation.

    Base and named signatures are leaves. Parameterized signatures
    (optional, iterable, map, container) hold their type parameters in
    declaration order.
    """

    kind: TypeSignatureKind
    name: str
    parameters: tuple[TypeSignature, ...] = ()

    def __post_init__(self) -> None:
        """Validate kind and name, and freeze parameters into a tuple."""
        ensure_name(self.name, label="TypeSignature.name", error_type=SpecificationArgumentError)
        try:
            kind = TypeSignatureKind(self.kind)
        except (TypeError, ValueError) as exc:
            msg = f"Unknown kind {self.kind!r} for type signature {self.name!r}"
            raise SpecificationArgumentError(msg) from exc
        params = ensure_items(
            self.parameters,
            label="TypeSignature.parameters",
            item_type=TypeSignature,
            error_type=SpecificationArgumentError,
        )
        if kind in _PARAMETERIZED and not params:
            msg = f"{kind} type signature {self.name!r} requires type parameters"
            raise SpecificationArgumentError(msg)
        if kind not in _PARAMETERIZED and params:
            msg = f"{kind} type signature {self.name!r} cannot have type parameters"
            raise SpecificationArgumentError(msg)
        msgspec.structs.force_setattr(self, "kind", kind)
        msgspec.structs.force_setattr(self, "parameters", params)

    @classmethod
    def base(cls, name: str) -> TypeSignature:
        """Return a signature for a built-in type such as ``string``."""
        return cls(TypeSignatureKind.BASE, name)

    @classmethod
    def named(cls, name: str) -> TypeSignature:
        """Return a signature for a documented struct, enum or exception."""
        return cls(TypeSignatureKind.NAMED, name)

    @classmethod
    def optional(cls, parameter: TypeSignature) -> TypeSignature:
        """Return ``optional<parameter>``."""
        return cls(TypeSignatureKind.OPTIONAL, "optional", (parameter,))

    @classmethod
    def iterable(cls, name: str, element: TypeSignature) -> TypeSignature:
        """Return an iterable signature such as ``list<element>``."""
        return cls(TypeSignatureKind.ITERABLE, name, (element,))

    @classmethod
    def map(cls, key: TypeSignature, value: TypeSignature) -> TypeSignature:
        """Return ``map<key, value>``."""
        return cls(TypeSignatureKind.MAP, "map", (key, value))

    @classmethod
    def container(cls, name: str, *parameters: TypeSignature) -> TypeSignature:
        """Return a generic container signature such as ``future<T>``."""
        return cls(TypeSignatureKind.CONTAINER, name, parameters)

    @property
    def signature(self) -> str:
        """Return the rendered signature, e.g. ``map<string, list<Foo>>``."""
        if not self.parameters:
            return self.name
        rendered = ", ".join(param.signature for param in self.parameters)
        return f"{self.name}<{rendered}>"

    @property
    def is_named(self) -> bool:
        """Return True for signatures naming a documented type."""
        return self.kind == TypeSignatureKind.NAMED

    def find_named_types(self) -> Iterator[TypeSignature]:
        """Yield every named signature reachable from this one.

        Yields
        ------
        TypeSignature
            Named signatures in depth-first, declaration order.
        """
        if self.is_named:
            yield self
            return
        for param in self.parameters:
            yield from param.find_named_types()

    def __str__(self) -> str:
        return self.signature


__all__ = ["TypeSignature", "TypeSignatureKind"]
