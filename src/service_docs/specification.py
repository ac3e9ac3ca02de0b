"""The service specification aggregate."""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING

import msgspec

from serde_msgspec import StructBaseValue
from service_docs.config import ServiceDocsSettings, resolve_settings
from service_docs.dedup import dedupe_structs
from service_docs.errors import SpecificationArgumentError
from service_docs.named_types import EnumInfo, ExceptionInfo, StructInfo
from service_docs.services import ServiceInfo
from utils.hashing import hash_canonical_json
from utils.validation import ensure_items

if TYPE_CHECKING:
    from service_docs.type_signatures import TypeSignature

_LOGGER = logging.getLogger(__name__)

type NamedTypeResolver = Callable[[TypeSignature], StructInfo | EnumInfo | ExceptionInfo | None]


def _by_name[T: (ServiceInfo, EnumInfo, StructInfo, ExceptionInfo)](items: Iterable[T]) -> list[T]:
    return sorted(items, key=lambda item: item.name)


def _find_by_name[T: (ServiceInfo, EnumInfo, StructInfo, ExceptionInfo)](
    items: tuple[T, ...],
    name: str,
) -> T | None:
    return next((item for item in items if item.name == name), None)


class ServiceSpecification(StructBaseValue, frozen=True):
    """Documentation metadata for a set of services.

    Construction freezes every collection into a tuple and collapses
    structs that share a canonical name, keeping an aliased entry whenever
    one exists for that name. The remaining collections keep their input
    order and contents.
    """

    services: tuple[ServiceInfo, ...]
    enums: tuple[EnumInfo, ...]
    structs: tuple[StructInfo, ...]
    exceptions: tuple[ExceptionInfo, ...]

    def __post_init__(self) -> None:
        """Validate the inputs and normalize structs."""
        services = ensure_items(
            self.services,
            label="services",
            item_type=ServiceInfo,
            error_type=SpecificationArgumentError,
        )
        enums = ensure_items(
            self.enums,
            label="enums",
            item_type=EnumInfo,
            error_type=SpecificationArgumentError,
        )
        exceptions = ensure_items(
            self.exceptions,
            label="exceptions",
            item_type=ExceptionInfo,
            error_type=SpecificationArgumentError,
        )
        msgspec.structs.force_setattr(self, "services", services)
        msgspec.structs.force_setattr(self, "enums", enums)
        msgspec.structs.force_setattr(self, "structs", dedupe_structs(self.structs))
        msgspec.structs.force_setattr(self, "exceptions", exceptions)

    @classmethod
    def empty(cls) -> ServiceSpecification:
        """Return a specification with no entries."""
        return cls((), (), (), ())

    @classmethod
    def merge(cls, specs: Iterable[ServiceSpecification]) -> ServiceSpecification:
        """Combine several specifications into one.

        Collections are concatenated in input order, so struct
        deduplication applies across the merged specifications.

        Parameters
        ----------
        specs
            Specifications to merge.

        Returns
        -------
        ServiceSpecification
            Merged specification.
        """
        items = ensure_items(
            specs,
            label="specs",
            item_type=ServiceSpecification,
            error_type=SpecificationArgumentError,
        )
        return cls(
            [service for spec in items for service in spec.services],
            [enum for spec in items for enum in spec.enums],
            [struct for spec in items for struct in spec.structs],
            [exception for spec in items for exception in spec.exceptions],
        )

    @classmethod
    def generate(
        cls,
        services: Iterable[ServiceInfo],
        resolver: NamedTypeResolver,
        *,
        settings: ServiceDocsSettings | None = None,
    ) -> ServiceSpecification:
        """Build a specification from services and a named-type resolver.

        Every named type reachable from the services, including types
        referenced by resolved structs and exceptions, is resolved once.

        Parameters
        ----------
        services
            Service descriptors to document.
        resolver
            Callable mapping a named signature to its descriptor, or
            ``None`` when the type should be left undocumented.
        settings
            Optional settings; resolved from the environment when omitted.

        Returns
        -------
        ServiceSpecification
            Specification holding the services and every resolved type.

        Raises
        ------
        SpecificationArgumentError
            If the resolver returns something other than a struct, enum,
            exception or ``None``.
        """
        service_items = ensure_items(
            services,
            label="services",
            item_type=ServiceInfo,
            error_type=SpecificationArgumentError,
        )
        resolved_settings = settings if settings is not None else resolve_settings()
        pending = deque(sig for service in service_items for sig in service.find_named_types())
        visited: set[str] = set()
        enums: list[EnumInfo] = []
        structs: list[StructInfo] = []
        exceptions: list[ExceptionInfo] = []
        while pending:
            signature = pending.popleft()
            if signature.name in visited:
                continue
            visited.add(signature.name)
            info = resolver(signature)
            if info is None:
                _LOGGER.debug("No descriptor resolved for named type %r", signature.name)
                continue
            if isinstance(info, StructInfo):
                structs.append(info)
            elif isinstance(info, EnumInfo):
                enums.append(info)
            elif isinstance(info, ExceptionInfo):
                exceptions.append(info)
            else:
                msg = (
                    f"Resolver returned {type(info).__name__} for named type "
                    f"{signature.name!r}; expected StructInfo, EnumInfo or ExceptionInfo"
                )
                raise SpecificationArgumentError(msg)
            pending.extend(info.find_named_types())
        spec = cls(service_items, enums, structs, exceptions)
        if resolved_settings.sort_generated:
            return spec.sorted_by_name()
        return spec

    def sorted_by_name(self) -> ServiceSpecification:
        """Return a copy with every collection sorted by name."""
        return ServiceSpecification(
            _by_name(self.services),
            _by_name(self.enums),
            _by_name(self.structs),
            _by_name(self.exceptions),
        )

    def find_service(self, name: str) -> ServiceInfo | None:
        """Return the service called ``name``, if any."""
        return _find_by_name(self.services, name)

    def find_enum(self, name: str) -> EnumInfo | None:
        """Return the enum called ``name``, if any."""
        return _find_by_name(self.enums, name)

    def find_struct(self, name: str) -> StructInfo | None:
        """Return the struct called ``name``, if any."""
        return _find_by_name(self.structs, name)

    def find_exception(self, name: str) -> ExceptionInfo | None:
        """Return the exception called ``name``, if any."""
        return _find_by_name(self.exceptions, name)

    def fingerprint(self) -> str:
        """Return a deterministic content fingerprint.

        Returns
        -------
        str
            SHA-256 hexdigest of the canonical JSON encoding.
        """
        return hash_canonical_json(self)


__all__ = ["NamedTypeResolver", "ServiceSpecification"]
