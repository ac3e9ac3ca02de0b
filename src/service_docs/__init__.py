"""Immutable descriptors for service documentation."""

from service_docs.config import ServiceDocsSettings, resolve_settings
from service_docs.dedup import dedupe_structs, prefer_aliased
from service_docs.descriptions import DescriptionInfo, Markup
from service_docs.errors import SpecificationArgumentError
from service_docs.fields import FieldInfo, FieldLocation, FieldRequirement
from service_docs.named_types import EnumInfo, EnumValueInfo, ExceptionInfo, NamedTypeInfo, StructInfo
from service_docs.services import MethodInfo, ServiceInfo
from service_docs.specification import NamedTypeResolver, ServiceSpecification
from service_docs.type_signatures import TypeSignature, TypeSignatureKind

__all__ = [
    "DescriptionInfo",
    "EnumInfo",
    "EnumValueInfo",
    "ExceptionInfo",
    "FieldInfo",
    "FieldLocation",
    "FieldRequirement",
    "Markup",
    "MethodInfo",
    "NamedTypeInfo",
    "NamedTypeResolver",
    "ServiceDocsSettings",
    "ServiceInfo",
    "ServiceSpecification",
    "SpecificationArgumentError",
    "StructInfo",
    "TypeSignature",
    "TypeSignatureKind",
    "dedupe_structs",
    "prefer_aliased",
    "resolve_settings",
]
