"""Error types for service documentation descriptors."""

from __future__ import annotations


class SpecificationArgumentError(ValueError):
    """Raised when a descriptor or specification input is missing or invalid."""


__all__ = ["SpecificationArgumentError"]
