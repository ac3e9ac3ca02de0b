"""Environment-driven settings for service documentation assembly."""

from __future__ import annotations

from serde_msgspec import StructBaseStrict
from utils.env_utils import env_flag

WARN_ALIAS_CONFLICT_ENV = "SERVICE_DOCS_WARN_ALIAS_CONFLICT"
SORT_GENERATED_ENV = "SERVICE_DOCS_SORT_GENERATED"


class ServiceDocsSettings(StructBaseStrict, frozen=True):
    """Resolved service documentation settings.

    Settings only affect diagnostics and presentation order; they never
    change which struct survives deduplication.
    """

    warn_on_alias_conflict: bool = True
    sort_generated: bool = False


def resolve_settings() -> ServiceDocsSettings:
    """Resolve settings from the process environment.

    Returns
    -------
    ServiceDocsSettings
        Settings with invalid values replaced by their defaults.
    """
    return ServiceDocsSettings(
        warn_on_alias_conflict=env_flag(WARN_ALIAS_CONFLICT_ENV, default=True),
        sort_generated=env_flag(SORT_GENERATED_ENV, default=False),
    )


__all__ = [
    "SORT_GENERATED_ENV",
    "WARN_ALIAS_CONFLICT_ENV",
    "ServiceDocsSettings",
    "resolve_settings",
]
