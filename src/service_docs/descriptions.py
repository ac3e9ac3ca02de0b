"""Free-form documentation attached to descriptors."""

from __future__ import annotations

from enum import StrEnum

from serde_msgspec import StructBaseValue


class Markup(StrEnum):
    """Markup language of a documentation string."""

    NONE = "none"
    PLAINTEXT = "plaintext"
    MARKDOWN = "markdown"
    MERMAID = "mermaid"


class DescriptionInfo(StructBaseValue, frozen=True):
    """Documentation string and the markup it is written in."""

    doc_string: str = ""
    markup: Markup = Markup.NONE

    @classmethod
    def empty(cls) -> DescriptionInfo:
        """Return the shared empty description.

        Returns
        -------
        DescriptionInfo
            Description with no text and no markup.
        """
        return EMPTY_DESCRIPTION

    @property
    def is_empty(self) -> bool:
        """Return True when no documentation text is present."""
        return not self.doc_string


EMPTY_DESCRIPTION = DescriptionInfo()


__all__ = ["EMPTY_DESCRIPTION", "DescriptionInfo", "Markup"]
