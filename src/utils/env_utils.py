"""Environment variable parsing for service_docs settings."""

from __future__ import annotations

import logging
import os

_LOGGER = logging.getLogger(__name__)

_TRUE_VALUES = frozenset({"1", "true", "yes", "y", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "n", "off"})


def env_flag(name: str, *, default: bool) -> bool:
    """Read a boolean flag from the environment.

    Blank or unset variables resolve to ``default``. Unrecognized values
    also resolve to ``default`` and are logged at WARNING.

    Parameters
    ----------
    name
        Environment variable name.
    default
        Value used when the variable is unset, blank or invalid.

    Returns
    -------
    bool
        Parsed flag.
    """
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    lowered = raw.lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    _LOGGER.warning("Ignoring %s=%r; expected a boolean, using %s", name, raw, default)
    return default


__all__ = ["env_flag"]
