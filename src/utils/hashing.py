"""Content hashing over canonical msgspec encodings."""

from __future__ import annotations

import hashlib

from serde_msgspec import canonical_json


def hash_canonical_json(payload: object) -> str:
    """Return the SHA-256 hexdigest of a payload's canonical JSON form.

    Parameters
    ----------
    payload
        Struct tree or builtin payload.

    Returns:
    -------
    str
        64-character hexdigest; equal payloads hash equal.
    """
    return hashlib.sha256(canonical_json(payload)).hexdigest()


__all__ = ["hash_canonical_json"]
