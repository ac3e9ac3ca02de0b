"""Shared utilities for service_docs."""

from utils.env_utils import env_flag
from utils.hashing import hash_canonical_json
from utils.validation import ensure_items, ensure_name

__all__ = ["ensure_items", "ensure_name", "env_flag", "hash_canonical_json"]
