"""Shared fixtures for service_docs unit tests."""

from __future__ import annotations

import pytest

from service_docs.config import SORT_GENERATED_ENV, WARN_ALIAS_CONFLICT_ENV


@pytest.fixture(autouse=True)
def _clean_service_docs_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Isolate tests from service_docs settings in the caller's environment."""
    monkeypatch.delenv(WARN_ALIAS_CONFLICT_ENV, raising=False)
    monkeypatch.delenv(SORT_GENERATED_ENV, raising=False)
