"""Shared pytest configuration."""

from __future__ import annotations

from collections.abc import Iterator

import pytest
import structlog


@pytest.fixture(autouse=True)
def _reset_structlog() -> Iterator[None]:
    """Undo setup_logging() so no test writes to a stream another test closed."""
    yield
    structlog.reset_defaults()


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in ("KUBEIMG_KUBECONFIG", "KUBEIMG_REQUEST_TIMEOUT", "KUBEIMG_KINDS", "KUBEIMG_LOG_LEVEL"):
        monkeypatch.delenv(key, raising=False)


@pytest.fixture(autouse=True)
def _clear_log_context() -> Iterator[None]:
    yield
    structlog.contextvars.clear_contextvars()
