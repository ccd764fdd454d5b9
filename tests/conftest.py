"""Shared test fixtures."""

from __future__ import annotations

from collections.abc import Iterator

from loguru import logger
import pytest


@pytest.fixture
def log_messages() -> Iterator[list[str]]:
    """Capture loguru output as ``"LEVEL|message"`` strings."""
    messages: list[str] = []
    handler_id = logger.add(
        lambda message: messages.append(message.strip()),
        level="DEBUG",
        format="{level}|{message}",
    )
    yield messages
    logger.remove(handler_id)


@pytest.fixture(autouse=True)
def _clear_packaging_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Start every test without WOOLABELS_* overrides from the environment."""
    for name in (
        "WOOLABELS_SINGLE_PACKAGE_MAX",
        "WOOLABELS_DOUBLE_PACKAGE_MAX",
        "WOOLABELS_MULTIPACK",
        "WOOLABELS_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
