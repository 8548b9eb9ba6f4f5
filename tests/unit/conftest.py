"""Shared test fixtures."""

import sys
from collections.abc import Iterator
from pathlib import Path

import pytest
from loguru import logger

from dynalist_api.client import DynalistClient
from tests.unit.fakes import FakeSession


@pytest.fixture(autouse=True)
def _restore_logging() -> Iterator[None]:
    """Put loguru back to its import-time state after each test."""
    yield
    logger.remove()
    logger.add(sys.stderr)
    logger.disable("dynalist_api")


@pytest.fixture
def session() -> FakeSession:
    return FakeSession()


@pytest.fixture
def client(session: FakeSession) -> DynalistClient:
    return DynalistClient("test-token", session=session)


@pytest.fixture
def no_token(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Iterator[None]:
    """Hide every token source."""
    monkeypatch.delenv("DYNALIST_TOKEN", raising=False)
    monkeypatch.setattr("dynalist_api.config.API_TOKEN_FILES", [tmp_path / "missing.txt"])
    yield
