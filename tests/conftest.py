"""Pytest configuration and shared fixtures."""

from collections.abc import Iterator
from pathlib import Path
from typing import Any

import pytest
import structlog

from component_class import Component
from component_class.testing import StubComponentManager
from component_class.utils.logging import get_logger


class Foo(Component):
    """Concrete component without extra behavior."""


class DummyLogger:
    """Logger component handing out structlog loggers."""

    def __init__(self) -> None:
        self.created: list[str] = []

    def create(self, name: str) -> Any:
        self.created.append(name)
        return get_logger(name)


@pytest.fixture(autouse=True)
def reset_structlog() -> Iterator[None]:
    """Restore structlog defaults after each test."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def manager() -> StubComponentManager:
    """Create an empty stub manager."""
    return StubComponentManager()


@pytest.fixture
def foo(manager: StubComponentManager) -> Foo:
    """Create a bare component."""
    return Foo(manager)


@pytest.fixture
def dummy_logger() -> DummyLogger:
    """Create a logger component."""
    return DummyLogger()


@pytest.fixture
def write_yaml(tmp_path: Path) -> Any:
    """Return a helper writing YAML text to a file under tmp_path."""

    def _write(content: str, name: str = "components.yaml") -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write
