"""Shared fixtures for coval tests."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from coval import HookRegistry, set_hook_registry


@pytest.fixture(autouse=True)
def hook_registry() -> Iterator[HookRegistry]:
    """Fresh context-default hook registry for every test."""
    registry = HookRegistry()
    set_hook_registry(registry)
    yield registry
    registry.clear()
