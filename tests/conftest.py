"""Pytest configuration and shared fixtures."""

import pytest
from typing import Any, Dict, List, Set

from container_utils.shapes import default_registry


@pytest.fixture(autouse=True)
def reset_registry():
    """Restore the module-level registry settings after each test."""
    strict, log_misses = default_registry.strict, default_registry.log_misses
    explicit = dict(default_registry._explicit)
    yield
    default_registry._explicit.clear()
    default_registry._explicit.update(explicit)
    default_registry.configure(strict=strict, log_misses=log_misses)
    default_registry._cache.clear()


@pytest.fixture
def sample_sequence() -> List[int]:
    """Sequence used throughout the lookup scenarios."""
    return [3, 1, 4]


@pytest.fixture
def sample_map() -> Dict[str, int]:
    """Map used throughout the lookup scenarios."""
    return {"a": 1, "b": 2}


@pytest.fixture
def sample_set() -> Set[str]:
    """Set of short words."""
    return {"alpha", "beta", "gamma"}


class Tagged:
    """Value equal by ``key`` but distinguishable by identity."""

    def __init__(self, key: Any, tag: str = ""):
        self.key = key
        self.tag = tag

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Tagged) and other.key == self.key

    def __hash__(self) -> int:
        return hash(self.key)

    def __repr__(self) -> str:
        return f"Tagged({self.key!r}, {self.tag!r})"


class Bag:
    """Iterable with no Sequence, Set or Mapping ABC behind it."""

    def __init__(self, *items: Any):
        self.items = list(items)

    def __iter__(self):
        return iter(self.items)

    def append(self, item: Any) -> None:
        self.items.append(item)


@pytest.fixture
def tagged_factory():
    """Factory for identity-distinguishable values."""
    return Tagged


@pytest.fixture
def bag_factory():
    """Factory for shape-less iterable containers."""
    return Bag


class Counted:
    """Hashable value that counts how often ``__eq__`` runs."""

    eq_calls = 0

    def __init__(self, key: Any):
        self.key = key

    def __eq__(self, other: object) -> bool:
        type(self).eq_calls += 1
        return isinstance(other, Counted) and other.key == self.key

    def __hash__(self) -> int:
        return hash(self.key)


@pytest.fixture
def counted_factory():
    """Factory for values whose equality comparisons are counted."""
    Counted.eq_calls = 0
    yield Counted
    Counted.eq_calls = 0
