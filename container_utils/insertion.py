"""
Uniform insertion into sequence and set containers.

``insert_into`` uses the container's natural insertion: sequences append at
the end (sorted sequences add), sets add with their own placement rule.
``Inserter`` wraps a container behind a single ``insert`` method so callers
can collect results without knowing which concrete container they were handed.
"""

from abc import ABC, abstractmethod
from typing import Any, Generic, Iterable, TypeVar

from .errors import UnsupportedContainerError
from .logging import get_logger
from .shapes import ContainerShape, ShapeTraits, default_registry

T = TypeVar("T")

logger = get_logger(__name__)


def _insert(traits: ShapeTraits, container: Any, value: Any) -> Any:
    try:
        return traits.insert(container, value)
    except UnsupportedContainerError as e:
        logger.warning(
            "Insertion rejected",
            container_type=e.container_type,
            shape=traits.shape.value,
        )
        raise


def insert_into(container: Any, value: Any) -> None:
    """
    Insert ``value`` into ``container`` in place.

    Sequences append ``value`` as their new last element. Sets add it, which
    leaves the set unchanged when an equal element is already present.

    Raises:
        UnsupportedContainerError: ``container`` is a map or is immutable
    """
    _insert(default_registry.traits_for(container), container, value)


def copy_container(source: Iterable[Any], target: Any) -> None:
    """Insert every element of ``source``, in iteration order, into ``target``."""
    traits = default_registry.traits_for(target)
    for element in source:
        _insert(traits, target, element)


class Inserter(ABC, Generic[T]):
    """Something a value can be inserted into."""

    @abstractmethod
    def insert(self, value: T) -> T:
        """Insert ``value`` and return the element now held for it."""
        pass


class _ContainerInserter(Inserter[T]):
    shape: ContainerShape

    def __init__(self, container: Any):
        traits = default_registry.traits_for(container)
        if traits.shape is not self.shape or not traits.mutable:
            name = type(container).__name__
            raise UnsupportedContainerError(
                f"{type(self).__name__} needs a mutable {self.shape.value} container, got {name}",
                container_type=name,
                operation="insert",
            )
        self.container = container
        self._traits = traits

    def insert(self, value: T) -> T:
        return _insert(self._traits, self.container, value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({type(self.container).__name__})"


class SequenceInserter(_ContainerInserter[T]):
    """Appends to a mutable sequence (adds to a sorted one); returns the inserted element."""

    shape = ContainerShape.SEQUENCE


class SetInserter(_ContainerInserter[T]):
    """
    Adds to a mutable set.

    Returns the element the set holds for the value, which is the
    pre-existing instance when an equal value was already present.
    """

    shape = ContainerShape.SET

    def insert(self, value: T) -> T:
        if value in self.container:
            return self._traits.stored_instance(self.container, value)
        return _insert(self._traits, self.container, value)


_INSERTERS: dict[ContainerShape, type[_ContainerInserter]] = {
    ContainerShape.SEQUENCE: SequenceInserter,
    ContainerShape.SET: SetInserter,
}


def inserter_for(container: Any) -> Inserter[Any]:
    """Return the inserter matching ``container``'s shape."""
    shape = default_registry.traits_for(container).shape
    inserter_class = _INSERTERS.get(shape)
    if inserter_class is None:
        name = type(container).__name__
        raise UnsupportedContainerError(
            f"no inserter for {shape.value} container {name}",
            container_type=name,
            operation="insert",
        )
    return inserter_class(container)
