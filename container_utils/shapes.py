"""
Container shape resolution.

Every container handed to the lookup and insertion functions is classified
once per concrete type into one of three shapes, and the matching
``ShapeTraits`` strategy is cached in a per-type dispatch table:

- SEQUENCE: ordered elements, linear scan lookup, append insertion
- SET: unique elements, native membership, native ``add``
- MAP: unique keys, native key lookup returning the associated value

Iterables that are none of these fall back to ``GenericTraits`` unless the
registry runs in strict mode.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterable, Mapping, MutableMapping, MutableSequence, MutableSet, Sequence, Set
from enum import Enum
from typing import Any, Optional

from .errors import ElementNotFound, UnsupportedContainerError
from .logging import get_logger

logger = get_logger(__name__)


class ContainerShape(Enum):
    """Structural category of a container."""
    SEQUENCE = "sequence"
    SET = "set"
    MAP = "map"
    GENERIC = "generic"


def _equals(item: Any, target: Any) -> bool:
    # Same test the builtin containers use for ``in``
    return item is target or item == target


class ShapeTraits(ABC):
    """
    Lookup and insertion algorithms for one container shape.

    A position is whatever the shape needs to get back to a matched entry:
    an index for sequences, the key for maps, the stored element for sets.
    """

    shape: ContainerShape

    def __init__(self, container_type: type, mutable: bool):
        self.container_type = container_type
        self.mutable = mutable

    @abstractmethod
    def position_of(self, container: Any, target: Any) -> Any:
        """Return the position of ``target``, raising ElementNotFound on a miss."""

    @abstractmethod
    def read(self, container: Any, position: Any) -> Any:
        """Return the element (or associated value) at ``position``."""

    def write(self, container: Any, position: Any, value: Any) -> None:
        """Replace the element (or associated value) at ``position``."""
        raise UnsupportedContainerError(
            f"{self.container_type.__name__} entries cannot be assigned in place",
            container_type=self.container_type.__name__,
            operation="write",
        )

    def find(self, container: Any, target: Any) -> Any:
        return self.read(container, self.position_of(container, target))

    def contains(self, container: Any, target: Any) -> bool:
        try:
            self.find(container, target)
        except ElementNotFound:
            return False
        return True

    def insert(self, container: Any, value: Any) -> Any:
        """Insert ``value`` and return the element that was inserted."""
        raise self._unsupported("insert")

    def _unsupported(self, operation: str) -> UnsupportedContainerError:
        name = self.container_type.__name__
        return UnsupportedContainerError(
            f"{self.shape.value} container {name} does not support {operation}",
            container_type=name,
            operation=operation,
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.container_type.__name__}, mutable={self.mutable})"


class SequenceTraits(ShapeTraits):
    """Linear scan lookup and append-at-end insertion (``add`` for sorted sequences)."""

    shape = ContainerShape.SEQUENCE

    def __init__(self, container_type: type, mutable: bool):
        super().__init__(container_type, mutable)
        # ``in`` on text and byte strings matches substrings, not elements
        self._native_in = not issubclass(container_type, (str, bytes, bytearray))
        self._insert_method = "append"

    def position_of(self, container: Any, target: Any) -> int:
        for index, item in enumerate(container):
            if _equals(item, target):
                return index
        raise ElementNotFound.for_target(container, target)

    def read(self, container: Any, position: int) -> Any:
        return container[position]

    def write(self, container: Any, position: int, value: Any) -> None:
        if not self.mutable:
            raise self._unsupported("write")
        container[position] = value

    def contains(self, container: Any, target: Any) -> bool:
        if self._native_in:
            return target in container
        return any(_equals(item, target) for item in container)

    def insert(self, container: Any, value: Any) -> Any:
        if not self.mutable:
            raise self._unsupported("insert")
        if self._insert_method == "append":
            try:
                container.append(value)
            except NotImplementedError:
                # Sorted sequences (SortedList) place values with ``add``
                if not hasattr(self.container_type, "add"):
                    raise self._unsupported("insert") from None
                self._insert_method = "add"
            else:
                return container[-1]
        container.add(value)
        return value


class SetTraits(ShapeTraits):
    """Native membership lookup and native insertion."""

    shape = ContainerShape.SET

    def position_of(self, container: Any, target: Any) -> Any:
        if target not in container:
            raise ElementNotFound.for_target(container, target)
        return target

    def read(self, container: Any, position: Any) -> Any:
        return position

    def contains(self, container: Any, target: Any) -> bool:
        return target in container

    def insert(self, container: Any, value: Any) -> Any:
        if not self.mutable:
            raise self._unsupported("insert")
        container.add(value)
        return value

    def stored_instance(self, container: Any, value: Any) -> Any:
        """Return the member equal to ``value`` that ``container`` holds. Scans."""
        for item in container:
            if _equals(item, value):
                return item
        raise ElementNotFound.for_target(container, value)


class MapTraits(ShapeTraits):
    """Native key lookup; reads and writes the associated value."""

    shape = ContainerShape.MAP

    def position_of(self, container: Any, target: Any) -> Any:
        # ``in`` rather than ``[]`` so defaultdict never grows on a miss
        if target not in container:
            raise ElementNotFound.for_target(container, target)
        return target

    def read(self, container: Any, position: Any) -> Any:
        return container[position]

    def write(self, container: Any, position: Any, value: Any) -> None:
        if not self.mutable:
            raise self._unsupported("write")
        container[position] = value

    def contains(self, container: Any, target: Any) -> bool:
        return target in container


class GenericTraits(ShapeTraits):
    """Fallback for iterables with no recognised shape."""

    shape = ContainerShape.GENERIC

    def __init__(self, container_type: type, mutable: bool):
        super().__init__(container_type, mutable)
        if hasattr(container_type, "append"):
            self._insert_method: Optional[str] = "append"
        elif hasattr(container_type, "add"):
            self._insert_method = "add"
        else:
            self._insert_method = None

    def position_of(self, container: Any, target: Any) -> Any:
        for item in container:
            if _equals(item, target):
                return item
        raise ElementNotFound.for_target(container, target)

    def read(self, container: Any, position: Any) -> Any:
        return position

    def insert(self, container: Any, value: Any) -> Any:
        if self._insert_method is None:
            raise self._unsupported("insert")
        getattr(container, self._insert_method)(value)
        return value


_TRAITS_BY_SHAPE: dict[ContainerShape, type[ShapeTraits]] = {
    ContainerShape.SEQUENCE: SequenceTraits,
    ContainerShape.SET: SetTraits,
    ContainerShape.MAP: MapTraits,
    ContainerShape.GENERIC: GenericTraits,
}

_MUTABLE_ABC: dict[ContainerShape, Optional[type]] = {
    ContainerShape.SEQUENCE: MutableSequence,
    ContainerShape.SET: MutableSet,
    ContainerShape.MAP: MutableMapping,
    ContainerShape.GENERIC: None,
}


class ShapeRegistry:
    """Per-type dispatch table from container types to shape traits."""

    def __init__(self, strict: bool = False, log_misses: bool = False):
        self.strict = strict
        self.log_misses = log_misses
        self._explicit: dict[type, ContainerShape] = {}
        self._cache: dict[type, ShapeTraits] = {}

    def configure(self, strict: Optional[bool] = None, log_misses: Optional[bool] = None) -> None:
        if strict is not None and strict != self.strict:
            self.strict = strict
            self._cache.clear()
        if log_misses is not None:
            self.log_misses = log_misses

    def register(self, container_type: type, shape: ContainerShape) -> None:
        """Force ``container_type`` (and its subclasses) to resolve to ``shape``."""
        self._explicit[container_type] = ContainerShape(shape)
        self._cache.clear()

    def traits_for(self, container: Any) -> ShapeTraits:
        container_type = type(container)
        traits = self._cache.get(container_type)
        if traits is None:
            traits = self._resolve(container_type)
            self._cache[container_type] = traits
        return traits

    def resolved_types(self) -> list[type]:
        return list(self._cache)

    def _resolve(self, container_type: type) -> ShapeTraits:
        shape = self._classify(container_type)
        mutable_abc = _MUTABLE_ABC[shape]
        if mutable_abc is None:
            mutable = True
        else:
            mutable = issubclass(container_type, mutable_abc)

        traits = _TRAITS_BY_SHAPE[shape](container_type, mutable)
        logger.debug(
            "Container shape resolved",
            container_type=container_type.__name__,
            shape=shape.value,
            mutable=mutable,
        )
        return traits

    def _classify(self, container_type: type) -> ContainerShape:
        for klass in container_type.__mro__:
            if klass in self._explicit:
                return self._explicit[klass]

        if issubclass(container_type, Mapping):
            return ContainerShape.MAP
        if issubclass(container_type, Set):
            return ContainerShape.SET
        if issubclass(container_type, Sequence):
            return ContainerShape.SEQUENCE

        if issubclass(container_type, Iterable) and not self.strict:
            return ContainerShape.GENERIC

        raise UnsupportedContainerError(
            f"{container_type.__name__} has no recognised container shape",
            container_type=container_type.__name__,
            operation="resolve",
        )


default_registry = ShapeRegistry()


def resolve_shape(container: Any) -> ContainerShape:
    """Return the shape ``container`` resolves to."""
    return default_registry.traits_for(container).shape


def register_shape(container_type: type, shape: ContainerShape) -> None:
    """Register an explicit shape for a container type."""
    default_registry.register(container_type, shape)
