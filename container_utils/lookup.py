"""
Uniform lookup over sequence, set and map containers.

Two failure contracts are offered through distinct names so a call site
shows which one it relies on:

- ``find`` / ``locate`` raise ``ElementNotFound`` when nothing matches
- ``try_find`` returns an absent value instead

For maps the target is a key and the result is the associated value.
"""

from typing import Any, Optional, TypeVar

from .errors import ElementNotFound
from .logging import get_lookup_logger
from .shapes import ContainerShape, ShapeTraits, default_registry

T = TypeVar("T")

logger = get_lookup_logger(__name__)


class Slot:
    """
    Live reference to one matched entry of a container.

    Reading ``value`` goes back to the container, and assigning it writes
    through: by index for sequences, by key for maps. Set entries cannot be
    reassigned. A slot is invalidated by the same structural mutations that
    would shift the entry's index or remove its key; this is not checked.
    """

    __slots__ = ("container", "position", "_traits")

    def __init__(self, container: Any, position: Any, traits: ShapeTraits):
        self.container = container
        self.position = position
        self._traits = traits

    @property
    def shape(self) -> ContainerShape:
        return self._traits.shape

    @property
    def value(self) -> Any:
        return self._traits.read(self.container, self.position)

    @value.setter
    def value(self, new_value: Any) -> None:
        self._traits.write(self.container, self.position, new_value)

    def __repr__(self) -> str:
        return f"Slot({self._traits.shape.value}, position={self.position!r})"


def _miss(error: ElementNotFound) -> None:
    if default_registry.log_misses:
        logger.debug(
            "Lookup miss",
            target=repr(error.target),
            container_type=error.container_type,
        )


def find(container: Any, target: Any) -> Any:
    """
    Return the element of ``container`` equal to ``target``.

    Sequences are scanned in order and the first equal element wins. Sets
    answer membership natively and return ``target``, which equals the member. Maps look
    ``target`` up as a key and return the associated value.

    Raises:
        ElementNotFound: nothing in ``container`` matches ``target``
    """
    traits = default_registry.traits_for(container)
    try:
        return traits.find(container, target)
    except ElementNotFound as e:
        _miss(e)
        raise


def try_find(container: Any, target: Any, default: Optional[T] = None) -> Any:
    """Like ``find``, but return ``default`` instead of raising on a miss."""
    traits = default_registry.traits_for(container)
    try:
        return traits.find(container, target)
    except ElementNotFound as e:
        _miss(e)
        return default


def locate(container: Any, target: Any) -> Slot:
    """
    Return a ``Slot`` referring to the entry that ``find`` would return.

    Raises:
        ElementNotFound: nothing in ``container`` matches ``target``
    """
    traits = default_registry.traits_for(container)
    try:
        position = traits.position_of(container, target)
    except ElementNotFound as e:
        _miss(e)
        raise
    return Slot(container, position, traits)


def contains(container: Any, target: Any) -> bool:
    """
    Return True when ``target`` is in ``container`` (as a key, for maps).

    Sequence, set and map shapes answer with the container's own membership
    test. Only containers with no recognised shape fall back to attempting
    a lookup.
    """
    return default_registry.traits_for(container).contains(container, target)
