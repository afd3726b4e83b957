"""
Self-contained cursors over containers.

A ``Cursor`` carries its own end position, so code can hold a live place in
a container as one value and ask ``at_end()`` instead of comparing against
a separately kept end marker.

The cursor does not own its container. Structurally mutating the container
(inserting, removing, resizing) while a cursor is in use leaves the cursor
pointing at whatever now sits at its index; this is not detected.
"""

from typing import Any, Generic, Iterator, Optional, Sequence, TypeVar

from .shapes import ContainerShape, resolve_shape

T = TypeVar("T")


class Cursor(Generic[T]):
    """
    Movable position between ``begin`` and a fixed ``end`` of a sequence.

    ``advance``/``retreat`` move in place and return the cursor; the
    ``post_`` variants return a copy taken before the move. Moving never
    fails, but reading or writing ``value`` outside ``[begin, end)`` raises
    IndexError.
    """

    def __init__(self, container: Sequence[T], begin: int = 0, end: Optional[int] = None):
        self._container: Any = container
        self._keys: Optional[tuple] = None
        self._shape = ContainerShape.SEQUENCE
        self._begin = begin
        self._current = begin
        self._end = len(container) if end is None else end

    @classmethod
    def over(cls, container: Any) -> "Cursor[Any]":
        """
        Build a cursor over the whole of ``container``.

        Sequences are walked by index. Maps yield ``(key, value)`` pairs and
        accept assignment of the value; sets and other iterables yield their
        elements read-only. For these the iteration order is captured when
        the cursor is built.
        """
        shape = resolve_shape(container)
        if shape is ContainerShape.SEQUENCE:
            return cls(container)

        cursor: Cursor[Any] = cls(container, 0, 0)
        cursor._keys = tuple(container)
        cursor._shape = shape
        cursor._end = len(cursor._keys)
        return cursor

    @property
    def position(self) -> int:
        return self._current

    @property
    def end(self) -> int:
        return self._end

    def at_end(self) -> bool:
        return self._current == self._end

    def _check_bounds(self) -> None:
        if not self._begin <= self._current < self._end:
            raise IndexError(
                f"cursor position {self._current} outside [{self._begin}, {self._end})"
            )

    @property
    def value(self) -> T:
        self._check_bounds()
        if self._keys is None:
            return self._container[self._current]
        key = self._keys[self._current]
        if self._shape is ContainerShape.MAP:
            return (key, self._container[key])  # type: ignore[return-value]
        return key

    @value.setter
    def value(self, new_value: T) -> None:
        self._check_bounds()
        if self._keys is None:
            self._container[self._current] = new_value
        elif self._shape is ContainerShape.MAP:
            self._container[self._keys[self._current]] = new_value
        else:
            raise TypeError(f"{self._shape.value} cursor values are read-only")

    def advance(self, steps: int = 1) -> "Cursor[T]":
        self._current += steps
        return self

    def post_advance(self) -> "Cursor[T]":
        previous = self.copy()
        self.advance()
        return previous

    def retreat(self, steps: int = 1) -> "Cursor[T]":
        self._current -= steps
        return self

    def post_retreat(self) -> "Cursor[T]":
        previous = self.copy()
        self.retreat()
        return previous

    def __iadd__(self, steps: int) -> "Cursor[T]":
        return self.advance(steps)

    def __isub__(self, steps: int) -> "Cursor[T]":
        return self.retreat(steps)

    def copy(self) -> "Cursor[T]":
        duplicate: Cursor[T] = Cursor.__new__(type(self))
        duplicate.__dict__.update(self.__dict__)
        return duplicate

    __copy__ = copy

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Cursor):
            return NotImplemented
        return self._container is other._container and self._current == other._current

    __hash__ = None  # type: ignore[assignment]

    def __iter__(self) -> Iterator[T]:
        return self

    def __next__(self) -> T:
        if self._current >= self._end:
            raise StopIteration
        current = self.value
        self._current += 1
        return current

    def __repr__(self) -> str:
        return (
            f"Cursor({type(self._container).__name__}, "
            f"position={self._current}, end={self._end})"
        )
