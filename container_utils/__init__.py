"""
Container utilities - uniform lookup, insertion and cursors

One vocabulary for lookup, membership testing and insertion over
sequences, sets and maps, plus a cursor that tracks its own end.
"""

from .cursor import Cursor
from .errors import ContainerUtilsError, ElementNotFound, UnsupportedContainerError
from .insertion import (
    Inserter,
    SequenceInserter,
    SetInserter,
    copy_container,
    insert_into,
    inserter_for,
)
from .lookup import Slot, contains, find, locate, try_find
from .shapes import ContainerShape, register_shape, resolve_shape

__version__ = "0.1.0"

__all__ = [
    "ContainerShape",
    "ContainerUtilsError",
    "Cursor",
    "ElementNotFound",
    "Inserter",
    "SequenceInserter",
    "SetInserter",
    "Slot",
    "UnsupportedContainerError",
    "contains",
    "copy_container",
    "find",
    "insert_into",
    "inserter_for",
    "locate",
    "register_shape",
    "resolve_shape",
    "try_find",
]
