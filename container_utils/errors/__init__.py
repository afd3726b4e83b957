"""
Error classification for container utility operations.

Lookup misses are the only runtime error kind. Usage errors stand in for
container shapes that cannot support a requested operation.
"""

from .lookup import (
    ContainerUtilsError,
    ElementNotFound,
    UnsupportedContainerError,
)

__all__ = [
    "ContainerUtilsError",
    "ElementNotFound",
    "UnsupportedContainerError",
]
