"""
Exceptions raised by lookup and insertion over caller-owned containers.
"""

from typing import Any, Dict, Optional


class ContainerUtilsError(Exception):
    """Base class for errors raised by the container utilities."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.context = context or {}


class ElementNotFound(ContainerUtilsError, LookupError):
    """The requested element or key is not held by the container."""

    def __init__(self, message: str, target: Any = None,
                 container_type: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.target = target
        self.container_type = container_type

    @classmethod
    def for_target(cls, container: Any, target: Any) -> "ElementNotFound":
        container_type = type(container).__name__
        return cls(
            f"{target!r} not found in {container_type}",
            target=target,
            container_type=container_type,
        )


class UnsupportedContainerError(ContainerUtilsError, TypeError):
    """The container's shape does not support the requested operation."""

    def __init__(self, message: str, container_type: Optional[str] = None,
                 operation: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.container_type = container_type
        self.operation = operation
