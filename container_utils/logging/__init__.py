"""
Logging configuration and utilities for the container utilities.
"""
from .config import configure_logging, get_logger, get_lookup_logger

__all__ = ["configure_logging", "get_logger", "get_lookup_logger"]
