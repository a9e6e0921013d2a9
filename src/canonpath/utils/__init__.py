"""Utility modules for canonpath."""

from .path_utils import PathUtils, SEPARATOR
from .validator import is_canonical
from .console_base import ConsoleManager, StatusType

__all__ = ["PathUtils", "SEPARATOR", "is_canonical", "ConsoleManager", "StatusType"]
