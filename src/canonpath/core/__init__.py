"""Core components for canonpath."""

from .canonicalizer import canonicalize, strip_leading_noise
from .cwd import (
    WorkingDirectoryError,
    WorkingDirectoryProvider,
    OSWorkingDirectory,
    FixedWorkingDirectory,
)
from .models import Config
from .path import Path

__all__ = [
    "canonicalize",
    "strip_leading_noise",
    "WorkingDirectoryError",
    "WorkingDirectoryProvider",
    "OSWorkingDirectory",
    "FixedWorkingDirectory",
    "Config",
    "Path",
]
