"""
Working directory providers.

The path library never reads the environment directly. Resolving a
relative path goes through a WorkingDirectoryProvider so callers (and
tests) can decide where the working directory comes from.
"""

import logging
import os
from abc import ABC, abstractmethod

from ..utils.path_utils import SEPARATOR

logger = logging.getLogger(__name__)


class WorkingDirectoryError(RuntimeError):
    """Raised when the working directory cannot be determined."""


class WorkingDirectoryProvider(ABC):
    """Source of the current working directory."""

    @abstractmethod
    def current_directory(self) -> str:
        """
        Get the current working directory.

        Returns:
            Absolute directory path as a string

        Raises:
            WorkingDirectoryError: If the directory cannot be determined
        """
        pass


class OSWorkingDirectory(WorkingDirectoryProvider):
    """Reads the working directory of the running process."""

    def current_directory(self) -> str:
        try:
            cwd = os.getcwd()
        except OSError as e:
            logger.error(f"Cannot determine working directory: {e}")
            raise WorkingDirectoryError(f"Cannot determine working directory: {e}") from e
        logger.debug(f"Working directory: {cwd}")
        return cwd


class FixedWorkingDirectory(WorkingDirectoryProvider):
    """Always reports the same, preconfigured directory."""

    def __init__(self, path: str):
        """
        Initialize with a fixed directory.

        Args:
            path: Absolute directory path

        Raises:
            ValueError: If the path is not absolute
        """
        if not path.startswith(SEPARATOR):
            raise ValueError(f"Working directory must be absolute: {path!r}")
        self.path = path

    def current_directory(self) -> str:
        return self.path

    def __repr__(self) -> str:
        return f"FixedWorkingDirectory({self.path!r})"


_default_provider: WorkingDirectoryProvider = OSWorkingDirectory()


def get_default_provider() -> WorkingDirectoryProvider:
    """Get the provider used when none is passed explicitly."""
    return _default_provider
