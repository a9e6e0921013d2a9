"""
Configuration for canonpath.

Settings are read from the environment, with a ``.env`` file in the
working directory loaded first.
"""

import os
from dataclasses import dataclass, field
from typing import Literal, Optional
from dotenv import load_dotenv

from .cwd import FixedWorkingDirectory, OSWorkingDirectory, WorkingDirectoryProvider

# Load environment variables from .env file
load_dotenv()

OUTPUT_FORMATS = ('text', 'json')


def _env_flag(name: str) -> bool:
    return os.getenv(name, '').strip().lower() in ('1', 'true', 'yes', 'on')


@dataclass
class Config:
    """Configuration settings for canonpath."""

    # Directory used to resolve relative paths instead of the process cwd
    working_directory: Optional[str] = field(
        default_factory=lambda: os.getenv('CANONPATH_CWD') or None
    )
    output_format: Literal['text', 'json'] = field(
        default_factory=lambda: os.getenv('CANONPATH_FORMAT', 'text')
    )
    theme: str = field(default_factory=lambda: os.getenv('CANONPATH_THEME', 'manhattan'))
    debug: bool = field(default_factory=lambda: _env_flag('CANONPATH_DEBUG'))

    def __post_init__(self):
        if self.output_format not in OUTPUT_FORMATS:
            raise ValueError(
                f"Unknown output format '{self.output_format}'. Available: {', '.join(OUTPUT_FORMATS)}"
            )

    def working_directory_provider(self) -> WorkingDirectoryProvider:
        """
        Get the provider for resolving relative paths.

        Returns:
            A FixedWorkingDirectory when working_directory is set,
            otherwise an OSWorkingDirectory
        """
        if self.working_directory:
            return FixedWorkingDirectory(self.working_directory)
        return OSWorkingDirectory()
