"""Component splitting and joining for separator-delimited paths."""

from typing import Iterable, List

SEPARATOR = '/'


class PathUtils:
    """Utilities for turning path strings into components and back."""

    @staticmethod
    def check_separator(separator: str) -> str:
        """
        Ensure a separator is exactly one character.

        Args:
            separator: Candidate separator

        Returns:
            The separator unchanged

        Raises:
            ValueError: If the separator is empty or longer than one character
        """
        if len(separator) != 1:
            raise ValueError(f"Separator must be a single character, got {separator!r}")
        return separator

    @staticmethod
    def split(path: str, separator: str = SEPARATOR) -> List[str]:
        """
        Split a path on every occurrence of the separator.

        Empty components are preserved, so leading, trailing and doubled
        separators show up as empty strings. A path without a separator
        yields a single component and the empty string yields ``['']``.

        Args:
            path: Path string to split
            separator: Single separator character

        Returns:
            List of raw path components
        """
        return path.split(PathUtils.check_separator(separator))

    @staticmethod
    def join_components(components: Iterable[str], separator: str = SEPARATOR) -> str:
        """
        Join path components with the separator.

        Args:
            components: Path components
            separator: Single separator character

        Returns:
            Joined path without leading or trailing separator
        """
        return PathUtils.check_separator(separator).join(components)
