"""
Immutable path value type.

A Path is a view over a tuple of canonical components: the first
``active_length`` entries of the tuple belong to the path. Taking the
parent of a path shortens the view instead of copying, so a path and
all of its ancestors share one backing tuple.
"""

import functools
from typing import Iterable, Optional, Tuple

from .canonicalizer import PARENT_DIR, CURRENT_DIR, canonicalize
from .cwd import WorkingDirectoryProvider, get_default_provider
from ..utils.path_utils import SEPARATOR, PathUtils


@functools.total_ordering
class Path:
    """
    An immutable, canonical, separator-delimited path.

    Paths are built by parsing a string, never by touching the filesystem.
    ``str(path)`` gives the canonical form, ``a / b`` joins, and paths
    compare and hash structurally so they can be used as dictionary keys
    or sorted. Sorting puts every ancestor before its descendants.

    Attributes are read-only; every operation returns a new Path.
    """

    __slots__ = ('_components', '_absolute', '_directory', '_length')

    def __init__(self, path: str = ''):
        """
        Parse a path string.

        A leading separator makes the path absolute and a trailing one
        marks it as a directory. Parsing never fails: an empty string is
        the current directory ``.``.

        Args:
            path: Path string to parse
        """
        absolute = path.startswith(SEPARATOR)
        components = tuple(canonicalize(PathUtils.split(path), absolute))
        self._set(components, absolute, path.endswith(SEPARATOR), len(components))

    def _set(self, components: Tuple[str, ...], absolute: bool, directory: bool,
             length: int) -> None:
        # An empty range only serializes as "/" or ".", so the directory
        # flag follows absoluteness there.
        if length == 0:
            directory = absolute
        object.__setattr__(self, '_components', components)
        object.__setattr__(self, '_absolute', absolute)
        object.__setattr__(self, '_directory', directory)
        object.__setattr__(self, '_length', length)

    @classmethod
    def _view(cls, components: Tuple[str, ...], absolute: bool, directory: bool,
              length: int) -> 'Path':
        """Create a path over an existing backing tuple without copying it."""
        path = object.__new__(cls)
        path._set(components, absolute, directory, length)
        return path

    @classmethod
    def from_components(cls, components: Iterable[str], absolute: bool,
                        directory: bool, active_length: Optional[int] = None) -> 'Path':
        """
        Build a path from components that are already canonical.

        No canonicalization is performed. The caller guarantees that the
        components contain no empty or ``.`` entries and that ``..`` only
        appears as a leading run of a relative path. Use ``Path(text)``
        for anything else.

        Args:
            components: Canonical components
            absolute: Whether the path is absolute
            directory: Whether the path is a directory
            active_length: Number of leading components that belong to
                the path (defaults to all of them)

        Returns:
            New Path

        Raises:
            ValueError: If active_length is out of range
        """
        backing = tuple(components)
        if active_length is None:
            active_length = len(backing)
        if not 0 <= active_length <= len(backing):
            raise ValueError(
                f"active_length {active_length} out of range for {len(backing)} components"
            )
        return cls._view(backing, absolute, directory, active_length)

    @classmethod
    def root(cls) -> 'Path':
        """Get the absolute root path ``/``."""
        return cls._view((), True, True, 0)

    @classmethod
    def cwd(cls, provider: Optional[WorkingDirectoryProvider] = None) -> 'Path':
        """
        Get the current working directory as an absolute directory path.

        Args:
            provider: Where to read the working directory from (defaults
                to the running process)

        Returns:
            Absolute directory Path

        Raises:
            WorkingDirectoryError: If the working directory cannot be determined
        """
        provider = provider or get_default_provider()
        cwd = provider.current_directory()
        components = canonicalize(PathUtils.split(cwd), True)
        return cls.from_components(components, absolute=True, directory=True)

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"Path is immutable: cannot set '{name}'")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"Path is immutable: cannot delete '{name}'")

    def __reduce__(self):
        return (self.__class__, (self.to_string(),))

    @property
    def is_absolute(self) -> bool:
        """Whether the path started with the separator."""
        return self._absolute

    @property
    def is_directory(self) -> bool:
        """Whether the path ended with the separator."""
        return self._directory

    @property
    def active_length(self) -> int:
        """Number of components in the path."""
        return self._length

    @property
    def components(self) -> Tuple[str, ...]:
        """The canonical components of the path."""
        if self._length == len(self._components):
            return self._components
        return self._components[:self._length]

    def shares_components(self, other: 'Path') -> bool:
        """Check if both paths are views over the same backing tuple."""
        return self._components is other._components

    def to_string(self) -> str:
        """
        Serialize the path to its canonical string form.

        Returns:
            ``/`` for the root, ``.`` for the empty relative path, otherwise
            the components joined by the separator
        """
        if self._length == 0:
            return SEPARATOR if self._absolute else CURRENT_DIR
        text = PathUtils.join_components(self.components)
        if self._absolute:
            text = SEPARATOR + text
        if self._directory:
            text += SEPARATOR
        return text

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"Path({self.to_string()!r})"

    def parent(self) -> 'Path':
        """
        Get the parent directory.

        The parent shares this path's backing tuple. Relative paths that
        have run out of named components keep climbing with ``..``
        (``.`` -> ``../`` -> ``../../``); the root is its own parent.

        Returns:
            Parent directory Path
        """
        if not self._absolute and all(c == PARENT_DIR for c in self.components):
            return Path._view((PARENT_DIR,) + self._components, False, True, self._length + 1)
        return Path._view(self._components, self._absolute, True, max(self._length - 1, 0))

    def is_root(self) -> bool:
        """Check if this is the absolute root."""
        return self._absolute and self._length == 0

    def _key(self) -> Tuple[bool, Tuple[str, ...], bool]:
        return (not self._absolute, self.components, self._directory)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Path):
            return NotImplemented
        if self._length != other._length:
            return False
        return self._key() == other._key()

    def __lt__(self, other: 'Path') -> bool:
        if not isinstance(other, Path):
            return NotImplemented
        return self._key() < other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def has_parent(self, candidate: 'Path') -> bool:
        """
        Check if a path is a proper ancestor of this one.

        The root is a parent of every other absolute path. A path is not
        its own parent.

        Args:
            candidate: Possible ancestor

        Returns:
            True if both paths have the same absoluteness and candidate's
            components are a strict prefix of this path's components
        """
        if self._absolute != candidate._absolute:
            return False
        if candidate._length >= self._length:
            return False
        if self._components is candidate._components:
            return True
        return self._components[:candidate._length] == candidate.components

    def join(self, suffix: 'Path') -> 'Path':
        """
        Append a path to this one.

        ``..`` components at the start of the suffix climb up from this
        path. The result keeps this path's absoluteness and takes the
        suffix's directory flag.

        Args:
            suffix: Path to append (its own absoluteness is ignored)

        Returns:
            Joined Path
        """
        components = canonicalize(self.components + suffix.components, self._absolute)
        return Path.from_components(components, self._absolute, suffix._directory)

    def __truediv__(self, suffix: object) -> 'Path':
        if isinstance(suffix, str):
            suffix = Path(suffix)
        if not isinstance(suffix, Path):
            return NotImplemented
        return self.join(suffix)

    def absolute(self, provider: Optional[WorkingDirectoryProvider] = None) -> 'Path':
        """
        Resolve this path against the working directory.

        Args:
            provider: Where to read the working directory from

        Returns:
            This path if it is already absolute, otherwise the working
            directory joined with this path

        Raises:
            WorkingDirectoryError: If the working directory cannot be determined
        """
        if self._absolute:
            return self
        return Path.cwd(provider).join(self)

    def make_relative(self, parent: 'Path') -> Optional['Path']:
        """
        Express this path relative to one of its ancestors.

        Args:
            parent: Ancestor to remove from the front of this path

        Returns:
            Relative Path, or None if parent is not an ancestor of this path
        """
        if not self.has_parent(parent):
            return None
        remainder = self._components[parent._length:self._length]
        return Path.from_components(remainder, absolute=False, directory=self._directory)

    def last_component(self) -> str:
        """Get the final component, or an empty string for ``/`` and ``.``."""
        if self._length == 0:
            return ''
        return self._components[self._length - 1]

    def common_parent(self, other: 'Path') -> 'Path':
        """
        Find the deepest directory containing both paths.

        Paths of different absoluteness only share the root. Two relative
        paths share no fixed reference point, so their common parent is
        ``.`` by convention.

        Args:
            other: Path to compare with

        Returns:
            Common ancestor directory
        """
        if self._absolute != other._absolute:
            return Path.root()
        if not self._absolute:
            return Path._view((), False, False, 0)

        if self._length < other._length:
            shorter, longer = self, other
        else:
            shorter, longer = other, self

        if shorter._length == longer._length and shorter.components == longer.components:
            if shorter._directory:
                return shorter
            return longer if longer._directory else shorter.parent()

        candidate = shorter
        while not candidate.is_root():
            if longer.has_parent(candidate):
                return candidate
            candidate = candidate.parent()
        return Path.root()
