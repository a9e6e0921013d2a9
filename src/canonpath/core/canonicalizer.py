"""
Canonicalization of raw path components.

Turns the raw output of the splitter into a canonical component list:
no empty or ``.`` entries, and ``..`` only as an unresolved leading run
on relative paths.
"""

from typing import Iterable, List

CURRENT_DIR = '.'
PARENT_DIR = '..'

# Depth assigned to absolute paths so a ".." can never be preserved on them.
_ABSOLUTE_DEPTH = 1 << 40


def _is_noise(component: str, absolute: bool) -> bool:
    """Check if a component is dropped when it sits at the head of the list."""
    if not component or component == CURRENT_DIR:
        return True
    return absolute and component == PARENT_DIR


def strip_leading_noise(components: List[str], absolute: bool) -> None:
    """
    Drop leading empty and ``.`` components in place.

    On absolute paths leading ``..`` components are dropped too, since
    nothing can climb above the root.

    Args:
        components: Component list, modified in place
        absolute: Whether the list belongs to an absolute path
    """
    start = 0
    while start < len(components) and _is_noise(components[start], absolute):
        start += 1
    del components[:start]


def canonicalize(components: Iterable[str], absolute: bool) -> List[str]:
    """
    Resolve ``.``, ``..`` and empty components.

    A ``..`` removes the real component before it. On relative paths a
    ``..`` with nothing left to remove is kept and becomes part of the
    leading ``..`` run; on absolute paths it is dropped.

    Args:
        components: Raw components, as produced by the splitter
        absolute: Whether the components belong to an absolute path

    Returns:
        New list of canonical components (the input is not modified)
    """
    result = list(components)
    strip_leading_noise(result, absolute)

    initial_depth = _ABSOLUTE_DEPTH if absolute else 0
    # Real components before position i that no ".." has consumed yet.
    preserved_depth = initial_depth
    i = 0
    while i < len(result):
        component = result[i]

        if not component or component == CURRENT_DIR:
            if i > 0:
                del result[i]
            else:
                strip_leading_noise(result, absolute)
            continue

        if component == PARENT_DIR:
            if preserved_depth == 0:
                # Nothing to resolve against: part of the leading run.
                i += 1
            elif i > 0:
                del result[i - 1:i + 1]
                preserved_depth -= 1
                i -= 1
            else:
                strip_leading_noise(result, absolute)
                preserved_depth = initial_depth
            continue

        preserved_depth += 1
        i += 1

    return result
