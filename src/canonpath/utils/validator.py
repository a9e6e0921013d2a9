"""Check whether a path literal is already in canonical form."""

from .path_utils import SEPARATOR, PathUtils


def _component_allowed(dot_run: int, length: int, absolute: bool, seen_name: bool) -> bool:
    if dot_run != length or dot_run > 2:
        return True
    if dot_run == 1:
        return False
    # ".." survives only in the leading run of a relative path
    return not (absolute or seen_name)


def is_canonical(text: str, separator: str = SEPARATOR) -> bool:
    """
    Check if a path string is already canonical, without parsing it.

    A canonical string has no doubled separators and no ``.`` components.
    ``..`` components may only appear as a leading run of a relative
    path. Names made of three or more dots are ordinary components.
    ``.`` and ``./`` are the canonical forms of the current directory.

    Args:
        text: Path string to check
        separator: Single separator character

    Returns:
        True if the string is its own canonical form
    """
    PathUtils.check_separator(separator)
    if not text:
        return False
    if text in ('.', '.' + separator):
        return True
    if len(text) == 1:
        return True

    absolute = text[0] == separator
    seen_name = False
    separator_run = 0
    component_length = 0
    dot_run = 0

    for index, char in enumerate(text):
        if char != separator:
            separator_run = 0
            if char == '.' and dot_run == component_length:
                dot_run += 1
            component_length += 1
            continue

        separator_run += 1
        if separator_run > 1:
            return False
        if index == 0:
            continue
        if not _component_allowed(dot_run, component_length, absolute, seen_name):
            return False
        seen_name = seen_name or dot_run != component_length or dot_run > 2
        component_length = 0
        dot_run = 0

    # A trailing separator leaves nothing open; otherwise check the last name.
    if component_length:
        return _component_allowed(dot_run, component_length, absolute, seen_name)
    return True
