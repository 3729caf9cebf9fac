"""
This module provides utility functions for filtering collections of classes
by name. They support the `exclude_constants` option and the
`requested_constants` argument of compilers, letting a user narrow a
generation run to, or away from, specific models.
"""

from collections.abc import Iterable

from .inspect import _qualified_path


def _handle_constants_from_iterable(
    iterable: Iterable[type],
    contain_matching: Iterable[str] | str | None = None,
    include: bool = True,
) -> list[type]:
    """Includes or excludes classes based on string matching of their qualified path."""

    if not contain_matching:
        return list(iterable)

    if isinstance(contain_matching, str):
        contain_matching = [contain_matching]

    if not isinstance(contain_matching, Iterable):
        raise TypeError("Argument 'contain_matching' must be a string or an iterable.")

    return [
        item
        for item in iterable
        # - If include=True, it keeps items where a match is found.
        # - If include=False, it keeps items where no match is found.
        if include is any(pattern in _qualified_path(item) for pattern in contain_matching)
    ]
