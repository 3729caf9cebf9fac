"""
This module provides introspection utilities for discovering and naming the
classes that stubloom generates declarations for.

Key Functions:
- `descendants_of`: The class enumerator. It walks `__subclasses__()` from a
  root class and returns every loaded descendant, ordered by qualified path
  so that generated output is reproducible across runs.

- `_qualified_path`: The key under which a class is stored in the
  declaration tree.

- `_is_abstract`: Answers "is this class abstract", preferring the host data
  model's own `is_abstract_class()` query and falling back to
  `inspect.isabstract` for plain ABCs.
"""

import inspect


def _qualified_path(constant: type) -> str:
    """Return the fully qualified path of a class, e.g. 'app.models.Post'."""
    return f"{constant.__module__}.{constant.__qualname__}"


def descendants_of(base: type) -> list[type]:
    """
    Return every loaded subclass of `base`, excluding `base` itself.

    Args:
        base (type): The root class of the enumeration.

    Returns:
        list[type]: Unique descendants, sorted by qualified path.
    """
    if not isinstance(base, type):
        raise TypeError(f"Expected a class, got {base!r}.")

    seen = {}
    stack = list(base.__subclasses__())
    while stack:
        cls = stack.pop()
        if cls in seen:
            continue
        seen[cls] = None
        stack.extend(cls.__subclasses__())

    return sorted(seen, key=_qualified_path)


def _is_abstract(constant: type) -> bool:
    """Check if a class is abstract according to its data model."""
    query = getattr(constant, "is_abstract_class", None)
    if callable(query):
        return bool(query())
    return inspect.isabstract(constant)
