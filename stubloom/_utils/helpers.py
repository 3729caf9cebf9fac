"""
This module provides small, general-purpose helper functions shared across
the `stubloom` package.

`_dump_str_to_list` standardizes an argument that can be either a single
string or a list of strings. `_auto_convert_time_delta` formats the per-class
timings collected by the `Generator` for log output.
"""


def _dump_str_to_list(s: str | list) -> list[str]:
    """Convert a string to a list of strings."""
    if isinstance(s, str):
        return [s]
    elif isinstance(s, (list, tuple)):
        return list(s)
    else:
        raise TypeError("Argument must be a string or a list of strings.")


def _auto_convert_time_delta(delta_in_seconds: int | float) -> str:
    """Convert a time delta to human-readable format."""

    # Handle the sign separately
    if delta_in_seconds < 0:
        return f"-{_auto_convert_time_delta(abs(delta_in_seconds))}"

    # Convert to the appropriate unit
    if delta_in_seconds < 1:
        return f"{delta_in_seconds * 1000:.1f}ms"
    if delta_in_seconds < 60:
        return f"{delta_in_seconds:.1f}s"
    if delta_in_seconds < 3600:
        return f"{delta_in_seconds / 60:.1f}m"

    return f"{delta_in_seconds / 3600:.1f}h"
