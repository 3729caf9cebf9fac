"""
This module exposes utility functions from sub-modules for use
within the stubloom package.
"""

from stubloom._utils.config import (
    _get_option,
    load_stubloom_options,
    reset_stubloom_options,
    set_stubloom_option,
)
from stubloom._utils.filters import _handle_constants_from_iterable
from stubloom._utils.helpers import _auto_convert_time_delta, _dump_str_to_list
from stubloom._utils.inspect import _is_abstract, _qualified_path, descendants_of
from stubloom._utils.parsers import _ConfigReader
from stubloom._utils.profiler import TaskProfiler

# Define main API for internal _utils module
# only contains methods/objects used within the package
__all__ = [
    "TaskProfiler",
    "_ConfigReader",
    "_auto_convert_time_delta",
    "_dump_str_to_list",
    "_get_option",
    "_handle_constants_from_iterable",
    "_is_abstract",
    "_qualified_path",
    "descendants_of",
    "load_stubloom_options",
    "reset_stubloom_options",
    "set_stubloom_option",
]
