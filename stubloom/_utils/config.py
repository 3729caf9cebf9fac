"""
This module manages global configuration settings for the stubloom package.

It offers a simple, centralized mechanism for setting and retrieving
package-level options that affect how constants are gathered and how stubs
are rendered, without passing them repeatedly to every compiler.

Options:
- `root_model`: The class whose descendants are enumerated as candidate
  constants. Defaults to `AttachableModel`.
- `handle_module`: Import path the rendered stubs use for the attachment
  handle types. Defaults to `stubloom.attachments`.
- `exclude_constants`: Patterns; constants whose qualified path contains any
  of them are skipped.
- `log_level`: Level applied to the `stubloom` logger.

The module exposes `set_stubloom_option` to modify settings, an internal
`_get_option` to retrieve them, and `load_stubloom_options` to apply settings
read from a JSON, YAML or TOML file.
"""

import importlib
import logging
from collections.abc import Iterable
from pathlib import Path
from typing import Any

from stubloom.attachments import AttachableModel

from .helpers import _dump_str_to_list
from .parsers import _ConfigReader

_DEFAULTS = {
    "root_model": AttachableModel,
    "handle_module": "stubloom.attachments",
    "exclude_constants": None,
    "log_level": None,
}

# A private dictionary to hold all package settings.
_settings = dict(_DEFAULTS)


def _import_class(path: str) -> type:
    """Import a class from a 'module:Class' or 'module.Class' path."""
    module_path, _, class_name = path.replace(":", ".").rpartition(".")
    if not module_path:
        raise ValueError(f"Cannot import {path!r}: expected 'module:Class'.")
    return getattr(importlib.import_module(module_path), class_name)


def _validate_option(option: str, value: Any) -> Any:
    """Check the type of an option value and normalise it."""
    if option == "root_model":
        if isinstance(value, str):
            value = _import_class(value)
        if not isinstance(value, type):
            raise TypeError("Option 'root_model' must be a class or an import path.")
    elif option == "handle_module":
        if not isinstance(value, str):
            raise TypeError("Option 'handle_module' must be a string.")
    elif option == "exclude_constants" and value is not None:
        value = _dump_str_to_list(value)
        if not all(isinstance(v, str) for v in value):
            raise TypeError("Option 'exclude_constants' must only contain strings.")
    elif option == "log_level":
        if not isinstance(value, (str, int)):
            raise TypeError("Option 'log_level' must be a level name or number.")
        logging.getLogger("stubloom").setLevel(
            value.upper() if isinstance(value, str) else value
        )

    return value


def set_stubloom_option(options: Iterable[str] | str, values: Iterable[Any] | Any) -> None:
    """
    Set one or more configuration options for the stubloom package.

    Args:
        options (Iterable[str] | str): The name(s) of the option(s) to set
            (e.g., 'handle_module').
        values (Iterable[Any] | Any): The value(s) to set, matched to `options`
            by position.

    Raises:
        KeyError: If an option name is not a known option.
        TypeError: If an option value has the wrong type.
    """
    if isinstance(options, str):
        options = [options]
        values = [values]

    if not isinstance(options, Iterable):
        raise TypeError("Key must be a string or an iterable of strings.")

    if not isinstance(values, Iterable) or isinstance(values, (str, Path)):
        raise TypeError("Values must be an iterable matching the option keys.")

    for option, value in zip(options, values, strict=True):
        if not isinstance(option, str):
            raise TypeError("Key must be a string.")
        if option not in _settings:
            raise KeyError(
                f"Invalid option key: {option!r}. Valid options are: {list(_settings.keys())}"
            )

        _settings[option] = _validate_option(option, value)


def reset_stubloom_options() -> None:
    """Restore every option to its default value."""
    _settings.clear()
    _settings.update(_DEFAULTS)
    logging.getLogger("stubloom").setLevel(logging.NOTSET)


def load_stubloom_options(path: str | Path) -> dict[str, Any]:
    """
    Read options from a JSON, YAML or TOML file and apply them.

    Args:
        path (str | Path): The configuration file. A top-level `stubloom`
            table, if present, is used instead of the whole document.

    Returns:
        dict[str, Any]: The options as read from the file.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Specified config file not found: {path}")

    data = _ConfigReader(path).read() or {}
    if not isinstance(data, dict):
        raise ValueError(f"Config file {path} must contain a mapping of options.")
    data = data.get("stubloom", data)

    if data:
        set_stubloom_option(list(data.keys()), list(data.values()))

    return data


def _get_option(key: str) -> Any:
    """
    Get a configuration option for the stubloom package.

    Args:
        key (str): The name of the option to get.
    """
    return _settings.get(key)
