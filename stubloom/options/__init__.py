"""
This module provides a convenient entry point for setting global
configuration options for the stubloom package.
"""

from stubloom._utils import load_stubloom_options, reset_stubloom_options, set_stubloom_option

__all__ = ["load_stubloom_options", "reset_stubloom_options", "set_stubloom_option"]
