"""
This module defines custom exceptions related to the `DeclarationTree`.
"""


class InvalidMethodNameError(ValueError):
    """Raised when a method declaration is created without a usable name."""

    def __init__(self, name: object):
        super().__init__(f"Method name must be a non-empty string, got {name!r}.")
