"""
This module centralizes custom exception types for the stubloom package,
making them easily importable from a single location.
"""

from ._generator import CompilerValidator, ConstantDecorationError, InvalidGeneratorError
from ._matrix import InvalidDeclarationCollectionError, _validate_declaration_collection
from ._tree import InvalidMethodNameError

__all__ = [
    "CompilerValidator",
    "ConstantDecorationError",
    "InvalidDeclarationCollectionError",
    "InvalidGeneratorError",
    "InvalidMethodNameError",
    "_validate_declaration_collection",
]
