"""
This module defines custom exceptions related to the `Generator` class, which
visits every constant of every compiler and writes into one declaration tree.

`ConstantDecorationError`:
Raised (and recorded, not propagated) when a compiler fails while decorating a
single constant. The original exception is kept as `__cause__` so that one
malformed class can be reported without aborting the rest of the run.
"""

from collections.abc import Iterable


class CompilerValidator:
    """Validates that a Generator is properly initialized."""

    def __init__(self, compilers: Iterable, tree: object):
        self.compilers = compilers
        self.tree = tree

    def validate(self) -> None:
        """
        Performs all validation checks.

        Raises:
            InvalidGeneratorError: If the compilers are not an iterable of
                compiler instances or the tree is not a DeclarationTree.
        """
        # Local imports avoid a circular import with stubloom.core
        from stubloom.core.compiler import _BaseCompiler
        from stubloom.core.tree import DeclarationTree

        if not isinstance(self.tree, DeclarationTree):
            raise InvalidGeneratorError("'tree' must be a DeclarationTree")
        if not isinstance(self.compilers, Iterable):
            raise InvalidGeneratorError("'compilers' must be an Iterable of compilers")
        if not self.compilers:
            raise InvalidGeneratorError("'compilers' must contain at least one compiler")
        for compiler in self.compilers:
            if not isinstance(compiler, _BaseCompiler):
                raise InvalidGeneratorError(
                    f"Argument 'compilers' contains a non-compiler object: {compiler!r}"
                )


class InvalidGeneratorError(TypeError):
    """Raised when a Generator receives an invalid compiler collection or tree."""

    pass


class ConstantDecorationError(RuntimeError):
    """Raised when a compiler fails to decorate a single constant."""

    def __init__(self, constant: type, compiler: str, error: Exception):
        self.constant = constant
        self.compiler = compiler
        self.error = error
        name = getattr(constant, "__qualname__", repr(constant))
        super().__init__(
            f"Compiler {compiler!r} failed to decorate {name!r}: "
            f"{type(error).__name__}: {error}"
        )
