"""
This module defines the `DeclarationTree`, the in-memory structure that
accumulates synthesized type declarations before they are rendered to `.pyi`
files.

The tree is an arena of `Scope` nodes keyed by fully qualified class path.
Every compiler taking part in a generation run writes into the same tree, but
only ever into the scope it created or fetched for the class it is
decorating, so writers for different classes never interfere.

- `DeclarationTree.create_path` is an atomic get-or-create: two threads asking
  for the same class path always receive the same `Scope`.
- `Scope.create_method` stores a `MethodSignature` by name. Re-creating a name
  replaces the entry in place; a scope never holds two methods with the same
  name.

`MethodSignature` and `Parameter` are frozen dataclasses and are never mutated
once stored.
"""

import threading
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from stubloom._errors import InvalidMethodNameError
from stubloom._utils import _qualified_path

# Type markers used in method signatures
ATTACHED_ONE = "AttachedOne"
ATTACHED_MANY = "AttachedMany"
UNKNOWN = "Unknown"


@dataclass(frozen=True)
class Parameter:
    """A named, typed parameter of a method declaration."""

    name: str
    type: str = UNKNOWN


@dataclass(frozen=True)
class MethodSignature:
    """A method declaration: name, parameters and return type."""

    name: str
    parameters: tuple[Parameter, ...] = field(default_factory=tuple)
    return_type: str = UNKNOWN

    @property
    def is_setter(self) -> bool:
        return self.name.endswith("=")

    @property
    def attribute(self) -> str:
        """The attribute the method reads or writes."""
        return self.name.removesuffix("=")

    def to_dict(self) -> dict:
        return {
            "parameters": [(p.name, p.type) for p in self.parameters],
            "return_type": self.return_type,
        }


class Scope:
    """The declarations of a single class, keyed by method name."""

    def __init__(self, path: str):
        self.path = path
        self._methods: dict[str, MethodSignature] = {}

    def create_method(
        self,
        name: str,
        parameters: Iterable[Parameter] = (),
        return_type: str = UNKNOWN,
    ) -> MethodSignature:
        """
        Declare a method on this scope.

        Args:
            name (str): The method name. Setters end with '='.
            parameters (Iterable[Parameter], optional): The method parameters.
                Defaults to no parameters.
            return_type (str, optional): The declared return type. Defaults to
                `UNKNOWN`.

        Returns:
            MethodSignature: The stored signature. An existing signature with
                the same name is replaced in place.

        Raises:
            InvalidMethodNameError: If `name` is not a non-empty string.
        """
        if not isinstance(name, str) or not name:
            raise InvalidMethodNameError(name)

        signature = MethodSignature(
            name=name, parameters=tuple(parameters), return_type=return_type
        )
        self._methods[name] = signature
        return signature

    @property
    def methods(self) -> dict[str, MethodSignature]:
        # Defensive copy, signatures themselves are frozen
        return dict(self._methods)

    def __getitem__(self, name: str) -> MethodSignature:
        return self._methods[name]

    def __contains__(self, name: object) -> bool:
        return name in self._methods

    def __len__(self) -> int:
        return len(self._methods)

    def __repr__(self) -> str:
        return f"Scope({self.path!r}, methods={list(self._methods)})"


class DeclarationTree:
    """Declarations of every class processed in one generation run."""

    def __init__(self):
        self._scopes: dict[str, Scope] = {}
        self._lock = threading.Lock()

    def create_path(self, constant: type | str) -> Scope:
        """
        Return the scope for a class, creating it if it does not exist yet.

        Args:
            constant (type | str): The class, or its fully qualified path.

        Returns:
            Scope: The scope keyed by the class path.
        """
        path = constant if isinstance(constant, str) else _qualified_path(constant)
        with self._lock:
            scope = self._scopes.get(path)
            if scope is None:
                scope = self._scopes[path] = Scope(path)
        return scope

    def get(self, constant: type | str) -> Scope | None:
        path = constant if isinstance(constant, str) else _qualified_path(constant)
        return self._scopes.get(path)

    def paths(self) -> list[str]:
        return list(self._scopes)

    def to_dict(self) -> dict[str, dict[str, dict]]:
        """Export the tree as a plain mapping: path -> method name -> declaration."""
        return {
            path: {name: sig.to_dict() for name, sig in scope.methods.items()}
            for path, scope in self._scopes.items()
        }

    def __contains__(self, constant: object) -> bool:
        if isinstance(constant, type):
            constant = _qualified_path(constant)
        return constant in self._scopes

    def __iter__(self) -> Iterator[Scope]:
        return iter(list(self._scopes.values()))

    def __len__(self) -> int:
        return len(self._scopes)
