"""
This module contains the compilers that turn runtime-reflected metadata into
method declarations.

A compiler answers two questions for one domain of metadata:
- **Which classes take part?** `gather_constants()` enumerates candidate
  classes and filters them down to the eligible ones.
- **What do they declare?** `decorate(tree, constant)` writes method
  signatures for one eligible class into the shared `DeclarationTree`.

`AttachmentCompiler` is the compiler for attachments declared with
`has_one_attached()` / `has_many_attached()`. For example, with the following
model:

    ```python
    class Post(AttachableModel):
        photo = has_one_attached()
        blogs = has_many_attached()
    ```

it declares on the `Post` scope:

    photo() -> AttachedOne
    photo=(attachable: Unknown) -> Unknown
    blogs() -> AttachedMany
    blogs=(attachable: Unknown) -> Unknown

Setters are always `Unknown`: attachments accept many representations on
assignment, and narrowing them would only produce false type errors.
"""

import logging
from abc import ABC, abstractmethod
from collections.abc import Iterable
from typing import override

from stubloom._utils import (
    _get_option,
    _handle_constants_from_iterable,
    _is_abstract,
    _qualified_path,
    descendants_of,
)
from stubloom.attachments import Cardinality, SupportsAttachmentReflection

from .tree import ATTACHED_MANY, ATTACHED_ONE, UNKNOWN, DeclarationTree, Parameter

logger = logging.getLogger(__name__)

_RETURN_TYPES = {
    Cardinality.SINGLE: ATTACHED_ONE,
    Cardinality.MULTIPLE: ATTACHED_MANY,
}


class _BaseCompiler(ABC):
    """Abstract base class for all compilers."""

    def __init__(self, requested_constants: Iterable[type] | None = None):
        """Initializes the _BaseCompiler abstract base class.

        Args:
            requested_constants (Iterable[type] | None, optional): If given,
                only these classes are processed, provided they are also
                gathered by the compiler. Defaults to None.
        """
        self.requested_constants = (
            list(requested_constants) if requested_constants is not None else None
        )

    @property
    def name(self) -> str:
        return type(self).__name__

    @abstractmethod
    def decorate(self, tree: DeclarationTree, constant: type) -> None:
        """Abstract method writing the declarations of one class into the tree."""
        pass

    @abstractmethod
    def gather_constants(self) -> list[type]:
        """Abstract method returning the classes this compiler decorates."""
        pass

    def processable_constants(self) -> list[type]:
        """Gathered constants narrowed by requested constants and exclusions.

        Returns:
            list[type]: The constants to decorate, in gathering order.
        """
        constants = self.gather_constants()

        if self.requested_constants is not None:
            requested = set(self.requested_constants)
            constants = [c for c in constants if c in requested]

        exclude = _get_option("exclude_constants")
        if exclude:
            constants = _handle_constants_from_iterable(constants, exclude, include=False)

        return constants


class AttachmentCompiler(_BaseCompiler):
    """Declares accessors and mutators for the attachments of data-model classes."""

    @staticmethod
    def select(all_classes: Iterable[type]) -> list[type]:
        """Filter classes down to those eligible for decoration.

        A class qualifies when it is concrete (not abstract) and exposes the
        attachment reflection capability. A check that raises is treated as
        "does not qualify".

        Args:
            all_classes (Iterable[type]): Every candidate class.

        Returns:
            list[type]: Eligible classes, in input order, without duplicates.
        """
        selected = {}

        for constant in all_classes:
            if constant in selected:
                continue
            try:
                eligible = not _is_abstract(constant) and isinstance(
                    constant, SupportsAttachmentReflection
                )
            except Exception as e:  # noqa: BLE001
                logger.debug("Excluding %r: capability check raised %r", constant, e)
                continue

            if eligible:
                selected[constant] = None
            else:
                logger.debug("Excluding %r: abstract or not attachable", constant)

        return list(selected)

    @staticmethod
    def _type_of(cardinality: object) -> str:
        """Classify a reflection's cardinality into a getter return type."""
        for known, return_type in _RETURN_TYPES.items():
            if cardinality == known:
                return return_type
        return UNKNOWN

    @override
    def gather_constants(self) -> list[type]:
        return self.select(descendants_of(_get_option("root_model")))

    @override
    def decorate(self, tree: DeclarationTree, constant: type) -> None:
        """Write a getter and a setter per attachment of `constant`.

        Classes without attachments leave the tree untouched.

        Args:
            tree (DeclarationTree): The shared declaration tree.
            constant (type): An eligible class.
        """
        reflections = list(constant.reflect_on_all_attachments())
        if not reflections:
            return

        scope = tree.create_path(constant)
        for reflection in reflections:
            name = str(reflection.name)
            scope.create_method(name, return_type=self._type_of(reflection.cardinality))
            scope.create_method(
                f"{name}=",
                parameters=[Parameter("attachable", UNKNOWN)],
                return_type=UNKNOWN,
            )

        logger.debug(
            "Declared %d attachment(s) on %s", len(reflections), _qualified_path(constant)
        )


def select_candidates(all_classes: Iterable[type]) -> list[type]:
    """Shortcut for `AttachmentCompiler.select`."""
    return AttachmentCompiler.select(all_classes)
