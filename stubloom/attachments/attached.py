"""
This module implements a small attachment system for data-model classes. It
is the runtime side that `stubloom` reflects on: attachments declared here are
never written out as annotations, so a type checker cannot see them without
generated stubs.

`has_one_attached()` / `has_many_attached()`:
Declared in a class body, they register an `AttachmentReflection` on the
owning class (via `__set_name__`) and act as descriptors on instances.
Reading the attribute returns an `AttachedOne` or `AttachedMany` handle;
assigning to it attaches whatever was given, in any representation.

`AttachableModel`:
Base class for models carrying attachments. It answers the two reflection
queries used during stub generation, `reflect_on_all_attachments()` and
`is_abstract_class()`. A class is abstract when its own body sets
`__abstract__ = True`; the flag is not inherited by subclasses.

Example:
    ```python
    from stubloom.attachments import AttachableModel, has_many_attached, has_one_attached


    class Post(AttachableModel):
        photo = has_one_attached()
        blogs = has_many_attached()


    post = Post()
    post.photo = "avatar.png"
    post.photo.attached  # True
    Post.reflect_on_all_attachments()
    # [AttachmentReflection(name='photo', cardinality=<Cardinality.SINGLE: 'single'>),
    #  AttachmentReflection(name='blogs', cardinality=<Cardinality.MULTIPLE: 'multiple'>)]
    ```
"""

from collections.abc import Iterable
from typing import Any

from .meta import AttachmentReflection, Cardinality


class AttachedOne:
    """Handle for a single attached resource."""

    def __init__(self, record: object, name: str):
        self.record = record
        self.name = name
        self.attachment = None

    @property
    def attached(self) -> bool:
        return self.attachment is not None

    def attach(self, attachable: Any) -> None:
        self.attachment = attachable

    def detach(self) -> None:
        self.attachment = None


class AttachedMany:
    """Handle for a collection of attached resources."""

    def __init__(self, record: object, name: str):
        self.record = record
        self.name = name
        self.attachments = []

    @property
    def attached(self) -> bool:
        return bool(self.attachments)

    def attach(self, *attachables: Any) -> None:
        for attachable in attachables:
            # A single list/tuple argument is a batch, not one attachment
            if isinstance(attachable, (list, tuple)):
                self.attachments.extend(attachable)
            else:
                self.attachments.append(attachable)

    def detach(self) -> None:
        self.attachments = []


_HANDLES = {
    Cardinality.SINGLE: AttachedOne,
    Cardinality.MULTIPLE: AttachedMany,
}


class _Attachment:
    """Descriptor registering an attachment reflection on its owner class."""

    def __init__(self, cardinality: Cardinality):
        self.cardinality = cardinality
        self.name = None

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name
        # Each class only records its own attachments, see `_merged_reflections`
        registry = owner.__dict__.get("_attachment_reflections")
        if registry is None:
            registry = {}
            owner._attachment_reflections = registry
        registry[name] = AttachmentReflection(name=name, cardinality=self.cardinality)

    def _handle(self, instance: object) -> AttachedOne | AttachedMany:
        handles = instance.__dict__.setdefault("_attachment_handles", {})
        if self.name not in handles:
            handles[self.name] = _HANDLES[self.cardinality](instance, self.name)
        return handles[self.name]

    def __get__(self, instance, owner=None):
        if instance is None:
            return self
        return self._handle(instance)

    def __set__(self, instance, attachable: Any) -> None:
        handle = self._handle(instance)
        handle.detach()
        if attachable is not None:
            handle.attach(attachable)


def has_one_attached() -> Any:
    """Declare a single-resource attachment in a class body."""
    return _Attachment(Cardinality.SINGLE)


def has_many_attached() -> Any:
    """Declare a multi-resource attachment in a class body."""
    return _Attachment(Cardinality.MULTIPLE)


def _merged_reflections(cls: type) -> dict[str, AttachmentReflection]:
    """Collect the attachments declared on every class of the MRO.

    Bases are visited from the most generic one down to `cls`, so a redeclared
    name takes the reflection of the most derived class.
    """
    merged = {}
    for klass in reversed(cls.__mro__):
        merged.update(klass.__dict__.get("_attachment_reflections", {}))
    return merged


class AttachableModel:
    """Base class for data-model classes that declare attachments."""

    __abstract__ = True
    _attachment_reflections: dict[str, AttachmentReflection] = {}

    @classmethod
    def reflect_on_all_attachments(cls) -> list[AttachmentReflection]:
        """Return the attachment reflections of the class, in declaration order."""
        return list(_merged_reflections(cls).values())

    @classmethod
    def reflect_on_attachment(cls, name: str) -> AttachmentReflection | None:
        return _merged_reflections(cls).get(name)

    @classmethod
    def is_abstract_class(cls) -> bool:
        return bool(cls.__dict__.get("__abstract__", False))

    @classmethod
    def attachment_names(cls) -> Iterable[str]:
        return list(_merged_reflections(cls))
