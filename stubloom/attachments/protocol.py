"""
This module defines the capability a class must expose to take part in stub
generation for attachments.
"""

from collections.abc import Sequence
from typing import Protocol, runtime_checkable

from .meta import AttachmentReflection


@runtime_checkable
class SupportsAttachmentReflection(Protocol):
    """Anything that can list its attachment reflections and say if it is abstract."""

    def reflect_on_all_attachments(self) -> Sequence[AttachmentReflection]: ...

    def is_abstract_class(self) -> bool: ...
