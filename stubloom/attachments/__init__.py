"""
This module aggregates the attachment system, making reflections, handles and
declarations accessible under the 'stubloom.attachments' namespace.
"""

from stubloom.attachments.attached import (
    AttachableModel,
    AttachedMany,
    AttachedOne,
    has_many_attached,
    has_one_attached,
)
from stubloom.attachments.meta import AttachmentReflection, Cardinality
from stubloom.attachments.protocol import SupportsAttachmentReflection

__all__ = [
    "AttachableModel",
    "AttachedMany",
    "AttachedOne",
    "AttachmentReflection",
    "Cardinality",
    "SupportsAttachmentReflection",
    "has_many_attached",
    "has_one_attached",
]
