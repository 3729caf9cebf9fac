"""
This module defines the reflection records describing attachments declared on
a data-model class.

`AttachmentReflection` is the immutable record a class hands out when asked
`reflect_on_all_attachments()`. It carries only what the stub generator needs
to classify an attachment: its `name` and its `cardinality`.

`Cardinality` is a `StrEnum` so that reflections coming from foreign
reflection systems, which usually store a plain string such as `"single"`,
compare and hash equal to the enum members.
"""

from dataclasses import dataclass
from enum import StrEnum


class Cardinality(StrEnum):
    """Number of resources an attachment links to a record."""

    SINGLE = "single"
    MULTIPLE = "multiple"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class AttachmentReflection:
    """
    Metadata for one attachment declared on a class.

    This class is frozen (attributes cannot be rebound). The cardinality is
    stored as given, so a reflection built by a third-party system with an
    unrecognised cardinality value survives unchanged and is classified later.
    """

    name: str
    cardinality: Cardinality | str = Cardinality.UNKNOWN

    def __post_init__(self):
        if not isinstance(self.name, str) or not self.name:
            raise ValueError("Attachment name must be a non-empty string.")
