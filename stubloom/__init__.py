"""
This module serves as the main entry point for the stubloom package,
exposing its primary public API.
"""

import logging

from stubloom.attachments import (
    AttachableModel,
    AttachedMany,
    AttachedOne,
    AttachmentReflection,
    Cardinality,
    has_many_attached,
    has_one_attached,
)
from stubloom.core import (
    AttachmentCompiler,
    DeclarationGraph,
    DeclarationTree,
    Generator,
    PyiRenderer,
    select_candidates,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

# --- Define main API for stubloom module ---
__all__ = [
    "AttachableModel",
    "AttachedMany",
    "AttachedOne",
    "AttachmentCompiler",
    "AttachmentReflection",
    "Cardinality",
    "DeclarationGraph",
    "DeclarationTree",
    "Generator",
    "PyiRenderer",
    "has_many_attached",
    "has_one_attached",
    "select_candidates",
]
