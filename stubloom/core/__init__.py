"""
This module exposes the core components of the stubloom engine, including the
declaration tree, the compilers, the generation loop and the output views.
"""

from stubloom.core._matrix import DeclarationMatrix
from stubloom.core.compiler import AttachmentCompiler, _BaseCompiler, select_candidates
from stubloom.core.generator import Generator
from stubloom.core.nxgraph import DeclarationGraph
from stubloom.core.renderer import PyiRenderer
from stubloom.core.tree import (
    ATTACHED_MANY,
    ATTACHED_ONE,
    UNKNOWN,
    DeclarationTree,
    MethodSignature,
    Parameter,
    Scope,
)

__all__ = [
    "ATTACHED_MANY",
    "ATTACHED_ONE",
    "UNKNOWN",
    "AttachmentCompiler",
    "DeclarationGraph",
    "DeclarationMatrix",
    "DeclarationTree",
    "Generator",
    "MethodSignature",
    "Parameter",
    "PyiRenderer",
    "Scope",
    "_BaseCompiler",
    "select_candidates",
]
