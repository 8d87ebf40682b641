"""Index module exports.

Read-side view of the symbol index: element kinds, element and document
models, and the document store symbol requests wait on.
"""

from perlscope.index.kinds import (
    CALLABLE_KINDS,
    OBJECT_KINDS,
    OUTLINE_KINDS,
    SILENT_KINDS,
    SymbolKind,
)
from perlscope.index.models import Element, ModuleMap, PerlDocument
from perlscope.index.store import DocumentIndex, wait_for_document

__all__ = [
    "CALLABLE_KINDS",
    "OBJECT_KINDS",
    "OUTLINE_KINDS",
    "SILENT_KINDS",
    "SymbolKind",
    "Element",
    "ModuleMap",
    "PerlDocument",
    "DocumentIndex",
    "wait_for_document",
]
