"""Symbol kinds published by the Perl indexer.

The indexer tags every element with a one-character code. The set is closed:
every renderer and emitter keyed by kind must cover all members.
"""

from enum import Enum


class SymbolKind(str, Enum):
    """Element kind codes as emitted by the indexer."""

    MODULE = "m"
    PACKAGE = "p"
    CLASS = "a"
    ROLE = "b"
    IMPORTED_SUB = "t"
    INHERITED = "i"
    FIELD = "f"  # Object::Pad, Moo, Moose, Corinna attributes
    PATHED_FIELD = "d"
    LOCAL_SUB = "s"
    LOCAL_METHOD = "o"  # Assumed to be instance methods
    METHOD = "x"
    LOCAL_VAR = "v"
    CONSTANT = "n"
    LABEL = "l"
    PHASER = "e"  # BEGIN, END, INIT, ...
    CANONICAL = "1"
    IMPORTED_VAR = "c"
    IMPORTED_HASH = "h"
    HTTP_ROUTE = "g"
    OUTLINE_ONLY_SUB = "j"
    AUTOLOAD_VAR = "_"

    @classmethod
    def parse(cls, code: "str | SymbolKind") -> "SymbolKind | str":
        """Map an indexer code to a member.

        Unknown codes come back as the raw string so that rendering can flag
        them instead of the whole document failing to load.
        """
        try:
            return cls(code)
        except ValueError:
            return code


CALLABLE_KINDS: frozenset[SymbolKind] = frozenset(
    {
        SymbolKind.LOCAL_SUB,
        SymbolKind.IMPORTED_SUB,
        SymbolKind.INHERITED,
        SymbolKind.LOCAL_METHOD,
        SymbolKind.METHOD,
    }
)
"""Kinds whose signature can be refined at a call site."""

OBJECT_KINDS: frozenset[SymbolKind] = frozenset(
    {
        SymbolKind.LOCAL_VAR,
        SymbolKind.IMPORTED_VAR,
        SymbolKind.CANONICAL,
    }
)
"""Kinds described by their inferred object type when one is known."""

SILENT_KINDS: frozenset[SymbolKind] = frozenset(
    {
        SymbolKind.LOCAL_VAR,
        SymbolKind.HTTP_ROUTE,
        SymbolKind.OUTLINE_ONLY_SUB,
    }
)
"""Kinds with no hover text of their own."""

OUTLINE_KINDS: frozenset[SymbolKind] = frozenset({SymbolKind.LOCAL_SUB, SymbolKind.PACKAGE})
"""Kinds listed by document symbols."""
