"""Resolve symbol text to a single element of a document model.

Resolution order:
1. The document's canonical map. An exact hit wins outright.
2. A scoped, line-aware lookup over the document's candidate buckets and the
   workspace module map.

Only a lookup that ends with exactly one candidate resolves. None or several
candidates mean there is nothing to show, which is not an error.
"""

from __future__ import annotations

import re
from collections.abc import Sequence

import structlog

from perlscope.index.kinds import SymbolKind
from perlscope.index.models import Element, ModuleMap, PerlDocument

logger = structlog.get_logger()

_SUPER_CALL = re.compile(r"^(\$\w+)->SUPER\b")
_OBJECT_CALL = re.compile(r"^(\$\w+)->\w+$")
_INVOCANT = re.compile(r"^\$\w+(?=->)")


def resolve_element(
    doc: PerlDocument,
    module_map: ModuleMap,
    symbol: str,
    line: int,
) -> Element | None:
    """Return the one element symbol refers to, or None."""
    if not symbol:
        return None

    elem = doc.canonical_elems.get(symbol)
    if elem is not None:
        return elem

    candidates = lookup_symbol(doc, module_map, symbol, line)
    if len(candidates) != 1:
        logger.debug("symbol_unresolved", symbol=symbol, candidates=len(candidates))
        return None
    return candidates[0]


def find_recent(found: Sequence[Element], line: int) -> Element:
    """Pick the latest declaration at or above line.

    Same-named lexicals (``my $x`` in two subs) share a bucket; the nearest
    preceding declaration is the one in scope most of the time. Falls back to
    the first candidate when every declaration comes later.
    """
    best = found[0]
    for elem in found:
        if best.line < elem.line <= line:
            best = elem
    return best


def lookup_symbol(
    doc: PerlDocument,
    module_map: ModuleMap,
    symbol: str,
    line: int,
) -> list[Element]:
    """Scoped lookup used when the canonical map has no entry."""
    found = doc.candidates(symbol)
    if found:
        return [find_recent(found, line)]

    mod_uri = module_map.get(symbol)
    if mod_uri:
        # Modules loaded with ``require`` never make it into the document
        return [
            Element(
                name=symbol,
                kind=SymbolKind.MODULE,
                package=symbol,
                uri=mod_uri,
            )
        ]

    qualified = symbol

    super_call = _SUPER_CALL.match(symbol)
    if super_call:
        invocant = doc.candidates(super_call.group(1))
        if invocant:
            package = find_recent(invocant, line).package
            parent = doc.parents.get(package) if package else None
            if parent:
                qualified = _SUPER_CALL.sub(lambda _: parent, qualified, count=1)

    if _OBJECT_CALL.match(symbol):
        target = doc.canonical_elems.get(symbol.split("->", 1)[0])
        if target is not None and target.type_detail:
            qualified = _INVOCANT.sub(lambda _: target.type_detail, qualified, count=1)

    # Module->method and Module::method name the same sub; main:: is implicit
    qualified = qualified.replace("->", "::")
    qualified = re.sub(r"^main::", "", qualified)

    found = doc.candidates(qualified)
    if found:
        return [found[0]]

    if "::" in qualified and "->" in symbol:
        method = qualified.rsplit("::", 1)[-1]
        if method:
            # Imported, inherited, or defined in this file under its bare name
            found = doc.candidates(method)
            if found:
                return [found[0]]

            # Object type unknown: anything with a matching method name
            return [
                elements[0]
                for name, elements in doc.elems.items()
                if elements and name.rsplit("::", 1)[-1] == method
            ]

    return []
