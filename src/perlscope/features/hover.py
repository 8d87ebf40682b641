"""Hover descriptions for resolved Perl elements.

build_hover_doc is a pure function of (symbol text, element, refined
element). Its kind table covers every SymbolKind; that is checked when this
module is imported, so adding a kind without deciding how it renders fails
fast instead of reaching the "Unknown" fallback at runtime.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass
from urllib.parse import unquote, urlparse

import structlog
from lsprotocol import types

from perlscope.features.resolver import resolve_element
from perlscope.features.signatures import DocumentLoader, refine_for_signature
from perlscope.features.symbol_text import get_symbol
from perlscope.index.kinds import OBJECT_KINDS, SymbolKind
from perlscope.index.models import Element, ModuleMap, PerlDocument

logger = structlog.get_logger()

_TRAILING_SUB = re.compile(r"::(\w+)$")
_WINDOWS_DRIVE = re.compile(r"^/[A-Za-z]:")


def uri_to_path(uri: str) -> str:
    """Filesystem path for display. Non-file URIs are returned as is."""
    parsed = urlparse(uri)
    if parsed.scheme != "file":
        return uri
    path = unquote(parsed.path)
    if parsed.netloc:
        return f"//{parsed.netloc}{path}"
    if _WINDOWS_DRIVE.match(path):
        return path[1:]
    return path


@dataclass(frozen=True, slots=True)
class _Subject:
    symbol: str
    elem: Element
    name: str
    sig: str


def _format_signature(symbol: str, elem: Element, refined: Element | None) -> tuple[str, str]:
    """Display name and parameter suffix for a callable."""
    name = elem.name
    if refined is None or refined.signature is None:
        return name, ""

    params = list(refined.signature)
    if "->" in symbol:
        # Method call: the invocant is implicit
        if params:
            params.pop(0)
        name = _TRAILING_SUB.sub(r"->\1", name)
    return name, f"({', '.join(params)})" if params else ""


def _describe_object(symbol: str, elem: Element) -> str:
    if elem.kind not in OBJECT_KINDS:
        return ""
    if elem.type_detail:
        return f"(object) {elem.type_detail}"
    if symbol.startswith("$self"):
        # Approximation: $self is taken to be an instance of the package it
        # appears in, which misses subclass instances.
        return f"(object) {elem.package}"
    return ""


def _nothing(_s: _Subject) -> str:
    return ""


def _tagged(tag: str) -> Callable[[_Subject], str]:
    def render(s: _Subject) -> str:
        return f"({tag}) {s.symbol}"

    return render


def _imported_sub(s: _Subject) -> str:
    desc = f"(subroutine) {s.name}{s.sig}"
    if s.elem.type_detail and s.elem.type_detail != s.elem.name:
        desc += f" ({s.elem.type_detail})"
    return desc


def _local_sub(s: _Subject) -> str:
    return f"(subroutine) {s.name}{s.sig}"


def _method(s: _Subject) -> str:
    return f"(method) {s.name}{s.sig}"


def _imported_var(s: _Subject) -> str:
    desc = f"{s.name}: {s.elem.value}"
    if s.elem.package:
        desc += f" ({s.elem.package})"
    return desc


def _imported_hash(s: _Subject) -> str:
    return f"{s.elem.name}  ({s.elem.package})"


def _package(s: _Subject) -> str:
    return f"(package) {s.elem.name}"


def _module(s: _Subject) -> str:
    return f"(module) {s.elem.name}: {uri_to_path(s.elem.uri)}"


_RULES: dict[SymbolKind, Callable[[_Subject], str]] = {
    # Inherited methods can still be plain subs (e.g. new from a parent)
    SymbolKind.IMPORTED_SUB: _imported_sub,
    SymbolKind.INHERITED: _imported_sub,
    SymbolKind.LOCAL_SUB: _local_sub,
    SymbolKind.LOCAL_METHOD: _method,
    SymbolKind.METHOD: _method,
    SymbolKind.LOCAL_VAR: _nothing,  # Not interesting enough to show
    # Untyped canonical variables get a plain label rather than the unknown fallback
    SymbolKind.CANONICAL: _tagged("variable"),
    SymbolKind.CONSTANT: _tagged("constant"),
    SymbolKind.IMPORTED_VAR: _imported_var,
    SymbolKind.IMPORTED_HASH: _imported_hash,
    SymbolKind.PACKAGE: _package,
    SymbolKind.MODULE: _module,
    SymbolKind.LABEL: _tagged("label"),
    SymbolKind.CLASS: _tagged("class"),
    SymbolKind.ROLE: _tagged("role"),
    SymbolKind.FIELD: _tagged("attribute"),
    SymbolKind.PATHED_FIELD: _tagged("attribute"),
    SymbolKind.PHASER: _tagged("phase"),
    # Routes and outline-only subs cannot be navigated to or hovered
    SymbolKind.HTTP_ROUTE: _nothing,
    SymbolKind.OUTLINE_ONLY_SUB: _nothing,
    SymbolKind.AUTOLOAD_VAR: _tagged("autoloaded"),
}

_missing_rules = set(SymbolKind) - _RULES.keys()
if _missing_rules:
    raise RuntimeError(f"No hover rule for symbol kinds: {sorted(k.name for k in _missing_rules)}")


def build_hover_doc(symbol: str, elem: Element, refined: Element | None) -> str:
    """Render the hover text for elem. An empty string means show nothing."""
    name, sig = _format_signature(symbol, elem, refined)

    desc = _describe_object(symbol, elem)
    if desc:
        return desc

    rule = _RULES.get(elem.kind)  # type: ignore[arg-type]
    if rule is None:
        logger.warning("unknown_symbol_kind", symbol=symbol, kind=str(elem.kind), name=elem.name)
        return f"Unknown: {symbol}"
    return rule(_Subject(symbol=symbol, elem=elem, name=name, sig=sig))


async def get_hover(
    params: types.TextDocumentPositionParams,
    doc: PerlDocument,
    text: str,
    module_map: ModuleMap,
    loader: DocumentLoader | None = None,
) -> types.Hover | None:
    """Hover for the symbol at params.position, or None when there is nothing to show."""
    position = params.position
    symbol = get_symbol(position, text)

    elem = resolve_element(doc, module_map, symbol, position.line)
    if elem is None:
        return None

    refined = await refine_for_signature(elem, doc, params, loader)

    desc = build_hover_doc(symbol, elem, refined)
    if not desc:
        return None

    logger.debug("hover_rendered", symbol=symbol, kind=str(elem.kind))
    return types.Hover(
        contents=types.MarkupContent(kind=types.MarkupKind.PlainText, value=desc),
    )
