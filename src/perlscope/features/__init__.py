"""Editor features: hover and symbol listings."""

from perlscope.features.hover import build_hover_doc, get_hover, uri_to_path
from perlscope.features.resolver import find_recent, lookup_symbol, resolve_element
from perlscope.features.signatures import DocumentLoader, refine_for_signature
from perlscope.features.symbol_text import get_symbol
from perlscope.features.symbols import get_symbols, get_workspace_symbols, placeholder_location

__all__ = [
    "build_hover_doc",
    "get_hover",
    "uri_to_path",
    "find_recent",
    "lookup_symbol",
    "resolve_element",
    "DocumentLoader",
    "refine_for_signature",
    "get_symbol",
    "get_symbols",
    "get_workspace_symbols",
    "placeholder_location",
]
