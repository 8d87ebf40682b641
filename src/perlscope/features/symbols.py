"""Document and workspace symbol listings."""

from __future__ import annotations

from collections.abc import Mapping

import structlog
from lsprotocol import types

from perlscope.config.constants import (
    DOCUMENT_POLL_INTERVAL_SEC,
    DOCUMENT_POLL_MAX_RETRIES,
    PLACEHOLDER_RANGE_END_CHAR,
)
from perlscope.core.errors import DocumentNotIndexedError
from perlscope.index.kinds import OUTLINE_KINDS, SymbolKind
from perlscope.index.models import ModuleMap, PerlDocument
from perlscope.index.store import wait_for_document

logger = structlog.get_logger()


def placeholder_location(uri: str, line: int) -> types.Location:
    """Location covering a whole line, not the exact token span."""
    return types.Location(
        uri=uri,
        range=types.Range(
            start=types.Position(line=line, character=0),
            end=types.Position(line=line, character=PLACEHOLDER_RANGE_END_CHAR),
        ),
    )


async def get_symbols(
    index: Mapping[str, PerlDocument],
    uri: str,
    *,
    poll_interval: float = DOCUMENT_POLL_INTERVAL_SEC,
    max_retries: int = DOCUMENT_POLL_MAX_RETRIES,
) -> list[types.SymbolInformation]:
    """Subs and packages of uri, in discovery order.

    Waits for the indexer to publish the document. Returns an empty list when
    it never does.
    """
    try:
        doc = await wait_for_document(
            index, uri, poll_interval=poll_interval, max_retries=max_retries
        )
    except DocumentNotIndexedError as e:
        logger.debug("document_symbols_unavailable", uri=uri, reason=e.message)
        return []

    symbols: list[types.SymbolInformation] = []
    for name, elements in doc.elems.items():
        if not elements:
            continue
        # Same-named elements describe the same sub or package
        element = elements[0]
        if element.kind not in OUTLINE_KINDS:
            continue
        symbols.append(
            types.SymbolInformation(
                name=name,
                kind=(
                    types.SymbolKind.Package
                    if element.kind == SymbolKind.PACKAGE
                    else types.SymbolKind.Function
                ),
                location=placeholder_location(uri, element.line),
            )
        )
    return symbols


async def get_workspace_symbols(
    query: str,  # noqa: ARG001
    module_map: ModuleMap,
) -> list[types.SymbolInformation]:
    """Every known module. Clients fuzzy-match against query themselves."""
    return [
        types.SymbolInformation(
            name=mod_name,
            kind=types.SymbolKind.Module,
            location=placeholder_location(mod_uri, 0),
        )
        for mod_name, mod_uri in module_map.items()
    ]
