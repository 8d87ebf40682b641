"""Call-site aware signature lookup for callable elements.

Elements found through imports or inheritance often carry no parameter list
of their own. The defining declaration usually does, either in the current
document under the same name or in the document the element came from.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable

import structlog
from lsprotocol import types

from perlscope.index.kinds import CALLABLE_KINDS
from perlscope.index.models import Element, PerlDocument

logger = structlog.get_logger()

DocumentLoader = Callable[[str], Awaitable[PerlDocument | None]]
"""Async URI -> document model lookup, e.g. DocumentIndex.get_document."""


def _with_signature(candidates: list[Element]) -> Element | None:
    for candidate in candidates:
        if candidate.signature is not None:
            return candidate
    return None


async def refine_for_signature(
    elem: Element,
    doc: PerlDocument,
    params: types.TextDocumentPositionParams,
    loader: DocumentLoader | None = None,
) -> Element | None:
    """Return the element whose signature best describes this call.

    Returns None for non-callables. The result may be elem itself; it is only
    meant for shaping the displayed parameter list.
    """
    if elem.kind not in CALLABLE_KINDS:
        return None
    if elem.signature is not None:
        return elem

    refined = _with_signature(doc.candidates(elem.name))
    if refined is not None:
        return refined

    if loader is None or not elem.uri or elem.uri == params.text_document.uri:
        return elem

    defining = await loader(elem.uri)
    if defining is None:
        logger.debug("signature_source_unavailable", name=elem.name, uri=elem.uri)
        return elem

    names = [elem.name]
    if elem.package and "::" not in elem.name:
        names.append(f"{elem.package}::{elem.name}")
    for name in names:
        refined = _with_signature(defining.candidates(name))
        if refined is not None:
            return refined
    return elem
