"""Per-URI document index and the bounded wait for documents being indexed.

The indexer publishes a PerlDocument after a file is opened or changed, on
its own schedule. Symbol requests can arrive before that happens, so they
wait for the entry with a hard bound instead of failing right away.

Two wait strategies share one contract:
- DocumentIndex carries a per-URI readiness event and wakes waiters on
  publish, bounded by poll_interval * max_retries.
- Any other mapping is polled every poll_interval seconds, giving up after
  max_retries unsuccessful polls.
"""

from __future__ import annotations

import asyncio
from collections import Counter
from collections.abc import Iterator, Mapping

import structlog

from perlscope.config.constants import DOCUMENT_POLL_INTERVAL_SEC, DOCUMENT_POLL_MAX_RETRIES
from perlscope.core.errors import DocumentNotIndexedError
from perlscope.index.models import PerlDocument

logger = structlog.get_logger()


class DocumentIndex(Mapping[str, PerlDocument]):
    """Read-mostly URI -> PerlDocument mapping with publish notifications.

    Writers replace the backing dict on every publish, so readers iterating
    a snapshot never observe a half-applied update.

    Readiness events exist only while someone is waiting. The last waiter to
    leave drops the event, so a URI that is never published leaves nothing
    behind and a later wait on another event loop starts from a fresh event.
    """

    def __init__(self, documents: Mapping[str, PerlDocument] | None = None) -> None:
        self._docs: dict[str, PerlDocument] = dict(documents or {})
        self._ready: dict[str, asyncio.Event] = {}
        self._waiting: Counter[str] = Counter()

    def __getitem__(self, uri: str) -> PerlDocument:
        return self._docs[uri]

    def __iter__(self) -> Iterator[str]:
        return iter(self._docs)

    def __len__(self) -> int:
        return len(self._docs)

    def publish(self, doc: PerlDocument) -> None:
        """Install or replace the model for doc.uri and wake its waiters."""
        self._docs = {**self._docs, doc.uri: doc}
        event = self._ready.pop(doc.uri, None)
        if event is not None:
            event.set()
        logger.debug("document_published", uri=doc.uri, symbols=len(doc.elems))

    def discard(self, uri: str) -> None:
        if uri not in self._docs:
            return
        docs = dict(self._docs)
        del docs[uri]
        self._docs = docs
        logger.debug("document_discarded", uri=uri)

    async def get_document(self, uri: str) -> PerlDocument | None:
        """Non-blocking lookup, usable as a document loader."""
        return self._docs.get(uri)

    async def wait(self, uri: str, timeout: float) -> PerlDocument | None:
        """Wait up to timeout seconds for uri to be published."""
        doc = self._docs.get(uri)
        if doc is not None:
            return doc

        event = self._ready.get(uri)
        if event is None:
            event = self._ready[uri] = asyncio.Event()
        self._waiting[uri] += 1
        try:
            await asyncio.wait_for(event.wait(), timeout)
        except TimeoutError:
            return None
        finally:
            self._waiting[uri] -= 1
            if not self._waiting[uri]:
                del self._waiting[uri]
                if self._ready.get(uri) is event:
                    del self._ready[uri]
        return self._docs.get(uri)


async def wait_for_document(
    index: Mapping[str, PerlDocument],
    uri: str,
    *,
    poll_interval: float = DOCUMENT_POLL_INTERVAL_SEC,
    max_retries: int = DOCUMENT_POLL_MAX_RETRIES,
) -> PerlDocument:
    """Return the model for uri, waiting for the indexer if needed.

    Resolves immediately when the entry already exists.

    Raises:
        DocumentNotIndexedError: No entry appeared within
            poll_interval * max_retries seconds.
    """
    doc = index.get(uri)
    if doc is not None:
        return doc

    waited = poll_interval * max_retries
    if isinstance(index, DocumentIndex):
        doc = await index.wait(uri, timeout=waited)
        if doc is not None:
            return doc
    else:
        for attempt in range(1, max_retries + 1):
            await asyncio.sleep(poll_interval)
            doc = index.get(uri)
            if doc is not None:
                logger.debug("document_ready", uri=uri, attempts=attempt)
                return doc

    logger.debug("document_wait_exhausted", uri=uri, attempts=max_retries, waited_sec=waited)
    raise DocumentNotIndexedError.timeout(uri, max_retries, waited)
