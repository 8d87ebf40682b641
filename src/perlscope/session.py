"""Per-workspace navigator state shared by hover and symbol requests."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType
from typing import Any

import structlog
from lsprotocol import types

from perlscope.config.loader import load_config
from perlscope.config.models import PerlScopeConfig
from perlscope.core.logging import clear_request_id, configure_logging, set_request_id
from perlscope.features.hover import get_hover
from perlscope.features.symbols import get_symbols, get_workspace_symbols
from perlscope.index.models import ModuleMap, PerlDocument
from perlscope.index.store import DocumentIndex

logger = structlog.get_logger()


class NavigatorSession:
    """Owns the document index, module map and open buffers of one workspace.

    The indexer calls publish() and set_module_map(); the protocol layer calls
    the request methods. Request methods never raise: a failed lookup is
    reported as None or an empty list.
    """

    def __init__(self, config: PerlScopeConfig | None = None) -> None:
        self.config = config or PerlScopeConfig()
        self.documents = DocumentIndex()
        self._module_map: Mapping[str, str] = MappingProxyType({})
        self._texts: dict[str, str] = {}

    @classmethod
    def from_workspace(cls, workspace_root: Path, **overrides: Any) -> NavigatorSession:
        """Build a session from the workspace config files and install its logging.

        Raises:
            ConfigError: The workspace or global config file is invalid.
        """
        config = load_config(workspace_root, **overrides)
        configure_logging(config=config.logging)
        logger.info(
            "session_started",
            workspace=str(workspace_root),
            wait_timeout_sec=config.index.wait_timeout_sec,
        )
        return cls(config)

    @property
    def module_map(self) -> ModuleMap:
        return self._module_map

    def set_module_map(self, modules: Mapping[str, str]) -> None:
        """Replace the workspace module map wholesale."""
        self._module_map = MappingProxyType(dict(modules))
        logger.info("module_map_updated", modules=len(self._module_map))

    def publish(self, doc: PerlDocument) -> None:
        self.documents.publish(doc)

    def open_document(self, uri: str, text: str) -> None:
        self._texts[uri] = text

    def close_document(self, uri: str) -> None:
        self._texts.pop(uri, None)
        self.documents.discard(uri)

    async def hover(self, params: types.TextDocumentPositionParams) -> types.Hover | None:
        uri = params.text_document.uri
        set_request_id()
        try:
            doc = self.documents.get(uri)
            text = self._texts.get(uri)
            if doc is None or text is None:
                logger.debug("hover_skipped", uri=uri, indexed=doc is not None)
                return None
            return await get_hover(
                params, doc, text, self._module_map, loader=self.documents.get_document
            )
        finally:
            clear_request_id()

    async def document_symbols(self, uri: str) -> list[types.SymbolInformation]:
        set_request_id()
        try:
            return await get_symbols(
                self.documents,
                uri,
                poll_interval=self.config.index.poll_interval_sec,
                max_retries=self.config.index.max_retries,
            )
        finally:
            clear_request_id()

    async def workspace_symbols(self, query: str) -> list[types.SymbolInformation]:
        return await get_workspace_symbols(query, self._module_map)
