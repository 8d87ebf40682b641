"""Element and document models shared with the indexer.

The indexer owns construction. Everything here is read-only for the hover and
symbol features: elements are frozen, and a document model is replaced
wholesale when a file is re-indexed.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any, TypeAlias

from perlscope.index.kinds import SymbolKind

ModuleMap: TypeAlias = Mapping[str, str]
"""Module name -> URI of the document defining it."""


@dataclass(frozen=True, slots=True)
class Element:
    """A single program entity found by the indexer."""

    name: str
    kind: SymbolKind | str
    type_detail: str = ""
    package: str = ""
    value: str = ""
    line: int = 0
    line_end: int = 0
    uri: str = ""
    signature: tuple[str, ...] | None = None

    @property
    def is_known_kind(self) -> bool:
        return isinstance(self.kind, SymbolKind)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Element:
        """Build from the JSON shape the indexer publishes.

        Accepts both ``type``/``typeDetail``/``lineEnd`` and the snake_case
        field names.
        """
        signature = data.get("signature")
        return cls(
            name=str(data["name"]),
            kind=SymbolKind.parse(data.get("kind", data.get("type", ""))),
            type_detail=str(data.get("type_detail", data.get("typeDetail", "")) or ""),
            package=str(data.get("package", "") or ""),
            value=str(data.get("value", "") or ""),
            line=int(data.get("line", 0)),
            line_end=int(data.get("line_end", data.get("lineEnd", 0))),
            uri=str(data.get("uri", "") or ""),
            signature=tuple(signature) if signature is not None else None,
        )


@dataclass
class PerlDocument:
    """Per-file aggregate of everything the indexer found.

    Attributes:
        uri: Document URI this model was built from.
        elems: Symbol text -> candidates in discovery order.
        canonical_elems: Symbol text -> the unambiguous element for it.
        parents: Package -> parent package, for ``SUPER`` lookups.
        imported: Imported module name -> line of the import.
    """

    uri: str
    elems: dict[str, list[Element]] = field(default_factory=dict)
    canonical_elems: dict[str, Element] = field(default_factory=dict)
    parents: dict[str, str] = field(default_factory=dict)
    imported: dict[str, int] = field(default_factory=dict)

    def add_element(self, elem: Element) -> None:
        self.elems.setdefault(elem.name, []).append(elem)

    def candidates(self, symbol: str) -> list[Element]:
        return self.elems.get(symbol, [])

    @classmethod
    def from_elements(
        cls,
        uri: str,
        elements: Iterable[Element],
        *,
        canonical: Mapping[str, Element] | None = None,
        parents: Mapping[str, str] | None = None,
    ) -> PerlDocument:
        doc = cls(uri=uri, canonical_elems=dict(canonical or {}), parents=dict(parents or {}))
        for elem in elements:
            doc.add_element(elem)
        return doc

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> PerlDocument:
        uri = str(data["uri"])
        elements = [Element.from_dict(e) for e in data.get("elems", [])]
        canonical = {
            symbol: Element.from_dict(e) for symbol, e in data.get("canonical", {}).items()
        }
        doc = cls.from_elements(uri, elements, canonical=canonical, parents=data.get("parents"))
        doc.imported = {str(k): int(v) for k, v in data.get("imported", {}).items()}
        return doc
