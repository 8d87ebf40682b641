"""Tests for symbol resolution against a document model."""

from __future__ import annotations

from unittest.mock import patch

from perlscope.features import resolver
from perlscope.features.resolver import find_recent, lookup_symbol, resolve_element
from perlscope.index.kinds import SymbolKind
from perlscope.index.models import Element, PerlDocument

LIST_UTIL_URI = "file:///usr/lib/perl5/List/Util.pm"


class TestResolveElement:
    """Canonical short-circuit and the exactly-one rule."""

    def test_canonical_hit_skips_scoped_lookup(self, shape_doc: PerlDocument) -> None:
        # Given
        with patch.object(resolver, "lookup_symbol") as lookup:
            # When
            elem = resolve_element(shape_doc, {}, "$circle", 13)

        # Then
        assert elem is shape_doc.canonical_elems["$circle"]
        lookup.assert_not_called()

    def test_single_candidate_resolves(self, shape_doc: PerlDocument) -> None:
        elem = resolve_element(shape_doc, {}, "My::Shape->new", 12)

        assert elem is not None
        assert elem.name == "My::Shape::new"

    def test_no_candidates_is_none(self, shape_doc: PerlDocument) -> None:
        assert resolve_element(shape_doc, {}, "nothing_here", 3) is None

    def test_empty_symbol_is_none(self, shape_doc: PerlDocument) -> None:
        with patch.object(resolver, "lookup_symbol") as lookup:
            assert resolve_element(shape_doc, {}, "", 0) is None
        lookup.assert_not_called()

    def test_several_candidates_is_none(self) -> None:
        # Given
        doc = PerlDocument.from_elements(
            "file:///w.pm",
            [
                Element(name="A::render", kind=SymbolKind.LOCAL_SUB),
                Element(name="B::render", kind=SymbolKind.LOCAL_SUB),
            ],
        )

        # When
        elem = resolve_element(doc, {}, "$widget->render", 0)

        # Then
        assert elem is None
        assert len(lookup_symbol(doc, {}, "$widget->render", 0)) == 2


class TestFindRecent:
    """Nearest preceding declaration."""

    def test_picks_latest_declaration_before_line(self, shape_doc: PerlDocument) -> None:
        found = shape_doc.candidates("$x")

        assert find_recent(found, 12).line == 11
        assert find_recent(found, 15).line == 14

    def test_falls_back_to_first_when_all_later(self, shape_doc: PerlDocument) -> None:
        found = shape_doc.candidates("$x")

        assert find_recent(found, 2).line == 11


class TestLookupSymbol:
    """Scoped lookup fallbacks."""

    def test_direct_bucket_returns_single_recent(self, shape_doc: PerlDocument) -> None:
        result = lookup_symbol(shape_doc, {}, "$x", 15)

        assert [e.line for e in result] == [14]

    def test_module_map_synthesizes_module(self, shape_doc: PerlDocument) -> None:
        # When
        result = lookup_symbol(shape_doc, {"List::Util": LIST_UTIL_URI}, "List::Util", 2)

        # Then
        assert len(result) == 1
        module = result[0]
        assert module.kind is SymbolKind.MODULE
        assert module.name == "List::Util"
        assert module.package == "List::Util"
        assert module.uri == LIST_UTIL_URI
        assert module.line == 0

    def test_arrow_rewritten_to_package_separator(self, shape_doc: PerlDocument) -> None:
        result = lookup_symbol(shape_doc, {}, "My::Shape->area", 15)

        assert [e.name for e in result] == ["My::Shape::area"]

    def test_main_prefix_dropped(self, shape_doc: PerlDocument) -> None:
        result = lookup_symbol(shape_doc, {}, "main::max", 15)

        assert [e.name for e in result] == ["max"]

    def test_known_object_type_substituted(self, shape_doc: PerlDocument) -> None:
        # Given
        shape_doc.add_element(
            Element(name="My::Circle::radius", kind=SymbolKind.METHOD, package="My::Circle")
        )

        # When
        result = lookup_symbol(shape_doc, {}, "$circle->radius", 13)

        # Then
        assert [e.name for e in result] == ["My::Circle::radius"]

    def test_super_resolves_through_parent(self, shape_doc: PerlDocument) -> None:
        result = lookup_symbol(shape_doc, {}, "$self->SUPER::area", 15)

        assert [e.name for e in result] == ["My::Base::area"]
        assert result[0].kind is SymbolKind.INHERITED

    def test_unknown_invocant_falls_back_to_bare_method(self, shape_doc: PerlDocument) -> None:
        result = lookup_symbol(shape_doc, {}, "$thing->max", 15)

        assert [e.name for e in result] == ["max"]

    def test_unknown_invocant_matches_method_suffix(self, shape_doc: PerlDocument) -> None:
        result = lookup_symbol(shape_doc, {}, "$thing->new", 15)

        assert [e.name for e in result] == ["My::Shape::new"]

    def test_package_form_without_arrow_gets_no_suffix_search(
        self, shape_doc: PerlDocument
    ) -> None:
        assert lookup_symbol(shape_doc, {}, "Other::new", 15) == []
