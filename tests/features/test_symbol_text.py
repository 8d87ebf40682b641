"""Tests for cursor symbol extraction."""

import pytest
from lsprotocol.types import Position

from perlscope.features.symbol_text import get_symbol


def _at(text: str, marker: str, offset: int = 0, line: int = 0) -> Position:
    """Position of offset characters into the first occurrence of marker."""
    return Position(line=line, character=text.splitlines()[line].index(marker) + offset)


class TestGetSymbol:
    """Symbol boundaries and sigil reconstruction."""

    @pytest.mark.parametrize(
        ("line", "marker", "offset", "expected"),
        [
            ("my $count = 1;", "count", 2, "$count"),
            ("my $count = 1;", "$count", 0, "$count"),
            ("print $list[0];", "list", 1, "@list"),
            ("print $opts{verbose};", "opts", 1, "%opts"),
            ("print $$ref[0];", "ref", 1, "$ref"),
            ("print $$ref{key};", "ref", 1, "$ref"),
            ("for (@items) {}", "items", 0, "@items"),
            ("keys %opts;", "opts", 2, "%opts"),
            ("print ${name};", "name", 1, "$name"),
            ("print @{rows};", "rows", 1, "@rows"),
            ("$obj->render();", "render", 2, "$obj->render"),
            ("Foo::Bar->new;", "new", 1, "Foo::Bar->new"),
            ("main::helper();", "helper", 0, "main::helper"),
        ],
    )
    def test_extracts_symbol(self, line: str, marker: str, offset: int, expected: str) -> None:
        assert get_symbol(_at(line, marker, offset), line) == expected

    def test_package_path_stops_at_separator_going_right(self) -> None:
        """Each segment of Foo::Bar::baz resolves to its own prefix."""
        line = "Foo::Bar::baz();"

        assert get_symbol(_at(line, "Foo", 1), line) == "Foo"
        assert get_symbol(_at(line, "Bar", 1), line) == "Foo::Bar"
        assert get_symbol(_at(line, "baz", 1), line) == "Foo::Bar::baz"

    def test_fat_comma_is_not_part_of_symbol(self) -> None:
        line = "my %h = (key=>value);"

        assert get_symbol(_at(line, "value", 2), line) == "value"

    def test_greater_than_is_not_part_of_symbol(self) -> None:
        line = "if ($a>limit) {}"

        assert get_symbol(_at(line, "limit", 2), line) == "limit"

    def test_uses_requested_line(self) -> None:
        text = "package Foo;\nsub run { helper(); }\n"

        assert get_symbol(_at(text, "helper", 3, line=1), text) == "helper"

    def test_line_out_of_range_is_empty(self) -> None:
        assert get_symbol(Position(line=5, character=0), "one line\n") == ""

    def test_cursor_on_whitespace_is_empty(self) -> None:
        line = "foo   bar"

        assert get_symbol(Position(line=0, character=4), line) == ""

    def test_cursor_past_end_of_line_clamped(self) -> None:
        line = "return $value"

        assert get_symbol(Position(line=0, character=200), line) == "$value"
