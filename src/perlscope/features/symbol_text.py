"""Extract the Perl symbol under the cursor."""

from __future__ import annotations

import re

from lsprotocol import types

SIGILS = ("$", "@", "%")

# Going left we accept package separators and method arrows so that
# ``$obj->meth`` and ``Foo::Bar::baz`` come back whole. Going right we stop at
# the first non-word character, so hovering ``Foo`` in ``Foo::Bar`` yields
# ``Foo`` and each segment of a package path is addressable on its own.
_LEFT_CHAR = re.compile(r"[\w:>-]")
_RIGHT_CHAR = re.compile(r"\w")


def _line_text(text: str, line: int) -> str | None:
    lines = text.splitlines()
    if 0 <= line < len(lines):
        return lines[line]
    return None


def get_symbol(position: types.Position, text: str) -> str:
    """Return the symbol text at position, sigil included.

    Element access is mapped back to the container's declared sigil:
    ``$foo[0]`` -> ``@foo``, ``$foo{k}`` -> ``%foo`` and ``$$foo[0]`` ->
    ``$foo``. ``${foo}`` style blocks keep their outer sigil.
    """
    line = _line_text(text, position.line)
    if not line:
        return ""

    index = min(position.character, len(line))
    left = index - 1
    right = index

    # Cursor sitting on a sigil or right before a word
    if right < len(line) and (line[right] in SIGILS or _RIGHT_CHAR.fullmatch(line[right])):
        right += 1

    while left >= 0 and _LEFT_CHAR.fullmatch(line[left]):
        # Only ``->`` may contribute a ``>``; ``=>`` and ``>`` end the symbol
        if line[left] == ">" and left >= 1 and line[left - 1] != "-":
            break
        left -= 1
    left = max(0, left + 1)

    while right < len(line) and _RIGHT_CHAR.fullmatch(line[right]):
        right += 1
    right = max(left, right)

    symbol = line[left:right]
    l_char = line[left - 1] if left > 0 else ""
    ll_char = line[left - 2] if left > 1 else ""
    r_char = line[right] if right < len(line) else ""

    if l_char == "$":
        if r_char == "[" and ll_char != "$":
            symbol = "@" + symbol
        elif r_char == "{" and ll_char != "$":
            symbol = "%" + symbol
        else:
            symbol = "$" + symbol
    elif l_char in ("@", "%"):
        symbol = l_char + symbol
    elif l_char == "{" and r_char == "}" and ll_char in SIGILS:
        symbol = ll_char + symbol

    return symbol
