"""Parsing of LS_COLORS-style strings into keys and styles."""

from __future__ import annotations

import re
from collections import deque
from dataclasses import dataclass
from typing import Callable, Iterator

from lscolours.style import RGB, AnyColour, Colour, Fixed, Style

_BYTE = re.compile(r"\+?[0-9]+")

_ATTRIBUTES: dict[str, Callable[[Style], Style]] = {
    "1": Style.bold,
    "2": Style.dimmed,
    "3": Style.italic,
    "4": Style.underline,
    "5": Style.blink,
    # 6 would be a faster blink, which is not supported
    "7": Style.reverse,
    "8": Style.hidden,
    "9": Style.strikethrough,
}

_BASIC_COLOURS = [
    Colour.BLACK,
    Colour.RED,
    Colour.GREEN,
    Colour.YELLOW,
    Colour.BLUE,
    Colour.PURPLE,
    Colour.CYAN,
    Colour.WHITE,
]

_FOREGROUNDS = {str(30 + i): colour for i, colour in enumerate(_BASIC_COLOURS)}
_BACKGROUNDS = {str(40 + i): colour for i, colour in enumerate(_BASIC_COLOURS)}


def _parse_byte(text: str | None) -> int | None:
    if text is None or not _BYTE.fullmatch(text):
        return None
    value = int(text)
    return value if value <= 255 else None


def _take(tokens: deque[str]) -> str | None:
    return tokens.popleft() if tokens else None


def _parse_high_colour(tokens: deque[str]) -> AnyColour | None:
    """Read a 256-colour or true-colour spec following a 38 or 48 code."""
    if not tokens:
        return None

    if tokens[0] == "5":
        tokens.popleft()
        number = _parse_byte(_take(tokens))
        return Fixed(number) if number is not None else None

    if tokens[0] == "2":
        tokens.popleft()
        if not tokens:
            return None
        r = _parse_byte(tokens.popleft())
        g = _parse_byte(_take(tokens))
        b = _parse_byte(_take(tokens))
        if r is not None and g is not None and b is not None:
            return RGB(r, g, b)

    return None


def parse_style(value: str) -> Style:
    """Turn a semicolon-separated list of ANSI codes into a Style.

    Unknown or malformed codes are ignored.
    """
    style = Style()
    tokens = deque(value.split(";"))

    while tokens:
        code = tokens.popleft().lstrip("0")

        if code in _ATTRIBUTES:
            style = _ATTRIBUTES[code](style)
        elif code in _FOREGROUNDS:
            style = style.fg(_FOREGROUNDS[code])
        elif code in _BACKGROUNDS:
            style = style.on(_BACKGROUNDS[code])
        elif code == "38":
            colour = _parse_high_colour(tokens)
            if colour is not None:
                style = style.fg(colour)
        elif code == "48":
            colour = _parse_high_colour(tokens)
            if colour is not None:
                style = style.on(colour)

    return style


@dataclass(frozen=True)
class Pair:
    """One key=value entry of a colour definition string."""

    key: str
    value: str

    def to_style(self) -> Style:
        return parse_style(self.value)


@dataclass(frozen=True)
class LSColors:
    """A colour definition string in the LS_COLORS format."""

    text: str

    def pairs(self) -> Iterator[Pair]:
        """Yield every well-formed key=value pair, in order."""
        for entry in self.text.split(":"):
            bits = entry.split("=")[:3]
            if len(bits) == 2 and bits[0] and bits[1]:
                yield Pair(key=bits[0], value=bits[1])