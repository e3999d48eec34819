"""Reading LS_COLORS and EXA_COLORS definitions into styles and file globs."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Protocol

from lscolours.lsc import LSColors
from lscolours.style import Style
from lscolours.ui_styles import UiStyles

log = logging.getLogger(__name__)


class GlobPatternError(ValueError):
    """A glob pattern could not be compiled."""

    def __init__(self, position: int, message: str) -> None:
        super().__init__(f"Pattern syntax error near position {position}: {message}")
        self.position = position
        self.message = message


def _char_class(spec: str, negate: bool) -> str:
    items: list[str] = []
    pos = 0
    while pos < len(spec):
        if pos + 2 < len(spec) and spec[pos + 1] == "-":
            start, end = spec[pos], spec[pos + 2]
            if start <= end:
                items.append(f"{re.escape(start)}-{re.escape(end)}")
            pos += 3
        else:
            items.append(re.escape(spec[pos]))
            pos += 1

    if not items:
        return "." if negate else "(?!)"
    return "[" + ("^" if negate else "") + "".join(items) + "]"


def compile_glob(pattern: str) -> re.Pattern[str]:
    """Compile a shell-style glob into a regular expression matching whole names.

    ``*`` and ``?`` match any characters, ``[...]`` and ``[!...]`` match
    character sets and ranges, and ``**`` matches across directories when it
    forms a whole path component.
    """
    parts: list[str] = []
    length = len(pattern)
    pos = 0

    while pos < length:
        char = pattern[pos]

        if char == "*":
            start = pos
            while pos < length and pattern[pos] == "*":
                pos += 1
            count = pos - start

            if count > 2:
                raise GlobPatternError(start, "wildcards are either regular `*` or recursive `**`")
            if count == 1:
                parts.append(".*")
                continue

            component = "recursive wildcards must form a single path component"
            if start > 0 and pattern[start - 1] != "/":
                raise GlobPatternError(start, component)
            if pos == length:
                parts.append(".*")
            elif pattern[pos] == "/":
                parts.append("(?:.*/)?")
                pos += 1
            else:
                raise GlobPatternError(pos, component)

        elif char == "?":
            parts.append(".")
            pos += 1

        elif char == "[":
            negate = pos + 1 < length and pattern[pos + 1] == "!"
            first = pos + 2 if negate else pos + 1
            close = pattern.find("]", first + 1)
            if first >= length or close == -1:
                raise GlobPatternError(pos, "invalid range pattern")
            parts.append(_char_class(pattern[first:close], negate))
            pos = close + 1

        else:
            parts.append(re.escape(char))
            pos += 1

    return re.compile("".join(parts), re.DOTALL)


class FileColours(Protocol):
    def colour_file(self, name: str) -> Style | None: ...


class NoFileColours:
    """A file colouriser that never colours anything."""

    def colour_file(self, name: str) -> Style | None:
        return None

    def __eq__(self, other: object) -> bool:
        return isinstance(other, NoFileColours)

    def __hash__(self) -> int:
        return hash(NoFileColours)

    def __repr__(self) -> str:
        return "NoFileColours()"


@dataclass
class ExtensionMappings:
    """Glob patterns mapped to styles; later entries take precedence."""

    mappings: list[tuple[re.Pattern[str], Style]] = field(default_factory=list)

    def add(self, pattern: re.Pattern[str], style: Style) -> None:
        self.mappings.append((pattern, style))

    def colour_file(self, name: str) -> Style | None:
        for pattern, style in reversed(self.mappings):
            if pattern.fullmatch(name):
                return style
        return None

    def __len__(self) -> int:
        return len(self.mappings)


@dataclass
class ChainedFileColours:
    """Try one file colouriser, then fall back to another."""

    first: FileColours
    second: FileColours

    def colour_file(self, name: str) -> Style | None:
        style = self.first.colour_file(name)
        if style is not None:
            return style
        return self.second.colour_file(name)


@dataclass
class Definitions:
    """The raw LS_COLORS and EXA_COLORS values, if set."""

    ls: str | None = None
    exa: str | None = None

    def parse_color_vars(self, colours: UiStyles) -> tuple[ExtensionMappings, bool]:
        """Apply UI keys to ``colours`` and collect the rest as file globs.

        Returns the glob mappings and whether the default file type colours
        should still be used; EXA_COLORS starting with ``reset`` turns them off.
        """
        exts = ExtensionMappings()

        def add_glob(key: str, style: Style) -> None:
            try:
                exts.add(compile_glob(key), style)
            except GlobPatternError as error:
                log.warning("Couldn't parse glob pattern %r: %s", key, error)

        if self.ls is not None:
            for pair in LSColors(self.ls).pairs():
                if not colours.set_ls(pair):
                    add_glob(pair.key, pair.to_style())

        use_default_filetypes = True

        if self.exa is not None:
            if self.exa == "reset" or self.exa.startswith("reset:"):
                use_default_filetypes = False

            for pair in LSColors(self.exa).pairs():
                if not colours.set_ls(pair) and not colours.set_exa(pair):
                    add_glob(pair.key, pair.to_style())

        return exts, use_default_filetypes