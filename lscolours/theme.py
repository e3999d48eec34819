"""Turning colour options into a theme, and picking styles out of it."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field, replace

from lscolours.colour_vars import (
    ChainedFileColours,
    Definitions,
    FileColours,
    NoFileColours,
)
from lscolours.default_theme import ColourScale, default_theme
from lscolours.style import Style
from lscolours.ui_styles import UiStyles


class UseColours(enum.Enum):
    """When to display coloured rather than plain output."""

    ALWAYS = "always"
    AUTOMATIC = "automatic"
    NEVER = "never"


class Prefix(enum.Enum):
    """Decimal and binary size prefixes."""

    KILO = "k"
    MEGA = "M"
    GIGA = "G"
    TERA = "T"
    PETA = "P"
    EXA = "E"
    ZETTA = "Z"
    YOTTA = "Y"
    KIBI = "Ki"
    MEBI = "Mi"
    GIBI = "Gi"
    TEBI = "Ti"
    PEBI = "Pi"
    EXBI = "Ei"
    ZEBI = "Zi"
    YOBI = "Yi"


_KILO = frozenset({Prefix.KILO, Prefix.KIBI})
_MEGA = frozenset({Prefix.MEGA, Prefix.MEBI})
_GIGA = frozenset({Prefix.GIGA, Prefix.GIBI})


def apply_overlay(base: Style, overlay: Style) -> Style:
    """Amend ``base`` with every colour and flag that ``overlay`` sets."""
    changes: dict[str, object] = {}
    if overlay.foreground is not None:
        changes["foreground"] = overlay.foreground
    if overlay.background is not None:
        changes["background"] = overlay.background
    for flag in (
        "is_bold",
        "is_dimmed",
        "is_italic",
        "is_underline",
        "is_blink",
        "is_reverse",
        "is_hidden",
        "is_strikethrough",
    ):
        if getattr(overlay, flag):
            changes[flag] = True
    return replace(base, **changes)


@dataclass
class Theme:
    """The UI styles plus a colouriser for file names."""

    ui: UiStyles
    exts: FileColours = field(default_factory=NoFileColours)

    def colour_file(self, name: str) -> Style:
        """The style for a file name, falling back to the normal file style."""
        style = self.exts.colour_file(name)
        return style if style is not None else self.ui.filekinds.normal

    def broken_filename(self) -> Style:
        return apply_overlay(self.ui.broken_symlink, self.ui.broken_path_overlay)

    def broken_control_char(self) -> Style:
        return apply_overlay(self.ui.control_char, self.ui.broken_path_overlay)

    def size(self, prefix: Prefix | None) -> Style:
        """The style for a size number with the given prefix."""
        sizes = self.ui.size
        if prefix is None:
            return sizes.number_byte
        if prefix in _KILO:
            return sizes.number_kilo
        if prefix in _MEGA:
            return sizes.number_mega
        if prefix in _GIGA:
            return sizes.number_giga
        return sizes.number_huge

    def unit(self, prefix: Prefix | None) -> Style:
        """The style for a size unit with the given prefix."""
        sizes = self.ui.size
        if prefix is None:
            return sizes.unit_byte
        if prefix in _KILO:
            return sizes.unit_kilo
        if prefix in _MEGA:
            return sizes.unit_mega
        if prefix in _GIGA:
            return sizes.unit_giga
        return sizes.unit_huge


@dataclass
class Options:
    """How and whether to colour output."""

    use_colours: UseColours = UseColours.AUTOMATIC
    colour_scale: ColourScale = ColourScale.FIXED
    definitions: Definitions = field(default_factory=Definitions)

    def to_theme(self, isatty: bool, default_colours: FileColours | None = None) -> Theme:
        """Build the theme to use.

        ``default_colours`` is the built-in file type colouriser; it is used
        as a fallback unless EXA_COLORS starts with ``reset``.
        """
        if self.use_colours is UseColours.NEVER or (
            self.use_colours is UseColours.AUTOMATIC and not isatty
        ):
            return Theme(ui=UiStyles.plain(), exts=NoFileColours())

        ui = default_theme(self.colour_scale)
        mappings, use_default_filetypes = self.definitions.parse_color_vars(ui)

        defaults = default_colours if use_default_filetypes else None
        exts: FileColours
        if len(mappings) and defaults is not None:
            exts = ChainedFileColours(mappings, defaults)
        elif len(mappings):
            exts = mappings
        elif defaults is not None:
            exts = defaults
        else:
            exts = NoFileColours()

        return Theme(ui=ui, exts=exts)