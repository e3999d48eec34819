import pytest

from lscolours.colour_vars import (
    ChainedFileColours,
    Definitions,
    ExtensionMappings,
    NoFileColours,
)
from lscolours.default_theme import ColourScale, default_theme
from lscolours.style import Colour, Fixed, Style, normal
from lscolours.theme import Options, Prefix, Theme, UseColours, apply_overlay
from lscolours.ui_styles import UiStyles


class _Defaults:
    def __init__(self, style):
        self.style = style

    def colour_file(self, name):
        return self.style


def test_apply_overlay_underline():
    assert apply_overlay(normal(Colour.RED), Style().underline()) == normal(Colour.RED).underline()


def test_apply_overlay_replaces_colours():
    base = normal(Colour.RED).on(Colour.YELLOW).bold()
    overlay = normal(Colour.BLUE)
    assert apply_overlay(base, overlay) == normal(Colour.BLUE).on(Colour.YELLOW).bold()


def test_apply_overlay_empty_is_identity():
    base = normal(Fixed(244)).italic()
    assert apply_overlay(base, Style()) == base


def test_never_gives_plain_theme():
    theme = Options(UseColours.NEVER, ColourScale.FIXED, Definitions(ls="di=31")).to_theme(True)
    assert theme.ui == UiStyles.plain()
    assert theme.exts == NoFileColours()


def test_automatic_without_tty_is_plain():
    theme = Options(UseColours.AUTOMATIC).to_theme(False)
    assert theme.ui == UiStyles.plain()


def test_automatic_with_tty_is_colourful():
    theme = Options(UseColours.AUTOMATIC, ColourScale.GRADIENT).to_theme(True)
    assert theme.ui == default_theme(ColourScale.GRADIENT)
    assert theme.exts == NoFileColours()


def test_ls_colours_change_ui():
    options = Options(UseColours.ALWAYS, ColourScale.FIXED, Definitions(ls="di=31"))
    theme = options.to_theme(False)
    assert theme.ui.filekinds.directory == normal(Colour.RED)


def test_globs_become_mappings():
    options = Options(UseColours.ALWAYS, ColourScale.FIXED, Definitions(ls="*.txt=31"))
    theme = options.to_theme(False)
    assert isinstance(theme.exts, ExtensionMappings)
    assert theme.colour_file("notes.txt") == normal(Colour.RED)
    assert theme.colour_file("notes.md") == theme.ui.filekinds.normal


def test_defaults_used_when_no_mappings():
    defaults = _Defaults(normal(Colour.CYAN))
    theme = Options(UseColours.ALWAYS).to_theme(False, defaults)
    assert theme.exts is defaults
    assert theme.colour_file("anything") == normal(Colour.CYAN)


def test_mappings_chain_to_defaults():
    defaults = _Defaults(normal(Colour.CYAN))
    options = Options(UseColours.ALWAYS, ColourScale.FIXED, Definitions(ls="*.txt=31"))
    theme = options.to_theme(False, defaults)
    assert isinstance(theme.exts, ChainedFileColours)
    assert theme.colour_file("a.txt") == normal(Colour.RED)
    assert theme.colour_file("a.rs") == normal(Colour.CYAN)


def test_reset_drops_defaults():
    defaults = _Defaults(normal(Colour.CYAN))
    options = Options(UseColours.ALWAYS, ColourScale.FIXED, Definitions(exa="reset"))
    theme = options.to_theme(False, defaults)
    assert theme.exts == NoFileColours()
    assert theme.colour_file("a.rs") == theme.ui.filekinds.normal


def test_reset_keeps_own_mappings():
    defaults = _Defaults(normal(Colour.CYAN))
    options = Options(UseColours.ALWAYS, ColourScale.FIXED, Definitions(exa="reset:*.zip=31"))
    theme = options.to_theme(False, defaults)
    assert theme.colour_file("a.zip") == normal(Colour.RED)
    assert theme.colour_file("a.rs") == theme.ui.filekinds.normal


@pytest.mark.parametrize(
    "prefix, expected",
    [
        (None, Fixed(118)),
        (Prefix.KILO, Fixed(190)),
        (Prefix.KIBI, Fixed(190)),
        (Prefix.MEBI, Fixed(226)),
        (Prefix.GIGA, Fixed(220)),
        (Prefix.TERA, Fixed(214)),
        (Prefix.YOBI, Fixed(214)),
    ],
)
def test_size_gradient(prefix, expected):
    theme = Theme(ui=default_theme(ColourScale.GRADIENT))
    assert theme.size(prefix) == normal(expected)
    assert theme.unit(prefix) == normal(Colour.GREEN)


def test_unit_follows_custom_styles():
    ui = UiStyles()
    ui.size.unit_mega = normal(Fixed(117))
    theme = Theme(ui=ui)
    assert theme.unit(Prefix.MEGA) == normal(Fixed(117))
    assert theme.unit(None) == Style()


def test_broken_styles_use_overlay():
    theme = Theme(ui=default_theme(ColourScale.FIXED))
    assert theme.broken_filename() == normal(Colour.RED).underline()
    assert theme.broken_control_char() == normal(Colour.RED).underline()


def test_broken_filename_plain():
    assert Theme(ui=UiStyles.plain()).broken_filename() == Style()