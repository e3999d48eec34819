from dataclasses import fields

import pytest

from lscolours.default_theme import ColourScale, colourful_size, default_theme
from lscolours.lsc import Pair
from lscolours.style import Colour, Fixed, Style, normal
from lscolours.ui_styles import UiStyles


@pytest.mark.parametrize("scale", list(ColourScale))
def test_theme_is_colourful(scale):
    theme = default_theme(scale)
    assert theme.colourful is True
    assert theme != UiStyles.plain()


def test_pinned_theme_values():
    theme = default_theme(ColourScale.FIXED)
    assert theme.filekinds.directory == normal(Colour.BLUE).bold()
    assert theme.punctuation == normal(Fixed(244))
    assert theme.links.multi_link_file == normal(Colour.RED).on(Colour.YELLOW)


def test_gradient_pinned_values():
    size = colourful_size(ColourScale.GRADIENT)
    assert size.number_byte == normal(Fixed(118))
    assert size.number_huge == normal(Fixed(214))


def test_scales_differ_only_in_number_styles():
    fixed = colourful_size(ColourScale.FIXED)
    gradient = colourful_size(ColourScale.GRADIENT)
    for f in fields(fixed):
        same = getattr(fixed, f.name) == getattr(gradient, f.name)
        assert same == (not f.name.startswith("number_")), f.name


def test_fixed_scale_numbers_are_uniform():
    size = colourful_size(ColourScale.FIXED)
    numbers = {size.number_byte, size.number_kilo, size.number_mega,
               size.number_giga, size.number_huge}
    assert numbers == {size.major}


def test_gradient_numbers_are_all_distinct():
    size = colourful_size(ColourScale.GRADIENT)
    numbers = [size.number_byte, size.number_kilo, size.number_mega,
               size.number_giga, size.number_huge]
    assert len(set(numbers)) == len(numbers)


@pytest.mark.parametrize("scale", list(ColourScale))
def test_theme_uses_colourful_size(scale):
    assert default_theme(scale).size == colourful_size(scale)


def test_units_match_minor_in_both_scales():
    for scale in ColourScale:
        size = colourful_size(scale)
        units = {size.unit_byte, size.unit_kilo, size.unit_mega,
                 size.unit_giga, size.unit_huge}
        assert units == {size.minor}


def test_each_call_returns_independent_theme():
    first = default_theme(ColourScale.FIXED)
    second = default_theme(ColourScale.FIXED)
    assert first == second
    first.set_ls(Pair("di", "31"))
    assert second.filekinds.directory == normal(Colour.BLUE).bold()
    assert first != second


def test_overlay_and_header_are_underlines():
    theme = default_theme(ColourScale.GRADIENT)
    assert theme.broken_path_overlay == Style().underline()
    assert theme.header == theme.broken_path_overlay
    assert theme.git.ignored == Style().dimmed()