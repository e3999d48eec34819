"""The built-in colour theme."""

from __future__ import annotations

import enum

from lscolours.style import Colour, Fixed, Style, normal
from lscolours.ui_styles import (
    FileKinds,
    Git,
    Links,
    Permissions,
    Size,
    UiStyles,
    Users,
)


class ColourScale(enum.Enum):
    """How file sizes are coloured: one colour, or a gradient by magnitude."""

    FIXED = "fixed"
    GRADIENT = "gradient"


def _size_fixed() -> Size:
    return Size(
        major=normal(Colour.GREEN).bold(),
        minor=normal(Colour.GREEN),
        number_byte=normal(Colour.GREEN).bold(),
        number_kilo=normal(Colour.GREEN).bold(),
        number_mega=normal(Colour.GREEN).bold(),
        number_giga=normal(Colour.GREEN).bold(),
        number_huge=normal(Colour.GREEN).bold(),
        unit_byte=normal(Colour.GREEN),
        unit_kilo=normal(Colour.GREEN),
        unit_mega=normal(Colour.GREEN),
        unit_giga=normal(Colour.GREEN),
        unit_huge=normal(Colour.GREEN),
    )


def _size_gradient() -> Size:
    return Size(
        major=normal(Colour.GREEN).bold(),
        minor=normal(Colour.GREEN),
        number_byte=normal(Fixed(118)),
        number_kilo=normal(Fixed(190)),
        number_mega=normal(Fixed(226)),
        number_giga=normal(Fixed(220)),
        number_huge=normal(Fixed(214)),
        unit_byte=normal(Colour.GREEN),
        unit_kilo=normal(Colour.GREEN),
        unit_mega=normal(Colour.GREEN),
        unit_giga=normal(Colour.GREEN),
        unit_huge=normal(Colour.GREEN),
    )


def colourful_size(scale: ColourScale) -> Size:
    """The size styles of the built-in theme for the given scale."""
    if scale is ColourScale.GRADIENT:
        return _size_gradient()
    return _size_fixed()


def default_theme(scale: ColourScale) -> UiStyles:
    """The built-in colourful theme."""
    red, green, yellow = Colour.RED, Colour.GREEN, Colour.YELLOW
    blue, purple, cyan = Colour.BLUE, Colour.PURPLE, Colour.CYAN

    return UiStyles(
        colourful=True,
        filekinds=FileKinds(
            normal=Style(),
            directory=normal(blue).bold(),
            symlink=normal(cyan),
            pipe=normal(yellow),
            block_device=normal(yellow).bold(),
            char_device=normal(yellow).bold(),
            socket=normal(red).bold(),
            special=normal(yellow),
            executable=normal(green).bold(),
        ),
        perms=Permissions(
            user_read=normal(yellow).bold(),
            user_write=normal(red).bold(),
            user_execute_file=normal(green).bold().underline(),
            user_execute_other=normal(green).bold(),
            group_read=normal(yellow),
            group_write=normal(red),
            group_execute=normal(green),
            other_read=normal(yellow),
            other_write=normal(red),
            other_execute=normal(green),
            special_user_file=normal(purple),
            special_other=normal(purple),
            attribute=Style(),
        ),
        size=colourful_size(scale),
        users=Users(
            user_you=normal(yellow).bold(),
            user_someone_else=Style(),
            group_yours=normal(yellow).bold(),
            group_not_yours=Style(),
        ),
        links=Links(
            normal=normal(red).bold(),
            multi_link_file=normal(red).on(yellow),
        ),
        git=Git(
            new=normal(green),
            modified=normal(blue),
            deleted=normal(red),
            renamed=normal(yellow),
            typechange=normal(purple),
            ignored=Style().dimmed(),
            conflicted=normal(red),
        ),
        punctuation=normal(Fixed(244)),
        date=normal(blue),
        inode=normal(purple),
        blocks=normal(cyan),
        octal=normal(purple),
        header=Style().underline(),
        symlink_path=normal(cyan),
        control_char=normal(red),
        broken_symlink=normal(red),
        broken_path_overlay=Style().underline(),
    )