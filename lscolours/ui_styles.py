"""The full set of styles used to highlight each part of a listing."""

from __future__ import annotations

from dataclasses import dataclass, field

from lscolours.lsc import Pair
from lscolours.style import Style


@dataclass
class FileKinds:
    """Styles for file names, by kind of file."""

    normal: Style = field(default_factory=Style)
    directory: Style = field(default_factory=Style)
    symlink: Style = field(default_factory=Style)
    pipe: Style = field(default_factory=Style)
    block_device: Style = field(default_factory=Style)
    char_device: Style = field(default_factory=Style)
    socket: Style = field(default_factory=Style)
    special: Style = field(default_factory=Style)
    executable: Style = field(default_factory=Style)


@dataclass
class Permissions:
    """Styles for the characters of a permissions column."""

    user_read: Style = field(default_factory=Style)
    user_write: Style = field(default_factory=Style)
    user_execute_file: Style = field(default_factory=Style)
    user_execute_other: Style = field(default_factory=Style)

    group_read: Style = field(default_factory=Style)
    group_write: Style = field(default_factory=Style)
    group_execute: Style = field(default_factory=Style)

    other_read: Style = field(default_factory=Style)
    other_write: Style = field(default_factory=Style)
    other_execute: Style = field(default_factory=Style)

    special_user_file: Style = field(default_factory=Style)
    special_other: Style = field(default_factory=Style)

    attribute: Style = field(default_factory=Style)


@dataclass
class Size:
    """Styles for file sizes, their units and device numbers."""

    major: Style = field(default_factory=Style)
    minor: Style = field(default_factory=Style)

    number_byte: Style = field(default_factory=Style)
    number_kilo: Style = field(default_factory=Style)
    number_mega: Style = field(default_factory=Style)
    number_giga: Style = field(default_factory=Style)
    number_huge: Style = field(default_factory=Style)

    unit_byte: Style = field(default_factory=Style)
    unit_kilo: Style = field(default_factory=Style)
    unit_mega: Style = field(default_factory=Style)
    unit_giga: Style = field(default_factory=Style)
    unit_huge: Style = field(default_factory=Style)


@dataclass
class Users:
    """Styles for user and group names."""

    user_you: Style = field(default_factory=Style)
    user_someone_else: Style = field(default_factory=Style)
    group_yours: Style = field(default_factory=Style)
    group_not_yours: Style = field(default_factory=Style)


@dataclass
class Links:
    """Styles for the hard link count."""

    normal: Style = field(default_factory=Style)
    multi_link_file: Style = field(default_factory=Style)


@dataclass
class Git:
    """Styles for git status flags."""

    new: Style = field(default_factory=Style)
    modified: Style = field(default_factory=Style)
    deleted: Style = field(default_factory=Style)
    renamed: Style = field(default_factory=Style)
    typechange: Style = field(default_factory=Style)
    ignored: Style = field(default_factory=Style)
    conflicted: Style = field(default_factory=Style)


# Keys understood in LS_COLORS, mapped to (section, field); an empty
# section means an attribute of UiStyles itself.
_LS_KEYS: dict[str, tuple[str, str]] = {
    "di": ("filekinds", "directory"),
    "ex": ("filekinds", "executable"),
    "fi": ("filekinds", "normal"),
    "pi": ("filekinds", "pipe"),
    "so": ("filekinds", "socket"),
    "bd": ("filekinds", "block_device"),
    "cd": ("filekinds", "char_device"),
    "ln": ("filekinds", "symlink"),
    "or": ("", "broken_symlink"),
}

_EXA_KEYS: dict[str, tuple[str, str]] = {
    "ur": ("perms", "user_read"),
    "uw": ("perms", "user_write"),
    "ux": ("perms", "user_execute_file"),
    "ue": ("perms", "user_execute_other"),
    "gr": ("perms", "group_read"),
    "gw": ("perms", "group_write"),
    "gx": ("perms", "group_execute"),
    "tr": ("perms", "other_read"),
    "tw": ("perms", "other_write"),
    "tx": ("perms", "other_execute"),
    "su": ("perms", "special_user_file"),
    "sf": ("perms", "special_other"),
    "xa": ("perms", "attribute"),
    "nb": ("size", "number_byte"),
    "nk": ("size", "number_kilo"),
    "nm": ("size", "number_mega"),
    "ng": ("size", "number_giga"),
    "nh": ("size", "number_huge"),
    "ub": ("size", "unit_byte"),
    "uk": ("size", "unit_kilo"),
    "um": ("size", "unit_mega"),
    "ug": ("size", "unit_giga"),
    "uh": ("size", "unit_huge"),
    "df": ("size", "major"),
    "ds": ("size", "minor"),
    "uu": ("users", "user_you"),
    "un": ("users", "user_someone_else"),
    "gu": ("users", "group_yours"),
    "gn": ("users", "group_not_yours"),
    "lc": ("links", "normal"),
    "lm": ("links", "multi_link_file"),
    "ga": ("git", "new"),
    "gm": ("git", "modified"),
    "gd": ("git", "deleted"),
    "gv": ("git", "renamed"),
    "gt": ("git", "typechange"),
    "xx": ("", "punctuation"),
    "da": ("", "date"),
    "in": ("", "inode"),
    "bl": ("", "blocks"),
    "hd": ("", "header"),
    "lp": ("", "symlink_path"),
    "cc": ("", "control_char"),
    "bO": ("", "broken_path_overlay"),
}


@dataclass
class UiStyles:
    """One style for every part of the interface that can be coloured."""

    colourful: bool = False

    filekinds: FileKinds = field(default_factory=FileKinds)
    perms: Permissions = field(default_factory=Permissions)
    size: Size = field(default_factory=Size)
    users: Users = field(default_factory=Users)
    links: Links = field(default_factory=Links)
    git: Git = field(default_factory=Git)

    punctuation: Style = field(default_factory=Style)
    date: Style = field(default_factory=Style)
    inode: Style = field(default_factory=Style)
    blocks: Style = field(default_factory=Style)
    header: Style = field(default_factory=Style)
    octal: Style = field(default_factory=Style)

    symlink_path: Style = field(default_factory=Style)
    control_char: Style = field(default_factory=Style)
    broken_symlink: Style = field(default_factory=Style)
    broken_path_overlay: Style = field(default_factory=Style)

    @classmethod
    def plain(cls) -> UiStyles:
        """Styles that add no colour or formatting at all."""
        return cls()

    def _assign(self, target: tuple[str, str], style: Style) -> None:
        section, name = target
        setattr(getattr(self, section) if section else self, name, style)

    def set_ls(self, pair: Pair) -> bool:
        """Apply a pair using an LS_COLORS key; return False if the key is unknown."""
        target = _LS_KEYS.get(pair.key)
        if target is None:
            return False
        self._assign(target, pair.to_style())
        return True

    def set_exa(self, pair: Pair) -> bool:
        """Apply a pair using an EXA_COLORS-only key; return False if unknown.

        The LS_COLORS keys are not considered here, so ``set_ls`` should be
        tried first.
        """
        if pair.key == "sn":
            self.set_number_style(pair.to_style())
            return True
        if pair.key == "sb":
            self.set_unit_style(pair.to_style())
            return True
        target = _EXA_KEYS.get(pair.key)
        if target is None:
            return False
        self._assign(target, pair.to_style())
        return True

    def set_number_style(self, style: Style) -> None:
        """Use one style for the size number at every magnitude."""
        self.size.number_byte = style
        self.size.number_kilo = style
        self.size.number_mega = style
        self.size.number_giga = style
        self.size.number_huge = style

    def set_unit_style(self, style: Style) -> None:
        """Use one style for the size unit at every magnitude."""
        self.size.unit_byte = style
        self.size.unit_kilo = style
        self.size.unit_mega = style
        self.size.unit_giga = style
        self.size.unit_huge = style