# lscolours

Read the colour definitions found in the `LS_COLORS` and `EXA_COLORS`
environment variables, turn them into `Style` values, and build a
complete colour theme for a file lister from them. The package has no
dependencies outside the standard library.

## Installing

```
pip install lscolours
```

## Styles

`lscolours.style` defines the values everything else is built from:

- `Colour`: the eight basic terminal colours (`BLACK`, `RED`, `GREEN`,
  `YELLOW`, `BLUE`, `PURPLE`, `CYAN`, `WHITE`).
- `Fixed(number)`: a colour from the 256-colour palette.
- `RGB(r, g, b)`: a 24-bit colour.
- `Style`: an immutable style with an optional foreground and background
  colour and the flags bold, dimmed, italic, underline, blink, reverse,
  hidden and strikethrough.

`Fixed` and `RGB` raise `ValueError` when a component is outside 0 to 255.
Each modifier on `Style` (`bold()`, `underline()`, `fg(colour)`,
`on(colour)` and so on) returns a new style. `normal(colour)` is
shorthand for a style with only a foreground colour.

## Parsing a single style

`lscolours.lsc.parse_style` reads one list of SGR codes separated by
semicolons, such as `01;34` or `38;5;149`, and returns a `Style`. It
handles attribute codes 1 to 5 and 7 to 9, foreground codes 30 to 37,
background codes 40 to 47, and 256-colour (`38;5;n`, `48;5;n`) and
true-colour (`38;2;r;g;b`, `48;2;r;g;b`) colours. Leading zeros are
ignored. Unknown or malformed codes are skipped without raising an error.

```python
from lscolours.lsc import parse_style
from lscolours.style import Colour, Fixed, Style

assert parse_style("1;34") == Style().fg(Colour.BLUE).bold()
assert parse_style("48;5;1") == Style().on(Fixed(1))
assert parse_style("GREEN") == Style()
```

## Reading a whole variable

`LSColors(text).pairs()` yields every well-formed `key=value` entry of a
colon-separated string as a `Pair`, in order. Entries with no key, no
value or more than one `=` are left out. `Pair.to_style()` parses the
value.

```python
from lscolours.lsc import LSColors

for pair in LSColors("di=34:*.txt=31").pairs():
    print(pair.key, pair.to_style())
```

## UI styles and the default theme

`lscolours.ui_styles.UiStyles` holds one style for every part of a
listing that can be coloured: file kinds, permissions, sizes, users,
links, git status, punctuation, dates, inodes, blocks, headers, symlink
paths, control characters and broken links. `UiStyles.plain()` gives a
set with no styling at all.

`UiStyles.set_ls(pair)` applies one of the keys `ls` understands (`di`,
`ex`, `fi`, `pi`, `so`, `bd`, `cd`, `ln`, `or`), and `set_exa(pair)` one
of the further keys accepted in `EXA_COLORS` (for example `ur`, `sn`,
`ga`, `xx`, `da`, `bO`). Both return `False` for a key they do not know.
`set_number_style` and `set_unit_style` set the size number or unit
style for every magnitude at once.

`lscolours.default_theme.default_theme(scale)` returns the built-in
colourful `UiStyles`. `ColourScale.FIXED` colours every size number the
same; `ColourScale.GRADIENT` uses a different 256-colour shade for each
magnitude. `colourful_size(scale)` returns just the size styles.

## Building a theme

`lscolours.colour_vars.Definitions` holds the raw `LS_COLORS` and
`EXA_COLORS` strings. Its `parse_color_vars(colours)` applies the
recognised keys to a `UiStyles` in place and returns an
`ExtensionMappings` of the remaining keys, compiled as glob patterns,
together with a flag that is `False` when `EXA_COLORS` is `reset` or
starts with `reset:`. Keys from `EXA_COLORS` are applied after those from
`LS_COLORS`, so they override them.

`lscolours.theme.Options.to_theme(isatty, default_colours)` builds a
`Theme`. When `use_colours` is `UseColours.NEVER`, or
`UseColours.AUTOMATIC` and `isatty` is false, the theme is plain and
colours no file names. Otherwise it starts from the default theme,
applies the definitions, and colours file names from the glob mappings,
falling back to `default_colours` (any object with a
`colour_file(name)` method returning a `Style` or `None`) unless
`EXA_COLORS` asked for a reset.

```python
import os
import sys

from lscolours.colour_vars import Definitions
from lscolours.default_theme import ColourScale
from lscolours.theme import Options, Prefix, UseColours

options = Options(
    use_colours=UseColours.AUTOMATIC,
    colour_scale=ColourScale.FIXED,
    definitions=Definitions(
        ls=os.environ.get("LS_COLORS"),
        exa=os.environ.get("EXA_COLORS"),
    ),
)
theme = options.to_theme(sys.stdout.isatty(), default_colours=None)

name_style = theme.colour_file("notes.txt")
size_style = theme.size(Prefix.KIBI)
unit_style = theme.unit(None)
```

`Theme.colour_file(name)` returns the style of the last matching glob,
or the normal file style when none matches. `Theme.size(prefix)` and
`Theme.unit(prefix)` pick the number or unit style for a size prefix
(`None` for plain bytes). `Theme.broken_filename()` and
`Theme.broken_control_char()` lay the broken-path overlay over the
broken symlink and control character styles, using `apply_overlay`.

## Glob patterns

`lscolours.colour_vars.compile_glob` turns a key into a regular
expression matched against the whole file name. `*` and `?` match any
characters, `[...]` and `[!...]` match sets and ranges, and `**` matches
across directories when it is a whole path component. A malformed
pattern raises `GlobPatternError`; while parsing definitions such keys
are logged as a warning and skipped. When several patterns match a name,
the one defined last wins.

## What this package does not do

It does not list directories, look at files on disk, or write escape
sequences to a terminal: a `Style` describes colours and attributes but
has no method that renders it. It also ships no built-in colouring by
file type; to keep such a fallback, pass your own colouriser as
`default_colours` to `Options.to_theme`.