# Clikit CLI Toolkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Colour palettes and the rich theme used by clikit.

`OneColors` and `NordColors` expose hex colour strings usable directly in rich
markup (`f"[{OneColors.CYAN}]text[/]"`) or in prompt_toolkit style tuples.
`ColorsMeta` adds style-suffixed variants on attribute access:

- `NAME_b` -> "bold <hex>"
- `NAME_i` -> "italic <hex>"
- `NAME_u` -> "underline <hex>"

Example:
    console.print(f"[{OneColors.DARK_RED_b}]error[/]")
"""
from rich.theme import Theme

_SUFFIX_STYLES = {
    "b": "bold",
    "i": "italic",
    "u": "underline",
}


class ColorsMeta(type):
    """Metaclass resolving `<COLOR>_<suffix>` attributes into styled colours."""

    def __getattr__(cls, name: str) -> str:
        base, _, suffix = name.rpartition("_")
        if base and suffix in _SUFFIX_STYLES:
            color = getattr(cls, base)
            return f"{_SUFFIX_STYLES[suffix]} {color}"
        raise AttributeError(f"'{cls.__name__}' has no color named '{name}'")


class OneColors(metaclass=ColorsMeta):
    """One Dark palette."""

    BLACK = "#282C34"
    GUTTER_GREY = "#4B5263"
    COMMENT_GREY = "#5C6370"
    WHITE = "#ABB2BF"
    DARK_RED = "#BE5046"
    LIGHT_RED = "#E06C75"
    DARK_YELLOW = "#D19A66"
    LIGHT_YELLOW = "#E5C07B"
    GREEN = "#98C379"
    CYAN = "#56B6C2"
    BLUE = "#61AFEF"
    MAGENTA = "#C678DD"


class NordColors(metaclass=ColorsMeta):
    """Nord palette."""

    POLAR_NIGHT_ORIGIN = "#2E3440"
    POLAR_NIGHT_BRIGHTEST = "#4C566A"
    SNOW_STORM_BRIGHTEST = "#ECEFF4"
    FROST_TEAL = "#8FBCBB"
    FROST_ICE = "#88C0D0"
    FROST_SKY = "#81A1C1"
    FROST_DEEP = "#5E81AC"
    RED = "#BF616A"
    ORANGE = "#D08770"
    YELLOW = "#EBCB8B"
    GREEN = "#A3BE8C"
    PURPLE = "#B48EAD"


def get_nord_theme() -> Theme:
    """Return the rich `Theme` used by the shared clikit console."""
    return Theme(
        {
            "title": f"bold {NordColors.FROST_ICE}",
            "usage": f"bold {NordColors.SNOW_STORM_BRIGHTEST}",
            "command": f"bold {NordColors.FROST_TEAL}",
            "action": NordColors.FROST_SKY,
            "option": NordColors.YELLOW,
            "hint": f"italic {NordColors.POLAR_NIGHT_BRIGHTEST}",
            "error": f"bold {NordColors.RED}",
            "warning": NordColors.ORANGE,
            "success": NordColors.GREEN,
        }
    )
