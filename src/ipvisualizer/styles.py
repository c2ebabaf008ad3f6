"""Shared rich styles. Built once at import and never mutated."""

from rich.style import Style


TITLE_STYLE = Style(color="#FFFDF5", bgcolor="#25A065", bold=True)
LABEL_STYLE = Style(color="#04B575", bold=True)
HINT_STYLE = Style(color="color(241)")

INFO_BORDER_STYLE = Style(color="color(63)")
MAP_BORDER_STYLE = Style(color="color(63)")

# Map dots
WATER_STYLE = Style(color="color(237)")
LAND_STYLE = Style(color="color(252)")
MARKER_STYLE = Style(color="#04B575", bold=True)
