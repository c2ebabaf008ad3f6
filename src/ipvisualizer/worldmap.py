"""
Dotted ASCII world map.

The template is hand-drawn; each character is only used to decide whether a
cell is land (non-blank) or water (blank). The art is kept whole, so some rows
run past MAP_WIDTH. Positions are placed on the first MAP_WIDTH columns with a
plain equirectangular projection, no distortion correction.
"""

import math
from enum import Enum
from typing import List, Tuple

from rich import box
from rich.panel import Panel
from rich.text import Text

from .styles import LAND_STYLE, MAP_BORDER_STYLE, MARKER_STYLE, WATER_STYLE


MAP_WIDTH = 64
MAP_HEIGHT = 17
DOT = "•"

WORLD_MAP = (
    "           . _..::__:  ,-'-'.+       |]       ,     _,.__             ",
    "   _.___ _ _<_>`!(._`.`-.    /        _._     `_ ,_/  '  '-._.---.-.__",
    " .{     ' ' `-==,',._\\{  \\  / {) _   / _ '>_,-' `                _-/_ ",
    " \\_.:--.       `._ )`^-. ''      , [_/(                       __,/-'  ",
    "''     \\         '    _L       oD_,--'                )     /. (|    ",
    "         |           ,'         _)_.\\\\._<> 6              _,' /  '    ",
    "         `.         /          [_/_'` `'(                <'}  )       ",
    "          \\\\    .-. )          /   `-''..' `:._          _)  '        ",
    "   `        \\  (  `(          /         `:\\  > \\  ,-^.  /' '          ",
    "             `._,   ''        |           \\`'   \\|   ?_)  {\\          ",
    "                `=.---.       `._._       ,'     '`  |' ,- '.         ",
    "                  |    `-._        |     /          `:`<_|h--._       ",
    "                  (        >       .     | ,          `=.__.`-'\\      ",
    "                   `.     /        |     |{|              ,-.,\\     . ",
    "                    |   ,'          \\   / `'            ,'     \\     ",
    "                    |  /             |_'                |  __  /      ",
    "                    | |                                 |  L.\\'       ",
)


class Cell(Enum):
    WATER = "water"
    LAND = "land"
    MARKER = "marker"


CELL_STYLES = {
    Cell.WATER: WATER_STYLE,
    Cell.LAND: LAND_STYLE,
    Cell.MARKER: MARKER_STYLE,
}


def _clamp(value: int, low: int, high: int) -> int:
    return max(low, min(high, value))


def project(lat: float, lon: float, width: int = MAP_WIDTH, height: int = MAP_HEIGHT) -> Tuple[int, int]:
    """Map latitude/longitude to a (column, row) grid cell, clamped to the grid."""
    x = math.floor((lon + 180) / 360 * width)
    y = math.floor((90 - lat) / 180 * height)
    return _clamp(x, 0, width - 1), _clamp(y, 0, height - 1)


def build_grid(lat: float, lon: float) -> List[List[Cell]]:
    """
    Classify every template cell and mark the one nearest (lat, lon).
    Rows shorter than MAP_WIDTH are padded with water; longer rows keep
    their extra columns.
    A new grid is built on every call.
    """
    grid = []
    for line in WORLD_MAP:
        row = [Cell.WATER if char == " " else Cell.LAND for char in line]
        row.extend([Cell.WATER] * (MAP_WIDTH - len(row)))
        grid.append(row)

    x, y = project(lat, lon)
    grid[y][x] = Cell.MARKER
    return grid


def render_map(lat: float, lon: float) -> Panel:
    """Render the map with (lat, lon) highlighted, inside a rounded border."""
    text = Text(no_wrap=True)
    for i, row in enumerate(build_grid(lat, lon)):
        if i:
            text.append("\n")
        for cell in row:
            text.append(DOT, style=CELL_STYLES[cell])

    return Panel(
        text,
        box=box.ROUNDED,
        border_style=MAP_BORDER_STYLE,
        padding=(1, 2),
        expand=False,
    )
