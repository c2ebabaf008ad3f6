"""
Application state machine.

States: loading (initial), ready, error. All mutation happens in
AppController.update(), which the host calls once per event and which
returns the next Command for the host to carry out.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Union

from rich import box
from rich.console import Group, RenderableType
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from .lookup import LocationRecord
from .styles import HINT_STYLE, INFO_BORDER_STYLE, LABEL_STYLE, TITLE_STYLE
from .worldmap import render_map


SPINNER_FRAMES = ("⣾", "⣽", "⣻", "⢿", "⡿", "⣟", "⣯", "⣷")
QUIT_KEYS = frozenset({"q", "ctrl+c"})
QUIT_HINT = "Press q to quit."


# =============================================================================
# EVENTS & COMMANDS
# =============================================================================

@dataclass(frozen=True)
class Tick:
    pass


@dataclass(frozen=True)
class LookupSucceeded:
    record: LocationRecord


@dataclass(frozen=True)
class LookupFailed:
    error: Exception


@dataclass(frozen=True)
class KeyPressed:
    key: str


Event = Union[Tick, LookupSucceeded, LookupFailed, KeyPressed]


class Command(Enum):
    LOOKUP = "lookup"
    TICK = "tick"
    QUIT = "quit"


@dataclass
class AppState:
    loading: bool = True
    record: Optional[LocationRecord] = None
    error: Optional[Exception] = None
    spinner_frame: int = 0
    quit_requested: bool = False

    @property
    def spinner_glyph(self) -> str:
        return SPINNER_FRAMES[self.spinner_frame % len(SPINNER_FRAMES)]


# =============================================================================
# CONTROLLER
# =============================================================================

class AppController:
    """Holds AppState and turns events into state changes and commands."""

    def __init__(self) -> None:
        self.state = AppState()

    def init(self) -> List[Command]:
        """Commands to run at startup: the lookup and the first tick, together."""
        return [Command.LOOKUP, Command.TICK]

    def update(self, event: Event) -> Optional[Command]:
        state = self.state

        if isinstance(event, KeyPressed):
            if event.key in QUIT_KEYS:
                state.quit_requested = True
                return Command.QUIT
            return None

        if isinstance(event, LookupSucceeded):
            state.record = event.record
            state.loading = False
            return None

        if isinstance(event, LookupFailed):
            state.error = event.error
            state.loading = False
            return None

        if isinstance(event, Tick):
            # No re-arm once loading is over, so the timer dies out
            if state.loading:
                state.spinner_frame += 1
                return Command.TICK
            return None

        raise TypeError(f"unknown event: {event!r}")

    # === VIEWS ===

    def view(self) -> RenderableType:
        state = self.state

        if state.error is not None:
            return Text(f"\nError: {state.error}\n\n{QUIT_HINT}")

        if state.loading:
            return Text(f"\n {state.spinner_glyph} Scanning network for IP details...\n\n{QUIT_HINT}")

        if state.record is not None:
            layout = Table.grid()
            layout.add_column(vertical="top")
            layout.add_column(vertical="top")
            layout.add_row(
                info_panel(state.record),
                render_map(state.record.lat, state.record.lon),
            )
            return Group(layout, Text(f"\n{QUIT_HINT}", style=HINT_STYLE))

        return Text("")


def info_panel(record: LocationRecord) -> Panel:
    """Bordered key/value summary of a lookup result."""
    rows = [
        ("IP Address:", record.query),
        ("ISP:       ", record.isp),
        ("Location:  ", f"{record.city}, {record.country}"),
        ("Region:    ", record.region_name),
        ("Timezone:  ", record.timezone),
        ("AS:        ", record.as_),
        ("Coords:    ", f"{record.lat}, {record.lon}"),
    ]

    text = Text(no_wrap=True)
    text.append(" IP VISUALIZER ", style=TITLE_STYLE)
    text.append("\n")
    for label, value in rows:
        text.append("\n")
        text.append(label, style=LABEL_STYLE)
        text.append(f" {value}")

    return Panel(
        text,
        box=box.SQUARE,
        border_style=INFO_BORDER_STYLE,
        padding=(1, 2),
        expand=False,
    )
