#!/usr/bin/env python3
"""
IP Visualizer - Terminal IP geolocation with an ASCII world map

FEATURES:
- Looks up your public IP location with ip-api.com
- Animated spinner while the lookup is in flight
- Info panel (IP, ISP, city, region, timezone, AS, coordinates)
- Dotted world map with your position highlighted

CONTROLS:
- q / Ctrl+C: Quit
"""

import logging
from typing import Callable, Optional

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.logging import TextualHandler
from textual.message import Message
from textual.widgets import Static

from .controller import AppController, Command, Event, KeyPressed, LookupFailed, LookupSucceeded, Tick
from .lookup import LocationLookupError, LocationRecord, fetch_location


log = logging.getLogger(__name__)

TICK_INTERVAL = 0.1


class ControllerEvent(Message):
    """Carries a controller event through the app's message queue."""

    def __init__(self, event: Event) -> None:
        self.event = event
        super().__init__()


# =============================================================================
# MAIN APPLICATION
# =============================================================================

class IPVisualizerApp(App):
    """
    Hosts the AppController.

    The lookup runs in a worker thread and the spinner on a one-shot timer;
    both post ControllerEvent messages, so every state change is handled
    in order on the app's message loop.
    """

    TITLE = "IP Visualizer"

    CSS = """
    Screen {
        background: #000000;
    }

    #frame {
        height: auto;
        padding: 0 1;
    }
    """

    BINDINGS = [
        Binding("q", "key_pressed('q')", "Quit"),
        Binding("ctrl+c", "key_pressed('ctrl+c')", "Quit", show=False, priority=True),
    ]

    def __init__(self, fetch: Callable[[], LocationRecord] = fetch_location):
        super().__init__()
        self.controller = AppController()
        self._fetch = fetch
        self.frame_widget: Optional[Static] = None

    def compose(self) -> ComposeResult:
        self.frame_widget = Static(id="frame")
        yield self.frame_widget

    def on_mount(self) -> None:
        for command in self.controller.init():
            self._execute(command)
        self._refresh_frame()

    def _dispatch(self, event: Event) -> None:
        command = self.controller.update(event)
        if command is not None:
            self._execute(command)
        self._refresh_frame()

    def _execute(self, command: Command) -> None:
        if command is Command.LOOKUP:
            self.run_worker(self._lookup, name="ip-lookup", thread=True, exclusive=True)
        elif command is Command.TICK:
            self.set_timer(TICK_INTERVAL, self._post_tick)
        elif command is Command.QUIT:
            self.exit()

    def _refresh_frame(self) -> None:
        if self.frame_widget is not None:
            self.frame_widget.update(self.controller.view())

    def _post_tick(self) -> None:
        self.post_message(ControllerEvent(Tick()))

    def _lookup(self) -> None:
        """Worker thread body. Hands the outcome back as a message."""
        try:
            record = self._fetch()
        except LocationLookupError as e:
            self.post_message(ControllerEvent(LookupFailed(e)))
        else:
            self.post_message(ControllerEvent(LookupSucceeded(record)))

    # === EVENTS ===

    def on_controller_event(self, message: ControllerEvent) -> None:
        self._dispatch(message.event)

    def action_key_pressed(self, key: str) -> None:
        self._dispatch(KeyPressed(key))


# =============================================================================
# ENTRY POINT
# =============================================================================

def run():
    """Run the IP Visualizer application."""
    logging.basicConfig(level=logging.INFO, handlers=[TextualHandler()])

    print("\n" + "=" * 50)
    print("  IP Visualizer - Where is my IP?")
    print("=" * 50)
    print("\nControls:")
    print("  q = Quit")
    print("\n" + "=" * 50 + "\n")

    app = IPVisualizerApp()
    try:
        app.run()
    except Exception as e:
        print(f"Alas, there's been an error: {e}")


if __name__ == "__main__":
    run()
