import asyncio
import threading

from textual.widgets import Static

from ipvisualizer.app import IPVisualizerApp
from ipvisualizer.lookup import LocationLookupError, LocationRecord


def test_app_shows_location_after_lookup(london_record: LocationRecord) -> None:
    async def _run():
        app = IPVisualizerApp(fetch=lambda: london_record)
        async with app.run_test(size=(160, 40)) as pilot:
            await app.workers.wait_for_complete()
            await pilot.pause()
            state = app.controller.state
            await pilot.press("q")
        return app, state

    app, state = asyncio.run(_run())

    assert state.loading is False
    assert state.record is london_record
    assert app.controller.state.quit_requested is True


def test_app_shows_error_after_failed_lookup() -> None:
    def failing_fetch() -> LocationRecord:
        raise LocationLookupError("read timed out")

    async def _run():
        app = IPVisualizerApp(fetch=failing_fetch)
        async with app.run_test() as pilot:
            await app.workers.wait_for_complete()
            await pilot.pause()
            state = app.controller.state
            frame = str(app.query_one("#frame", Static).render())
            await pilot.press("q")
        return state, frame

    state, frame = asyncio.run(_run())

    assert state.loading is False
    assert state.record is None
    assert str(state.error) == "read timed out"
    assert "Error: read timed out" in frame
    assert "Press q to quit." in frame


def test_app_spins_and_quits_while_loading(london_record: LocationRecord) -> None:
    release = threading.Event()

    def slow_fetch() -> LocationRecord:
        release.wait(timeout=5)
        return london_record

    async def _run():
        app = IPVisualizerApp(fetch=slow_fetch)
        try:
            async with app.run_test() as pilot:
                await pilot.pause(0.35)
                frames = app.controller.state.spinner_frame
                loading_frame = str(app.query_one("#frame", Static).render())
                await pilot.press("q")
                state = app.controller.state
                snapshot = (state.quit_requested, state.loading, state.record, state.error)
        finally:
            release.set()
        return frames, loading_frame, snapshot

    frames, loading_frame, (quit_requested, loading, record, error) = asyncio.run(_run())

    assert frames >= 1
    assert "Scanning network for IP details..." in loading_frame
    assert quit_requested is True
    assert loading is True
    assert record is None and error is None
