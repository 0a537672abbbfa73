"""
Tests for the Tk bot timer (no window is opened).
"""

import pytest

pytest.importorskip("tkinter")

from ui import TkScheduler


class StubRoot:
    """Stands in for tk.Tk: records after / after_cancel calls."""

    def __init__(self):
        self.scheduled = []
        self.cancelled = []

    def after(self, delay_ms, callback):
        self.scheduled.append((delay_ms, callback))
        return f"after#{len(self.scheduled)}"

    def after_cancel(self, handle):
        self.cancelled.append(handle)


def test_schedule_passes_delay_and_returns_handle():
    root = StubRoot()
    scheduler = TkScheduler(root)
    callback = lambda: None

    handle = scheduler.schedule(500, callback)

    assert handle == "after#1"
    assert root.scheduled == [(500, callback)]


def test_cancel_forwards_handle():
    root = StubRoot()
    scheduler = TkScheduler(root)
    handle = scheduler.schedule(500, lambda: None)

    scheduler.cancel(handle)

    assert root.cancelled == ["after#1"]


def test_cancel_none_is_ignored():
    root = StubRoot()
    TkScheduler(root).cancel(None)
    assert root.cancelled == []


def test_controller_cancels_through_tk_scheduler():
    from logic.config import GameConfig
    from logic.game_controller import GameController

    root = StubRoot()
    config = GameConfig()
    config.VS_BOT_DEFAULT = True
    controller = GameController(config, scheduler=TkScheduler(root))

    controller.handle_click(0)
    assert controller.bot_pending
    controller.reset_game()

    assert root.cancelled == ["after#1"]
    assert not controller.bot_pending
