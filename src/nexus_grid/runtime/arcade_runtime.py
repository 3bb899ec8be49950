"""Manual arcade event loop support: window, input queues, frame pacing, text cache."""

from __future__ import annotations

import time
from collections import OrderedDict, deque
from dataclasses import dataclass

import arcade


@dataclass(frozen=True)
class MouseClick:
    x: float
    y: float
    button: int


class _QueuedInputWindow(arcade.Window):
    def __init__(self, width: int, height: int, title: str, vsync: bool):
        super().__init__(width, height, title, vsync=vsync)
        self.mouse_presses: deque[MouseClick] = deque()
        self.mouse_releases: deque[MouseClick] = deque()
        self.key_presses: deque[int] = deque()
        self.close_requested = False

    def on_mouse_press(self, x, y, button, modifiers):
        self.mouse_presses.append(MouseClick(x, y, button))

    def on_mouse_release(self, x, y, button, modifiers):
        self.mouse_releases.append(MouseClick(x, y, button))

    def on_key_press(self, symbol, modifiers):
        self.key_presses.append(symbol)

    def on_close(self):
        self.close_requested = True


class ArcadeWindowController:
    """Owns the arcade window and hands queued input to a polling game loop."""

    def __init__(self, width: int, height: int, title: str, enabled: bool = True, vsync: bool = False):
        self.width = int(width)
        self.height = int(height)
        self.window = _QueuedInputWindow(self.width, self.height, title, vsync) if enabled else None

    def poll_events(self) -> bool:
        """Dispatch pending window events; True once the window should close."""

        if self.window is None:
            return True
        self.window.dispatch_events()
        return self.window.close_requested

    def consume_mouse_presses(self) -> list[MouseClick]:
        return self._drain(self.window.mouse_presses if self.window else None)

    def consume_mouse_releases(self) -> list[MouseClick]:
        return self._drain(self.window.mouse_releases if self.window else None)

    def consume_key_presses(self) -> list[int]:
        return self._drain(self.window.key_presses if self.window else None)

    @staticmethod
    def _drain(queue):
        if not queue:
            return []
        items = list(queue)
        queue.clear()
        return items

    def to_top_left_y(self, y: float) -> float:
        return self.height - y

    def flip(self) -> None:
        if self.window is not None:
            self.window.flip()

    def close(self) -> None:
        if self.window is not None:
            self.window.close()
            self.window = None


class ArcadeFrameClock:
    """Sleeps to hold a target frame rate and reports elapsed seconds."""

    def __init__(self):
        self._last = time.perf_counter()

    def tick(self, fps: int) -> float:
        frame_seconds = 1.0 / fps if fps > 0 else 0.0
        now = time.perf_counter()
        elapsed = now - self._last
        if elapsed < frame_seconds:
            time.sleep(frame_seconds - elapsed)
            now = time.perf_counter()
            elapsed = now - self._last
        self._last = now
        return elapsed


class TextCache:
    """Reuses ``arcade.Text`` objects keyed by content and style."""

    def __init__(self, max_entries: int = 1024):
        self.max_entries = int(max_entries)
        self._entries: OrderedDict[tuple, arcade.Text] = OrderedDict()

    def get(
        self,
        text: str,
        x: float,
        y: float,
        color,
        font_size: int,
        font_name: str,
        anchor_x: str = "center",
        anchor_y: str = "center",
        width: int | None = None,
    ) -> arcade.Text:
        key = (text, tuple(color), int(font_size), font_name, anchor_x, anchor_y, width)
        entry = self._entries.get(key)
        if entry is None:
            entry = arcade.Text(
                text,
                x,
                y,
                color,
                font_size,
                width=width,
                align="center",
                font_name=font_name,
                anchor_x=anchor_x,
                anchor_y=anchor_y,
                multiline=width is not None,
            )
            self._entries[key] = entry
            if len(self._entries) > self.max_entries:
                self._entries.popitem(last=False)
        else:
            self._entries.move_to_end(key)
            entry.x = x
            entry.y = y
        return entry
