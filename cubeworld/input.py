"""Button edge detection and the fixed-rate tick clock of the main loop."""

from __future__ import annotations

from dataclasses import dataclass

NS_PER_SECOND = 1_000_000_000
TICKRATE = 60
NS_PER_TICK = NS_PER_SECOND // TICKRATE


@dataclass
class Button:
    """State of one key or mouse button, with per-frame and per-tick edges."""

    down: bool = False
    last: bool = False
    last_tick: bool = False
    pressed: bool = False
    pressed_tick: bool = False

    def tick(self) -> None:
        """Refresh ``pressed_tick``: true on the first tick the button is down."""
        self.pressed_tick = self.down and not self.last_tick
        self.last_tick = self.down

    def update(self) -> None:
        """Refresh ``pressed``: true on the first frame the button is down."""
        self.pressed = self.down and not self.last
        self.last = self.down


@dataclass
class TickClock:
    """Frame timing: counts ticks to run per frame and FPS/TPS per second."""

    last_frame: int = 0
    last_second: int = 0
    frame_delta: int = 0
    tick_remainder: int = 0
    frames: int = 0
    ticks: int = 0
    fps: int = 0
    tps: int = 0

    def advance(self, now: int) -> int:
        """Start a frame at ``now`` (nanoseconds); return the ticks to run."""
        self.frame_delta = now - self.last_frame
        self.last_frame = now

        if now - self.last_second > NS_PER_SECOND:
            self.fps = self.frames
            self.tps = self.ticks
            self.frames = 0
            self.ticks = 0
            self.last_second = now

        tick_time = self.frame_delta + self.tick_remainder
        count = 0
        while tick_time > NS_PER_TICK:
            count += 1
            tick_time -= NS_PER_TICK
        self.tick_remainder = max(tick_time, 0)

        self.ticks += count
        self.frames += 1
        return count