"""Heads-up display components: the hotbar and the crosshair."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Iterable, Optional

from cubeworld.blocks import BlockId

UI_COMPONENTS_MAX = 256
HOTBAR_SLOTS = 10
SLOT_PIXELS = 40.0
ICON_OFFSET_PIXELS = 6.0
ICON_SIZE_PIXELS = 28.0
HOTBAR_BOTTOM_PIXELS = 16.0
CROSSHAIR_SIZE = 16
CROSSHAIR_ALPHA = 0.4

Callback = Optional[Callable[[], None]]


@dataclass
class UIComponent:
    """A UI element with optional lifecycle callbacks."""

    component: Any = None
    destroy: Callback = None
    render: Callback = None
    update: Callback = None
    tick: Callback = None
    enabled: bool = True


_DEFAULT_HOTBAR = (
    BlockId.GRASS,
    BlockId.DIRT,
    BlockId.STONE,
    BlockId.COBBLESTONE,
    BlockId.PLANKS,
    BlockId.LOG,
    BlockId.GLASS,
    BlockId.ROSE,
    BlockId.TORCH,
    BlockId.SAND,
)


@dataclass
class Hotbar:
    """A row of selectable blocks chosen with the digit keys."""

    values: list[BlockId] = field(default_factory=lambda: list(_DEFAULT_HOTBAR))
    index: int = 0

    def update(self, pressed_digits: Iterable[int]) -> None:
        """Select a slot from digit keys pressed this frame; 0 is the last slot."""
        pressed = set(pressed_digits)
        for digit in range(10):
            if digit in pressed:
                self.index = HOTBAR_SLOTS - 1 if digit == 0 else digit - 1

    def selected(self) -> BlockId:
        """The block in the selected slot."""
        return self.values[self.index]

    def slot_offsets(self, window_width: float) -> list[tuple[float, float]]:
        """Bottom-left pixel corner of each slot, centred horizontally."""
        base_x = (window_width - HOTBAR_SLOTS * SLOT_PIXELS) / 2.0
        return [
            (i * SLOT_PIXELS + base_x, HOTBAR_BOTTOM_PIXELS) for i in range(HOTBAR_SLOTS)
        ]


@dataclass
class Crosshair:
    """The centred aiming reticle."""

    enabled: bool = True

    def position(self, window_size: tuple[int, int]) -> tuple[int, int]:
        """Bottom-left pixel corner that centres the crosshair in the window."""
        width, height = window_size
        half = CROSSHAIR_SIZE // 2
        return (int(width) // 2 - half, int(height) // 2 - half)


class UI:
    """The set of UI components and dispatch of their callbacks."""

    def __init__(self, pressed_digits: Optional[Callable[[], Iterable[int]]] = None) -> None:
        self.components: list[UIComponent] = []
        self.hotbar = Hotbar()
        self.crosshair = Crosshair()
        digits = pressed_digits if pressed_digits is not None else (lambda: ())
        self.add(
            UIComponent(
                component=self.hotbar,
                update=lambda: self.hotbar.update(digits()),
            )
        )
        self.add(UIComponent(component=self.crosshair))

    def add(self, component: UIComponent) -> None:
        """Register ``component``; OverflowError once the limit is reached."""
        if len(self.components) >= UI_COMPONENTS_MAX:
            raise OverflowError("too many UI components")
        component.enabled = True
        self.components.append(component)

    def _dispatch(self, name: str) -> None:
        for component in self.components:
            callback = getattr(component, name)
            if callback is not None and component.enabled:
                callback()

    def destroy(self) -> None:
        """Run every enabled component's destroy callback."""
        self._dispatch("destroy")

    def render(self) -> None:
        """Run every enabled component's render callback."""
        self._dispatch("render")

    def update(self) -> None:
        """Run every enabled component's update callback."""
        self._dispatch("update")

    def tick(self) -> None:
        """Run every enabled component's tick callback."""
        self._dispatch("tick")