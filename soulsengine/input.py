"""Keyboard and mouse state tracked from window events."""

from __future__ import annotations

from typing import Any


class Input:
    """Tracks pressed keys and the cursor position of one window.

    The window must offer ``push_handlers(**handlers)`` as pyglet windows do.
    Key codes are the window system's key symbols; the cursor position is in
    window coordinates.
    """

    def __init__(self, window: Any) -> None:
        self._pressed: set[int] = set()
        self._mouse = (0.0, 0.0)
        window.push_handlers(
            on_key_press=self._on_key_press,
            on_key_release=self._on_key_release,
            on_mouse_motion=self._on_mouse_motion,
            on_mouse_drag=self._on_mouse_drag,
        )

    def _on_key_press(self, symbol: int, modifiers: int) -> None:
        self._pressed.add(symbol)

    def _on_key_release(self, symbol: int, modifiers: int) -> None:
        self._pressed.discard(symbol)

    def _on_mouse_motion(self, x: float, y: float, dx: float, dy: float) -> None:
        self._mouse = (float(x), float(y))

    def _on_mouse_drag(
        self, x: float, y: float, dx: float, dy: float, buttons: int, modifiers: int
    ) -> None:
        self._mouse = (float(x), float(y))

    def is_key_pressed(self, key: int) -> bool:
        return key in self._pressed

    def mouse_position(self) -> tuple[float, float]:
        return self._mouse

    def key_pressed(self) -> int | None:
        """The lowest held key code, or None when no key is held."""
        return min(self._pressed, default=None)

    def pressed_keys(self) -> list[int]:
        """All held key codes in ascending order."""
        return sorted(self._pressed)