"""Keyboard, mouse and cursor access for a window."""

from __future__ import annotations

import os
from typing import Any

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from .eventing import Event  # noqa: E402
from .inputs import (  # noqa: E402
    CursorMode,
    CursorShape,
    Key,
    KeyState,
    MouseButton,
    MouseButtonState,
)
from .services import Service  # noqa: E402


def _pygame_const(*names: str) -> int | None:
    for name in names:
        value = getattr(pygame, name, None)
        if value is not None:
            return value
    return None


def _build_key_table() -> dict[Key, int]:
    names: dict[Key, tuple[str, ...]] = {
        Key.SPACE: ("K_SPACE",),
        Key.APOSTROPHE: ("K_QUOTE",),
        Key.COMMA: ("K_COMMA",),
        Key.MINUS: ("K_MINUS",),
        Key.PERIOD: ("K_PERIOD",),
        Key.SLASH: ("K_SLASH",),
        Key.SEMICOLON: ("K_SEMICOLON",),
        Key.EQUAL: ("K_EQUALS",),
        Key.LEFT_BRACKET: ("K_LEFTBRACKET",),
        Key.BACKSLASH: ("K_BACKSLASH",),
        Key.RIGHT_BRACKET: ("K_RIGHTBRACKET",),
        Key.GRAVE_ACCENT: ("K_BACKQUOTE",),
        Key.ESCAPE: ("K_ESCAPE",),
        Key.ENTER: ("K_RETURN",),
        Key.TAB: ("K_TAB",),
        Key.BACKSPACE: ("K_BACKSPACE",),
        Key.INSERT: ("K_INSERT",),
        Key.DELETE: ("K_DELETE",),
        Key.RIGHT: ("K_RIGHT",),
        Key.LEFT: ("K_LEFT",),
        Key.DOWN: ("K_DOWN",),
        Key.UP: ("K_UP",),
        Key.PAGE_UP: ("K_PAGEUP",),
        Key.PAGE_DOWN: ("K_PAGEDOWN",),
        Key.HOME: ("K_HOME",),
        Key.END: ("K_END",),
        Key.CAPS_LOCK: ("K_CAPSLOCK",),
        Key.SCROLL_LOCK: ("K_SCROLLLOCK", "K_SCROLLOCK"),
        Key.NUM_LOCK: ("K_NUMLOCKCLEAR", "K_NUMLOCK"),
        Key.PRINT_SCREEN: ("K_PRINTSCREEN", "K_PRINT"),
        Key.PAUSE: ("K_PAUSE",),
        Key.KP_DECIMAL: ("K_KP_PERIOD",),
        Key.KP_DIVIDE: ("K_KP_DIVIDE",),
        Key.KP_MULTIPLY: ("K_KP_MULTIPLY",),
        Key.KP_SUBTRACT: ("K_KP_MINUS",),
        Key.KP_ADD: ("K_KP_PLUS",),
        Key.KP_ENTER: ("K_KP_ENTER",),
        Key.KP_EQUAL: ("K_KP_EQUALS",),
        Key.LEFT_SHIFT: ("K_LSHIFT",),
        Key.LEFT_CONTROL: ("K_LCTRL",),
        Key.LEFT_ALT: ("K_LALT",),
        Key.LEFT_SUPER: ("K_LGUI", "K_LSUPER"),
        Key.RIGHT_SHIFT: ("K_RSHIFT",),
        Key.RIGHT_CONTROL: ("K_RCTRL",),
        Key.RIGHT_ALT: ("K_RALT",),
        Key.RIGHT_SUPER: ("K_RGUI", "K_RSUPER"),
        Key.MENU: ("K_MENU",),
    }
    for digit in range(10):
        names[Key[f"KEY_{digit}"]] = (f"K_{digit}",)
        names[Key[f"KP_{digit}"]] = (f"K_KP{digit}", f"K_KP_{digit}")
    for letter in "ABCDEFGHIJKLMNOPQRSTUVWXYZ":
        names[Key[letter]] = (f"K_{letter.lower()}",)
    for number in range(1, 26):
        names[Key[f"F{number}"]] = (f"K_F{number}",)

    table: dict[Key, int] = {}
    for key, candidates in names.items():
        code = _pygame_const(*candidates)
        if code is not None:
            table[key] = code
    return table


_KEY_TO_PYGAME = _build_key_table()
_PYGAME_TO_KEY = {code: key for key, code in _KEY_TO_PYGAME.items()}

# Index into pygame.mouse.get_pressed(num_buttons=5).
_BUTTON_INDEX = {
    MouseButton.B1: 0,
    MouseButton.B2: 2,
    MouseButton.B3: 1,
    MouseButton.B4: 3,
    MouseButton.B5: 4,
}

# Button numbers carried by pygame mouse button events.
_PYGAME_BUTTONS = {
    1: MouseButton.LEFT,
    2: MouseButton.MIDDLE,
    3: MouseButton.RIGHT,
    6: MouseButton.B4,
    7: MouseButton.B5,
}

_SYSTEM_CURSORS = {
    CursorShape.ARROW: pygame.SYSTEM_CURSOR_ARROW,
    CursorShape.IBEAM: pygame.SYSTEM_CURSOR_IBEAM,
    CursorShape.CROSSHAIR: pygame.SYSTEM_CURSOR_CROSSHAIR,
    CursorShape.HAND: pygame.SYSTEM_CURSOR_HAND,
    CursorShape.H_RESIZE: pygame.SYSTEM_CURSOR_SIZEWE,
    CursorShape.V_RESIZE: pygame.SYSTEM_CURSOR_SIZENS,
}


def _key_to_pygame(key: Key) -> int | None:
    return _KEY_TO_PYGAME.get(Key(key))


def _key_from_pygame(code: int) -> Key:
    return _PYGAME_TO_KEY.get(code, Key.UNKNOWN)


def _mouse_button_from_pygame(button: int) -> MouseButton | None:
    return _PYGAME_BUTTONS.get(button)


class InputManager(Service):
    """Reports key and mouse state and controls the cursor of a window."""

    def __init__(self, window: Any = None) -> None:
        self.window = window
        self.key_pressed_event = Event()
        self.key_released_event = Event()
        self.mouse_button_pressed_event = Event()
        self.mouse_button_released_event = Event()
        self.cursor_move_event = Event()
        self._cursors = {
            shape: pygame.cursors.Cursor(constant)
            for shape, constant in _SYSTEM_CURSORS.items()
        }
        self._closed = False

    def __enter__(self) -> InputManager:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def get_key_state(self, key: Key) -> KeyState:
        """Return whether ``key`` is currently held down."""
        code = _key_to_pygame(key)
        if code is not None and pygame.key.get_pressed()[code]:
            return KeyState.PRESSED
        return KeyState.RELEASED

    def get_mouse_button_state(self, button: MouseButton) -> MouseButtonState:
        """Return whether ``button`` is currently held down."""
        index = _BUTTON_INDEX.get(MouseButton(button))
        if index is not None and pygame.mouse.get_pressed(num_buttons=5)[index]:
            return MouseButtonState.PRESSED
        return MouseButtonState.RELEASED

    def is_key_pressed(self, key: Key) -> bool:
        return self.get_key_state(key) is KeyState.PRESSED

    def is_key_released(self, key: Key) -> bool:
        return self.get_key_state(key) is KeyState.RELEASED

    def is_mouse_button_pressed(self, button: MouseButton) -> bool:
        return self.get_mouse_button_state(button) is MouseButtonState.PRESSED

    def is_mouse_button_released(self, button: MouseButton) -> bool:
        return self.get_mouse_button_state(button) is MouseButtonState.RELEASED

    @property
    def cursor_position(self) -> tuple[float, float]:
        """The cursor position relative to the window."""
        x, y = pygame.mouse.get_pos()
        return float(x), float(y)

    def set_cursor_position(self, position: tuple[float, float]) -> None:
        """Move the cursor to ``position`` within the window."""
        x, y = position
        pygame.mouse.set_pos((x, y))

    def set_cursor_mode(self, mode: CursorMode) -> None:
        """Show, hide or capture the cursor."""
        mode = CursorMode(mode)
        if mode is CursorMode.DISABLED:
            pygame.mouse.set_visible(False)
            pygame.event.set_grab(True)
        else:
            pygame.event.set_grab(False)
            pygame.mouse.set_visible(mode is CursorMode.NORMAL)

    def set_cursor_shape(self, shape: CursorShape) -> None:
        """Switch the cursor to one of the standard shapes."""
        shape = CursorShape(shape)
        if self._closed:
            raise RuntimeError("Input manager closed")
        pygame.mouse.set_cursor(self._cursors[shape])

    def clear_events(self) -> None:
        """Remove every listener from the input events."""
        for event in (
            self.key_pressed_event,
            self.key_released_event,
            self.mouse_button_pressed_event,
            self.mouse_button_released_event,
            self.cursor_move_event,
        ):
            event.remove_all_listeners()

    def close(self) -> None:
        """Drop all listeners and cursors."""
        self.clear_events()
        self._cursors.clear()
        self._closed = True