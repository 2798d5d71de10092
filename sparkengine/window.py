"""A desktop window that turns system events into engine events."""

from __future__ import annotations

import os
from dataclasses import replace
from typing import Any, Callable

import pygame

from .eventing import Event
from .input_manager import InputManager, _key_from_pygame, _mouse_button_from_pygame
from .services import Service
from .settings import DONT_CARE, WindowSettings

Vec2 = tuple[int, int]


class WindowError(RuntimeError):
    """Raised when the window system fails or a destroyed part is used."""


def _pair(value: Any) -> Vec2:
    x, y = value
    return int(x), int(y)


class Window(Service):
    """A single application window with resize, move, focus and input events."""

    def __init__(self, settings: WindowSettings | None = None, fullscreen: bool = False) -> None:
        self._settings = replace(settings) if settings is not None else WindowSettings()
        self._fullscreen = bool(fullscreen)
        self._vsync = False
        self._should_close = False
        self._visible = self._settings.visible
        self._focused = self._settings.focused
        self._maximized = self._settings.maximized
        self._minimized = False
        self._closed = False
        self._input_manager: InputManager | None = None

        self.resize_event = Event()
        self.move_event = Event()
        self.framebuffer_resize_event = Event()
        self.minimize_event = Event()
        self.maximize_event = Event()
        self.restore_event = Event()
        self.lost_focus_event = Event()
        self.gain_focus_event = Event()
        self.close_event = Event()

        try:
            pygame.display.init()
        except pygame.error as exc:
            raise WindowError("Failed to initialise the window system") from exc
        if not pygame.display.get_init():
            raise WindowError("Failed to initialise the window system")

        if self._settings.position != (DONT_CARE, DONT_CARE):
            x, y = self._settings.position
            os.environ["SDL_VIDEO_WINDOW_POS"] = f"{x},{y}"

        self._apply_mode()
        pygame.display.set_caption(self._settings.title)

        if self._settings.fullscreen and not self._fullscreen:
            self.fullscreen = True

        self._input_manager = InputManager(self)
        self._handlers = self._build_handlers()

    def __enter__(self) -> Window:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    # -- internal helpers -------------------------------------------------

    def _clamp(self, size: Vec2) -> Vec2:
        result = []
        for value, low, high in zip(size, self._settings.minimum_size, self._settings.maximum_size):
            if low != DONT_CARE:
                value = max(value, low)
            if high != DONT_CARE:
                value = min(value, high)
            result.append(value)
        return result[0], result[1]

    def _apply_mode(self) -> None:
        flags = 0
        if self._settings.resizable:
            flags |= pygame.RESIZABLE
        if not self._settings.decorated:
            flags |= pygame.NOFRAME
        if not self._visible:
            flags |= getattr(pygame, "HIDDEN", 0)
        if self._fullscreen:
            flags |= pygame.FULLSCREEN
            size: Vec2 = (0, 0)
        else:
            size = self._clamp(self._settings.size)
            self._settings.size = size
        try:
            pygame.display.set_mode(size, flags)
        except pygame.error as exc:
            raise WindowError("Failed to create window") from exc

    def _all_events(self) -> tuple[Event, ...]:
        return (
            self.resize_event,
            self.move_event,
            self.framebuffer_resize_event,
            self.minimize_event,
            self.maximize_event,
            self.restore_event,
            self.lost_focus_event,
            self.gain_focus_event,
            self.close_event,
        )

    def _build_handlers(self) -> dict[int, Callable[[Any], None]]:
        candidates: dict[int | None, Callable[[Any], None]] = {
            pygame.QUIT: self._on_quit,
            pygame.KEYDOWN: self._on_key_down,
            pygame.KEYUP: self._on_key_up,
            pygame.MOUSEBUTTONDOWN: self._on_mouse_down,
            pygame.MOUSEBUTTONUP: self._on_mouse_up,
            pygame.MOUSEMOTION: self._on_mouse_motion,
            pygame.VIDEORESIZE: self._on_resize,
            getattr(pygame, "WINDOWMOVED", None): self._on_move,
            getattr(pygame, "WINDOWMINIMIZED", None): self._on_minimized,
            getattr(pygame, "WINDOWMAXIMIZED", None): self._on_maximized,
            getattr(pygame, "WINDOWRESTORED", None): self._on_restored,
            getattr(pygame, "WINDOWFOCUSGAINED", None): self._on_focus_gained,
            getattr(pygame, "WINDOWFOCUSLOST", None): self._on_focus_lost,
            getattr(pygame, "WINDOWSHOWN", None): self._on_shown,
            getattr(pygame, "WINDOWHIDDEN", None): self._on_hidden,
        }
        return {kind: handler for kind, handler in candidates.items() if kind is not None}

    def _on_quit(self, _event: Any) -> None:
        self._should_close = True
        self.close_event.invoke()

    def _on_key_down(self, event: Any) -> None:
        if self._input_manager is not None:
            self._input_manager.key_pressed_event.invoke(_key_from_pygame(event.key))

    def _on_key_up(self, event: Any) -> None:
        if self._input_manager is not None:
            self._input_manager.key_released_event.invoke(_key_from_pygame(event.key))

    def _on_mouse_down(self, event: Any) -> None:
        button = _mouse_button_from_pygame(event.button)
        if button is not None and self._input_manager is not None:
            self._input_manager.mouse_button_pressed_event.invoke(button)

    def _on_mouse_up(self, event: Any) -> None:
        button = _mouse_button_from_pygame(event.button)
        if button is not None and self._input_manager is not None:
            self._input_manager.mouse_button_released_event.invoke(button)

    def _on_mouse_motion(self, event: Any) -> None:
        if self._input_manager is not None:
            x, y = event.pos
            self._input_manager.cursor_move_event.invoke((float(x), float(y)))

    def _on_resize(self, event: Any) -> None:
        size = _pair(event.size)
        if not self._fullscreen:
            self._settings.size = size
        self.resize_event.invoke(size)
        self.framebuffer_resize_event.invoke(size)

    def _on_move(self, event: Any) -> None:
        position = (int(event.x), int(event.y))
        self._settings.position = position
        self.move_event.invoke(position)

    def _on_minimized(self, _event: Any) -> None:
        self._minimized = True
        self.minimize_event.invoke()

    def _on_maximized(self, _event: Any) -> None:
        self._maximized = True
        self._minimized = False

    def _on_restored(self, _event: Any) -> None:
        was_minimized = self._minimized
        self._minimized = False
        self._maximized = False
        if was_minimized:
            self.maximize_event.invoke()

    def _on_focus_gained(self, _event: Any) -> None:
        self._focused = True
        self.gain_focus_event.invoke()

    def _on_focus_lost(self, _event: Any) -> None:
        self._focused = False
        self.lost_focus_event.invoke()

    def _on_shown(self, _event: Any) -> None:
        self._visible = True

    def _on_hidden(self, _event: Any) -> None:
        self._visible = False

    # -- queries and settings --------------------------------------------

    @property
    def size(self) -> Vec2:
        """Current window size, or (-1, -1) when there is no window."""
        if self._closed or pygame.display.get_surface() is None:
            return (-1, -1)
        return _pair(pygame.display.get_window_size())

    @size.setter
    def size(self, value: Vec2) -> None:
        self._settings.size = self._clamp(_pair(value))
        if not self._fullscreen:
            self._apply_mode()

    @property
    def position(self) -> Vec2:
        """Last known window position."""
        return self._settings.position

    @position.setter
    def position(self, value: Vec2) -> None:
        position = _pair(value)
        self._settings.position = position
        os.environ["SDL_VIDEO_WINDOW_POS"] = f"{position[0]},{position[1]}"

    @property
    def framebuffer_size(self) -> Vec2:
        """Size of the drawable surface, or (-1, -1) when there is none."""
        if self._closed:
            return (-1, -1)
        surface = pygame.display.get_surface()
        if surface is None:
            return (-1, -1)
        return _pair(surface.get_size())

    @property
    def minimum_size(self) -> Vec2:
        return self._settings.minimum_size

    @minimum_size.setter
    def minimum_size(self, value: Vec2) -> None:
        self._settings.minimum_size = _pair(value)
        self._reapply_limits()

    @property
    def maximum_size(self) -> Vec2:
        return self._settings.maximum_size

    @maximum_size.setter
    def maximum_size(self, value: Vec2) -> None:
        self._settings.maximum_size = _pair(value)
        self._reapply_limits()

    def _reapply_limits(self) -> None:
        if not self._fullscreen and self._clamp(self._settings.size) != self._settings.size:
            self._apply_mode()

    @property
    def title(self) -> str:
        return self._settings.title

    @title.setter
    def title(self, value: str) -> None:
        self._settings.title = value
        pygame.display.set_caption(value)

    @property
    def vsync(self) -> bool:
        return self._vsync

    @vsync.setter
    def vsync(self, value: bool) -> None:
        self._vsync = bool(value)

    @property
    def fullscreen(self) -> bool:
        return self._fullscreen

    @fullscreen.setter
    def fullscreen(self, value: bool) -> None:
        self._fullscreen = bool(value)
        self._apply_mode()

    @property
    def should_close(self) -> bool:
        return self._should_close

    @should_close.setter
    def should_close(self, value: bool) -> None:
        self._should_close = bool(value)

    @property
    def hidden(self) -> bool:
        return not self._visible

    @property
    def visible(self) -> bool:
        return self._visible

    @property
    def maximized(self) -> bool:
        return self._maximized

    @property
    def minimized(self) -> bool:
        return self._minimized

    @property
    def focused(self) -> bool:
        return self._focused

    @property
    def resizable(self) -> bool:
        return self._settings.resizable

    @property
    def decorated(self) -> bool:
        return self._settings.decorated

    @property
    def input_manager(self) -> InputManager:
        """The window's input manager; raises WindowError once it is destroyed."""
        if self._input_manager is None:
            raise WindowError("Input Manager Destroyed")
        return self._input_manager

    # -- actions ----------------------------------------------------------

    def toggle_fullscreen(self) -> None:
        self.fullscreen = not self._fullscreen

    def minimize(self) -> None:
        pygame.display.iconify()
        self._minimized = True

    def maximize(self) -> None:
        self._maximized = True
        self._minimized = False

    def restore(self) -> None:
        self._maximized = False
        self._minimized = False

    def hide(self) -> None:
        if self._visible:
            self._visible = False
            self._apply_mode()

    def show(self) -> None:
        if not self._visible:
            self._visible = True
            self._apply_mode()

    def focus(self) -> None:
        self._focused = True

    def poll_events(self) -> None:
        """Dispatch every pending system event to the matching engine event."""
        if self._closed:
            return
        for event in pygame.event.get():
            handler = self._handlers.get(event.type)
            if handler is not None:
                handler(event)

    def close(self) -> None:
        """Drop all listeners, the input manager and the window itself."""
        if self._closed:
            return
        self._closed = True
        if self._input_manager is not None:
            self._input_manager.close()
            self._input_manager = None
        for event in self._all_events():
            event.remove_all_listeners()
        pygame.display.quit()