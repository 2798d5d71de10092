from unittest import mock

import pygame
import pytest

from sparkengine.input_manager import (
    InputManager,
    _key_from_pygame,
    _key_to_pygame,
    _mouse_button_from_pygame,
)
from sparkengine.inputs import (
    CursorMode,
    CursorShape,
    Key,
    KeyState,
    MouseButton,
    MouseButtonState,
)


class _Pressed:
    def __init__(self, codes):
        self._codes = set(codes)

    def __getitem__(self, code):
        return code in self._codes


def test_key_released_when_nothing_held():
    manager = InputManager()
    with mock.patch("pygame.key.get_pressed", return_value=_Pressed([])):
        assert manager.get_key_state(Key.A) is KeyState.RELEASED
        assert manager.is_key_released(Key.A)
        assert not manager.is_key_pressed(Key.A)


def test_key_pressed_when_held():
    manager = InputManager()
    with mock.patch("pygame.key.get_pressed", return_value=_Pressed([pygame.K_a])):
        assert manager.get_key_state(Key.A) is KeyState.PRESSED
        assert manager.is_key_pressed(Key.A)
        assert manager.is_key_released(Key.B)


def test_unknown_key_is_always_released():
    manager = InputManager()
    with mock.patch("pygame.key.get_pressed", return_value=_Pressed([])):
        assert manager.get_key_state(Key.UNKNOWN) is KeyState.RELEASED


def test_mouse_buttons_follow_pygame_order():
    manager = InputManager()
    with mock.patch(
        "pygame.mouse.get_pressed", return_value=(False, True, False, False, False)
    ):
        assert manager.is_mouse_button_pressed(MouseButton.MIDDLE)
        assert manager.is_mouse_button_released(MouseButton.RIGHT)
        assert manager.get_mouse_button_state(MouseButton.LEFT) is MouseButtonState.RELEASED


def test_extra_mouse_buttons_are_released():
    manager = InputManager()
    with mock.patch("pygame.mouse.get_pressed", return_value=(True,) * 5):
        assert manager.is_mouse_button_released(MouseButton.B6)
        assert manager.is_mouse_button_pressed(MouseButton.B5)


def test_cursor_position_reads_pygame():
    manager = InputManager()
    with mock.patch("pygame.mouse.get_pos", return_value=(10, 20)):
        assert manager.cursor_position == (10.0, 20.0)


def test_set_cursor_position_moves_mouse():
    manager = InputManager()
    state = {}
    with mock.patch(
        "pygame.mouse.set_pos", side_effect=lambda pos: state.update(pos=pos)
    ), mock.patch("pygame.mouse.get_pos", side_effect=lambda: state["pos"]):
        manager.set_cursor_position((3.5, 4.5))
        assert manager.cursor_position == (3.5, 4.5)


def test_disabled_cursor_hides_and_grabs():
    manager = InputManager()
    visibility = []
    grabs = []
    with mock.patch(
        "pygame.mouse.set_visible", side_effect=visibility.append
    ), mock.patch("pygame.event.set_grab", side_effect=grabs.append):
        result = manager.set_cursor_mode(CursorMode.DISABLED)
    assert result is None
    assert visibility == [False]
    assert grabs == [True]


def test_normal_cursor_shows_and_releases():
    manager = InputManager()
    visibility = []
    grabs = []
    with mock.patch(
        "pygame.mouse.set_visible", side_effect=visibility.append
    ), mock.patch("pygame.event.set_grab", side_effect=grabs.append):
        result = manager.set_cursor_mode(CursorMode.NORMAL)
    assert result is None
    assert visibility == [True]
    assert grabs == [False]


def test_invalid_cursor_mode_rejected():
    manager = InputManager()
    with pytest.raises(ValueError):
        manager.set_cursor_mode(0)


def test_set_cursor_shape_uses_system_cursor():
    manager = InputManager()
    applied = []
    with mock.patch("pygame.mouse.set_cursor", side_effect=applied.append):
        result = manager.set_cursor_shape(CursorShape.HAND)
    assert result is None
    assert applied == [pygame.cursors.Cursor(pygame.SYSTEM_CURSOR_HAND)]


def test_invalid_cursor_shape_rejected():
    manager = InputManager()
    with pytest.raises(ValueError):
        manager.set_cursor_shape(0)


def test_cursor_shape_after_close_fails():
    manager = InputManager()
    manager.close()
    with pytest.raises(RuntimeError):
        manager.set_cursor_shape(CursorShape.ARROW)


def test_events_reach_listeners():
    manager = InputManager()
    received = []
    manager.key_pressed_event.add_listener(received.append)
    manager.key_pressed_event.invoke(Key.SPACE)
    assert received == [Key.SPACE]


def test_clear_events_removes_listeners():
    manager = InputManager()
    manager.key_pressed_event.add_listener(lambda key: None)
    manager.cursor_move_event.add_listener(lambda pos: None)
    manager.clear_events()
    assert len(manager.key_pressed_event) == 0
    assert len(manager.cursor_move_event) == 0


def test_context_manager_closes():
    with InputManager() as manager:
        manager.mouse_button_pressed_event.add_listener(lambda button: None)
    assert len(manager.mouse_button_pressed_event) == 0
    with pytest.raises(RuntimeError):
        manager.set_cursor_shape(CursorShape.IBEAM)


def test_window_is_kept():
    window = object()
    assert InputManager(window).window is window


def test_key_mapping_round_trips():
    mapped = [key for key in Key if _key_to_pygame(key) is not None]
    assert Key.A in mapped and Key.ESCAPE in mapped
    for key in mapped:
        assert _key_from_pygame(_key_to_pygame(key)) is key


def test_unmapped_pygame_code_is_unknown():
    assert _key_from_pygame(-12345) is Key.UNKNOWN


def test_pygame_mouse_buttons():
    assert _mouse_button_from_pygame(1) is MouseButton.LEFT
    assert _mouse_button_from_pygame(3) is MouseButton.RIGHT
    assert _mouse_button_from_pygame(4) is None