"""Unit tests for keyboard press/release handling, without a live listener."""
from __future__ import annotations

import pytest

keyboard = pytest.importorskip("pynput.keyboard")

from snlib import keyboard_input  # noqa: E402
from snlib.bindings import KeyContext, KeyModifier  # noqa: E402
from snlib.keyboard_input import ESC_WINDOW, KeyboardInput, key_name  # noqa: E402


class RecordingRegistry:
    def __init__(self, fail=False):
        self.presses = []
        self.fail = fail

    def try_execute(self, key, modifiers, active_context):
        if self.fail:
            raise RuntimeError("registry broke")
        self.presses.append((key, modifiers, active_context))
        return True


@pytest.fixture
def registry():
    return RecordingRegistry()


@pytest.fixture
def keys(registry):
    return KeyboardInput(registry, get_context=lambda: KeyContext.STATUS)


def test_key_name_translation():
    assert key_name(keyboard.Key.down) == "down"
    assert key_name(keyboard.Key.space) == "space"
    assert key_name(keyboard.KeyCode.from_char("A")) == "a"
    assert key_name(keyboard.KeyCode.from_vk(0x41)) is None


def test_plain_press_dispatches_with_context(keys, registry):
    assert keys._handle_key_press(keyboard.Key.down) is True
    assert registry.presses == [("down", KeyModifier.NONE, KeyContext.STATUS)]


def test_shift_state_follows_press_and_release(keys, registry):
    keys._handle_key_press(keyboard.Key.shift)
    keys._handle_key_press(keyboard.Key.down)
    keys._handle_key_release(keyboard.Key.shift)
    keys._handle_key_press(keyboard.Key.down)

    assert registry.presses == [
        ("down", KeyModifier.SHIFT, KeyContext.STATUS),
        ("down", KeyModifier.NONE, KeyContext.STATUS),
    ]


def test_ctrl_and_shift_combine(keys, registry):
    keys._handle_key_press(keyboard.Key.ctrl_l)
    keys._handle_key_press(keyboard.Key.shift_r)
    keys._handle_key_press(keyboard.Key.up)
    keys._handle_key_release(keyboard.Key.ctrl_l)
    keys._handle_key_press(keyboard.Key.up)

    assert [modifiers for _, modifiers, _ in registry.presses] == [
        KeyModifier.CTRL_SHIFT,
        KeyModifier.SHIFT,
    ]


def test_modifier_presses_are_not_dispatched(keys, registry):
    keys._handle_key_press(keyboard.Key.shift)
    keys._handle_key_press(keyboard.Key.ctrl)
    assert registry.presses == []


def test_handler_error_keeps_listener_running():
    keys = KeyboardInput(RecordingRegistry(fail=True))
    assert keys._handle_key_press(keyboard.Key.down) is True


def test_double_escape_stops_listener(keys, monkeypatch):
    now = {"value": 100.0}
    monkeypatch.setattr(keyboard_input.time, "monotonic", lambda: now["value"])
    announced = []
    keys.announce = lambda message, interrupt: announced.append(message)

    assert keys._handle_key_press(keyboard.Key.esc) is True
    assert announced == ["Press Escape again to exit."]

    now["value"] += ESC_WINDOW / 2
    assert keys._handle_key_press(keyboard.Key.esc) is False


def test_slow_second_escape_does_not_stop(keys, monkeypatch):
    now = {"value": 100.0}
    monkeypatch.setattr(keyboard_input.time, "monotonic", lambda: now["value"])

    assert keys._handle_key_press(keyboard.Key.esc) is True
    now["value"] += ESC_WINDOW + 0.5
    assert keys._handle_key_press(keyboard.Key.esc) is True


def test_other_key_resets_escape_window(keys, registry, monkeypatch):
    now = {"value": 100.0}
    monkeypatch.setattr(keyboard_input.time, "monotonic", lambda: now["value"])

    keys._handle_key_press(keyboard.Key.esc)
    keys._handle_key_press(keyboard.Key.down)
    now["value"] += 0.5
    assert keys._handle_key_press(keyboard.Key.esc) is True
