"""
Global keyboard hook that feeds key presses into the binding registry
"""

import time
import logging

from pynput import keyboard

from snlib.bindings import KeyContext, KeyModifier

logger = logging.getLogger("StatNav")

# Esc must be pressed twice within this many seconds to exit
ESC_WINDOW = 2.0

_SHIFT_KEYS = (keyboard.Key.shift, keyboard.Key.shift_l, keyboard.Key.shift_r)
_CTRL_KEYS = (keyboard.Key.ctrl, keyboard.Key.ctrl_l, keyboard.Key.ctrl_r)


def key_name(key):
    """
    Translate a pynput key to a registry key name

    Args:
        key: keyboard.Key or keyboard.KeyCode

    Returns:
        str or None: Lower-case name, or None for keys without one
    """
    if isinstance(key, keyboard.Key):
        return key.name
    char = getattr(key, "char", None)
    if char:
        return char.lower()
    return None


class KeyboardInput:
    """Listens for key presses and dispatches them for the active screen context"""

    def __init__(self, registry, get_context=None, announce=None):
        """
        Args:
            registry: KeyBindingRegistry to dispatch into
            get_context: Callable returning the active KeyContext
            announce: Callable taking (message, interrupt) for prompts
        """
        self.registry = registry
        self.get_context = get_context or (lambda: KeyContext.GLOBAL)
        self.announce = announce
        self.shift_pressed = False
        self.ctrl_pressed = False
        self.esc_time = 0.0

    @property
    def modifiers(self):
        modifiers = KeyModifier.NONE
        if self.shift_pressed:
            modifiers |= KeyModifier.SHIFT
        if self.ctrl_pressed:
            modifiers |= KeyModifier.CTRL
        return modifiers

    def run(self):
        """Block on the keyboard listener until Esc is pressed twice"""
        with keyboard.Listener(
            on_press=self._handle_key_press,
            on_release=self._handle_key_release
        ) as listener:
            listener.join()

    def _handle_key_press(self, key):
        """
        Handle keyboard key press events

        Args:
            key: Key object from pynput

        Returns:
            bool: False to stop listening, True to continue
        """
        try:
            if key in _SHIFT_KEYS:
                self.shift_pressed = True
                return True
            if key in _CTRL_KEYS:
                self.ctrl_pressed = True
                return True

            if key == keyboard.Key.esc:
                now = time.monotonic()
                if self.esc_time and now - self.esc_time < ESC_WINDOW:
                    logger.info("Exit requested")
                    return False
                self.esc_time = now
                if self.announce:
                    self.announce("Press Escape again to exit.", True)
                return True

            self.esc_time = 0.0
            name = key_name(key)
            if name is None:
                return True

            if self.registry.try_execute(name, self.modifiers, self.get_context()):
                logger.debug(f"Handled key {name} with modifiers {self.modifiers!r}")
        except Exception as e:
            logger.error(f"Error during key handling: {e}")

        return True

    def _handle_key_release(self, key):
        """
        Handle keyboard key release events

        Args:
            key: Key object from pynput

        Returns:
            bool: False to stop listening, True to continue
        """
        try:
            if key in _SHIFT_KEYS:
                self.shift_pressed = False
            elif key in _CTRL_KEYS:
                self.ctrl_pressed = False
        except Exception as e:
            logger.error(f"Error during key release handling: {e}")
        return True
