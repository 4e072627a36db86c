"""
Key binding registry with context-aware dispatch
"""

import enum
import logging

logger = logging.getLogger("StatNav")


class KeyModifier(enum.IntFlag):
    NONE = 0
    SHIFT = 1
    CTRL = 2
    CTRL_SHIFT = SHIFT | CTRL


class KeyContext(str, enum.Enum):
    """Screen in which a binding is active; GLOBAL bindings match every screen"""

    GLOBAL = "global"
    STATUS = "status"
    BESTIARY = "bestiary"


_MODIFIER_PREFIXES = {
    KeyModifier.NONE: "",
    KeyModifier.SHIFT: "Shift+",
    KeyModifier.CTRL: "Ctrl+",
    KeyModifier.CTRL_SHIFT: "Ctrl+Shift+",
}


class KeyBinding:
    """A single keyboard shortcut"""

    def __init__(self, key, modifier, context, action, description):
        self.key = key
        self.modifier = modifier
        self.context = context
        self.action = action
        self.description = description

    @property
    def combo(self):
        return _MODIFIER_PREFIXES[self.modifier] + self.key.capitalize()

    def __repr__(self):
        return f"KeyBinding({self.combo!r}, {self.context.value!r}, {self.description!r})"


class KeyBindingRegistry:
    """Maps key names (pynput Key names or characters) to actions per screen context"""

    def __init__(self):
        self._bindings = {}

    def register(self, key, action, description, modifier=KeyModifier.NONE, context=KeyContext.GLOBAL):
        """
        Register a key binding

        Args:
            key: Key name, e.g. "down", "space" or "a"
            action: Callable taking no arguments
            description: Human readable description for help listings
            modifier: Exact modifier state required
            context: Screen context the binding belongs to
        """
        binding = KeyBinding(key.lower(), KeyModifier(modifier), KeyContext(context), action, description)
        self._bindings.setdefault(binding.key, []).append(binding)
        return binding

    def finalize(self):
        """Sort bindings so that specific modifiers and specific contexts are checked first"""
        for bindings in self._bindings.values():
            bindings.sort(key=lambda b: (-int(b.modifier), b.context == KeyContext.GLOBAL))

    def try_execute(self, key, modifiers, active_context):
        """
        Run the binding matching a key press

        Args:
            key: Pressed key name
            modifiers: KeyModifier state at the time of the press
            active_context: KeyContext of the current screen

        Returns:
            bool: True if a binding matched
        """
        for binding in self._bindings.get(key.lower(), []):
            if binding.modifier != modifiers:
                continue
            if binding.context != KeyContext.GLOBAL and binding.context != active_context:
                continue

            try:
                binding.action()
            except Exception as e:
                logger.error(f"Error running '{binding.description}' for {binding.combo}: {e}")
            return True

        return False

    def describe(self, context=None):
        """
        List bindings as (key combo, description) pairs

        Args:
            context: Only include this context plus global bindings; all when None

        Returns:
            list: Pairs in registration order per key
        """
        listing = []
        for bindings in self._bindings.values():
            for binding in bindings:
                if context is None or binding.context in (KeyContext.GLOBAL, context):
                    listing.append((binding.combo, binding.description))
        return listing

    @property
    def registered_keys(self):
        return list(self._bindings)


def register_navigation_bindings(registry, navigator, context, noun="stat"):
    """
    Install the arrow key map for a navigable screen

    Args:
        registry: KeyBindingRegistry to add to
        navigator: Object exposing the StatNavigator traversal methods
        context: KeyContext the bindings belong to
        noun: Word used in binding descriptions
    """
    bindings = [
        ("down", KeyModifier.CTRL, navigator.jump_to_bottom, f"Jump to bottom {noun}"),
        ("down", KeyModifier.SHIFT, navigator.jump_to_next_group, f"Jump to next {noun} group"),
        ("down", KeyModifier.NONE, navigator.navigate_next, f"Next {noun}"),
        ("up", KeyModifier.CTRL, navigator.jump_to_top, f"Jump to top {noun}"),
        ("up", KeyModifier.SHIFT, navigator.jump_to_previous_group, f"Jump to previous {noun} group"),
        ("up", KeyModifier.NONE, navigator.navigate_previous, f"Previous {noun}"),
        ("space", KeyModifier.CTRL, navigator.read_current_group, f"Read current {noun} group"),
        ("space", KeyModifier.NONE, navigator.read_current, f"Read current {noun}"),
    ]
    for key, modifier, action, description in bindings:
        registry.register(key, action, description, modifier=modifier, context=context)
