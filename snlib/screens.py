"""
Screen lifecycle for navigable stat screens

Each open screen owns one StatNavigator, created when the screen opens and
discarded when it closes. Key bindings route through the manager so they
always reach the navigator of whichever screen is currently open.
"""

import logging

from snlib.bindings import KeyBindingRegistry, KeyContext, register_navigation_bindings
from snlib.navigator import NAV_UNAVAILABLE_MESSAGE, StatNavigator

logger = logging.getLogger("StatNav")

# Word used in key descriptions per screen context
CONTEXT_NOUNS = {
    KeyContext.STATUS: "stat",
    KeyContext.BESTIARY: "bestiary stat",
}


class ScreenManager:
    """Opens and closes stat screens and forwards navigation keys to them"""

    def __init__(self, speak, registry=None):
        """
        Args:
            speak: Callable taking (message, interrupt)
            registry: KeyBindingRegistry to install navigation keys into
        """
        self.speak = speak
        self.registry = registry if registry is not None else KeyBindingRegistry()
        self.current_screen = None
        self.navigator = None
        # Whether the open screen is actually on display
        self.navigation_active = False
        self._register_bindings()

    def _register_bindings(self):
        for context, noun in CONTEXT_NOUNS.items():
            register_navigation_bindings(self.registry, self, context, noun)
        self.registry.register("space", self.read_current, "Read current stat")
        self.registry.finalize()

    def active_context(self):
        if self.current_screen is None:
            return KeyContext.GLOBAL
        return self.current_screen.context

    def open_screen(self, config, entries=None):
        """
        Open a screen and load its entries

        Args:
            config: ScreenConfig for the screen
            entries: Entries to navigate; the config's static entries when None

        Returns:
            StatNavigator: The navigator owned by the new screen
        """
        if self.current_screen is not None:
            self.close_screen()

        self.current_screen = config
        self.navigator = StatNavigator(
            self.speak,
            group_names=config.group_names,
            is_enabled=lambda: self.navigation_active,
            default_group_name=config.default_group_name,
            name=config.name,
        )
        self.navigator.initialize(config.entries if entries is None else entries)
        self.navigation_active = True

        count = len(self.navigator)
        logger.info(f"Opened screen '{config.name}' with {count} entries")
        if count:
            self.speak(f"{config.title}. {count} {'stat' if count == 1 else 'stats'}", False)
        else:
            self.speak(f"{config.title}. No stats available", False)
        return self.navigator

    def refresh(self, entries):
        """
        Reload the open screen with new entries

        Args:
            entries: Freshly built entries for the same screen
        """
        if self.navigator is None:
            logger.warning("Refresh requested with no screen open")
            return
        self.navigator.initialize(entries)
        logger.debug(f"Refreshed screen '{self.current_screen.name}' with {len(self.navigator)} entries")

    def close_screen(self):
        """Close the open screen and discard its navigator"""
        if self.current_screen is None:
            return
        logger.info(f"Closed screen '{self.current_screen.name}'")
        self.navigation_active = False
        self.navigator.reset()
        self.navigator = None
        self.current_screen = None

    # Navigation keys

    def navigate_next(self):
        if self.navigator is not None:
            self.navigator.navigate_next()

    def navigate_previous(self):
        if self.navigator is not None:
            self.navigator.navigate_previous()

    def jump_to_next_group(self):
        if self.navigator is not None:
            self.navigator.jump_to_next_group()

    def jump_to_previous_group(self):
        if self.navigator is not None:
            self.navigator.jump_to_previous_group()

    def jump_to_top(self):
        if self.navigator is not None:
            self.navigator.jump_to_top()

    def jump_to_bottom(self):
        if self.navigator is not None:
            self.navigator.jump_to_bottom()

    def read_current(self):
        if self.navigator is None:
            self.speak(NAV_UNAVAILABLE_MESSAGE, True)
            return
        self.navigator.read_current(interrupt=True)

    def read_current_group(self):
        if self.navigator is None:
            self.speak(NAV_UNAVAILABLE_MESSAGE, True)
            return
        self.navigator.read_current_group(interrupt=True)
