"""
Grouped stat navigation buffer

Steps through a flat list of "label: value" stats with wraparound, jumps
between group runs and to either end, and hands every read to a speech sink.
"""

import logging
from typing import NamedTuple

from snlib.entry import build_group_bounds

logger = logging.getLogger("StatNav")

DEFAULT_GROUP_NAME = "Other"
NAV_UNAVAILABLE_MESSAGE = "Navigation not available"
READ_ERROR_MESSAGE = "Error reading stat"


class _NavState(NamedTuple):
    entries: tuple
    bounds: tuple
    cursor: int


_EMPTY_STATE = _NavState((), (), 0)


class StatNavigator:
    """Cursor over an ordered, group-partitioned list of stat entries"""

    def __init__(self, speak, group_names=None, is_enabled=None,
                 default_group_name=DEFAULT_GROUP_NAME, name="stats"):
        """
        Create an empty, inactive navigator

        Args:
            speak: Callable taking (message, interrupt) that delivers output
            group_names: Mapping from group tag to display name
            is_enabled: Callable returning whether the owning screen currently
                allows navigation; always enabled when omitted
            default_group_name: Display name for unmapped group tags
            name: Short name used in log messages
        """
        self.speak = speak
        self.group_names = group_names if group_names is not None else {}
        self.is_enabled = is_enabled
        self.default_group_name = default_group_name
        self.name = name
        # Entries, bounds and cursor are always swapped together
        self._state = _EMPTY_STATE

    def __len__(self):
        return len(self._state.entries)

    @property
    def entries(self):
        return self._state.entries

    @property
    def group_bounds(self):
        return list(self._state.bounds)

    @property
    def cursor(self):
        """Current index, or None when no buffer is loaded"""
        state = self._state
        return state.cursor if state.entries else None

    def initialize(self, entries):
        """
        Replace the buffer with a freshly built list of entries

        The cursor moves to the first entry. An empty list leaves the
        navigator inactive.

        Args:
            entries: Ordered sequence of StatEntry
        """
        snapshot = tuple(entries)
        bounds = tuple(build_group_bounds(snapshot))
        self._state = _NavState(snapshot, bounds, 0)
        logger.debug(f"{self.name}: loaded {len(snapshot)} entries in {len(bounds)} groups")

    def reset(self):
        """Discard the buffer and cursor"""
        self._state = _EMPTY_STATE

    def is_active(self):
        """
        Check whether navigation is currently possible

        Returns:
            bool: True if the buffer has entries and the owner allows navigation
        """
        if not self._state.entries:
            return False
        if self.is_enabled is None:
            return True
        try:
            return bool(self.is_enabled())
        except Exception as e:
            logger.warning(f"{self.name}: navigation flag check failed: {e}")
            return False

    def set_cursor(self, index):
        """
        Force the cursor to an index

        Out-of-range values are kept and snapped to the first entry on the
        next read. Ignored while no buffer is loaded.
        """
        state = self._state
        if not state.entries:
            return
        self._state = state._replace(cursor=index)

    def current_entry(self):
        """
        Get the entry under the cursor

        Returns:
            StatEntry or None: None when no buffer is loaded or the cursor is out of range
        """
        state = self._state
        if 0 <= state.cursor < len(state.entries):
            return state.entries[state.cursor]
        return None

    def group_display_name(self, group):
        return self.group_names.get(group, self.default_group_name)

    # Traversal

    def navigate_next(self):
        """Move to the next stat, wrapping to the top"""
        if not self.is_active():
            return
        state = self._state
        self._move(state, (state.cursor + 1) % len(state.entries))
        self._read(interrupt=True)

    def navigate_previous(self):
        """Move to the previous stat, wrapping to the bottom"""
        if not self.is_active():
            return
        state = self._state
        count = len(state.entries)
        self._move(state, (state.cursor - 1 + count) % count)
        self._read(interrupt=True)

    def jump_to_next_group(self):
        """Move to the first stat of the next group run, wrapping to the first run"""
        if not self.is_active():
            return
        state = self._state
        if not state.bounds:
            return

        target = state.bounds[0]
        for bound in state.bounds:
            if bound > state.cursor:
                target = bound
                break

        self._move(state, target)
        self._read(with_group=True, interrupt=True)

    def jump_to_previous_group(self):
        """Move to the first stat of the previous group run, wrapping to the last run"""
        if not self.is_active():
            return
        state = self._state
        if not state.bounds:
            return

        target = state.bounds[-1]
        for bound in reversed(state.bounds):
            if bound < state.cursor:
                target = bound
                break

        self._move(state, target)
        self._read(with_group=True, interrupt=True)

    def jump_to_top(self):
        if not self.is_active():
            return
        self._move(self._state, 0)
        self._read(interrupt=True)

    def jump_to_bottom(self):
        if not self.is_active():
            return
        state = self._state
        self._move(state, len(state.entries) - 1)
        self._read(interrupt=True)

    # Reads

    def read_current(self, interrupt=True):
        """
        Speak the stat under the cursor

        Args:
            interrupt: Whether pending speech should be cancelled first
        """
        if not self.is_active():
            self.speak(NAV_UNAVAILABLE_MESSAGE, interrupt)
            return
        self._read(interrupt=interrupt)

    def read_current_group(self, interrupt=True):
        """
        Speak every stat in the group run under the cursor as one message

        Args:
            interrupt: Whether pending speech should be cancelled first
        """
        if not self.is_active():
            self.speak(NAV_UNAVAILABLE_MESSAGE, interrupt)
            return
        state = self._clamped_state()

        start = 0
        end = len(state.entries)
        for bound in state.bounds:
            if bound <= state.cursor:
                start = bound
            else:
                end = bound
                break

        try:
            run = state.entries[start:end]
            stats = ", ".join(str(entry) for entry in run)
            message = f"{self.group_display_name(run[0].group)}. {stats}"
        except Exception as e:
            logger.error(f"{self.name}: error reading group at {start}: {e}")
            self.speak(READ_ERROR_MESSAGE, interrupt)
            return
        self.speak(message, interrupt)

    def _move(self, state, index):
        self._state = state._replace(cursor=index)

    def _clamped_state(self):
        state = self._state
        if not 0 <= state.cursor < len(state.entries):
            logger.debug(f"{self.name}: cursor {state.cursor} out of range, snapping to 0")
            state = state._replace(cursor=0)
            self._state = state
        return state

    def _read(self, with_group=False, interrupt=True):
        state = self._clamped_state()
        entry = state.entries[state.cursor]
        try:
            message = str(entry)
            if with_group:
                message = f"{self.group_display_name(entry.group)}. {message}"
        except Exception as e:
            logger.error(f"{self.name}: error reading stat at {state.cursor}: {e}")
            self.speak(READ_ERROR_MESSAGE, interrupt)
            return
        self.speak(message, interrupt)
