"""
Screen profiles for the StatNav application

A profile is a JSON file with one object per navigable screen giving its key
context, group display names and, optionally, a static list of entries.
"""

import json
import logging

from snlib.bindings import KeyContext
from snlib.entry import StatEntry, entries_from_rows
from snlib.navigator import DEFAULT_GROUP_NAME

logger = logging.getLogger("StatNav")


class ProfileError(Exception):
    """Raised when a profile cannot be read or is malformed"""


class ScreenConfig:
    """Configuration for one navigable screen"""

    def __init__(self, name, context=KeyContext.STATUS, group_names=None,
                 default_group_name=DEFAULT_GROUP_NAME, entries=None):
        self.name = name
        self.context = KeyContext(context)
        self.group_names = dict(group_names or {})
        self.default_group_name = default_group_name
        self.entries = list(entries or [])

    @property
    def title(self):
        return self.name.replace("_", " ").replace("-", " ")

    def __repr__(self):
        return f"ScreenConfig({self.name!r}, context={self.context.value!r}, entries={len(self.entries)})"


def screen_from_dict(name, data):
    """
    Build a ScreenConfig from its profile object

    Args:
        name: Screen name (the key in the profile's "screens" object)
        data: Dictionary loaded from JSON

    Returns:
        ScreenConfig: Parsed screen

    Raises:
        ProfileError: If a field has the wrong type or value
    """
    if not isinstance(data, dict):
        raise ProfileError(f"Screen '{name}' must be an object")

    group_names = data.get("group_names", {})
    if not isinstance(group_names, dict):
        raise ProfileError(f"Screen '{name}': group_names must be an object")

    try:
        context = KeyContext(data.get("context", KeyContext.STATUS.value))
    except ValueError:
        context = None
    if context is None or context == KeyContext.GLOBAL:
        valid = ", ".join(c.value for c in KeyContext if c != KeyContext.GLOBAL)
        raise ProfileError(f"Screen '{name}': unknown context {data.get('context')!r} (expected one of {valid})")

    try:
        entries = entries_from_rows(data.get("entries", []))
    except (TypeError, ValueError) as e:
        raise ProfileError(f"Screen '{name}': {e}")

    return ScreenConfig(
        name,
        context=context,
        group_names=group_names,
        default_group_name=data.get("default_group_name", DEFAULT_GROUP_NAME),
        entries=entries,
    )


def load_profile(filepath):
    """
    Load screen configurations from a JSON profile

    Args:
        filepath: Path to the profile JSON file

    Returns:
        dict: Screen name to ScreenConfig, in file order

    Raises:
        ProfileError: If the file cannot be read or parsed
    """
    try:
        with open(filepath, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except OSError as e:
        raise ProfileError(f"Cannot read profile '{filepath}': {e}")
    except UnicodeDecodeError as e:
        raise ProfileError(f"Profile '{filepath}' is not valid UTF-8: {e}")
    except json.JSONDecodeError as e:
        raise ProfileError(f"Invalid JSON in profile '{filepath}': {e}")

    screens_data = data.get("screens") if isinstance(data, dict) else None
    if not isinstance(screens_data, dict) or not screens_data:
        raise ProfileError(f"Profile '{filepath}' has no screens")

    screens = {name: screen_from_dict(name, screen) for name, screen in screens_data.items()}
    logger.info(f"Loaded profile with {len(screens)} screens")
    return screens


# Built-in screens used when no profile is given
DEFAULT_SCREENS = {
    "bestiary": ScreenConfig(
        "bestiary",
        context=KeyContext.BESTIARY,
        group_names={
            "MonsterData": "Monster Data",
            "Status": "Status",
            "Options": "Rewards",
            "Items": "Items",
            "Properties": "Properties",
        },
        entries=[
            StatEntry("Defeated", "3", "MonsterData"),
            StatEntry("Level", "12", "MonsterData"),
            StatEntry("HP", "450", "Status"),
            StatEntry("MP", "60", "Status"),
            StatEntry("Gil", "100", "Options"),
            StatEntry("EXP", "210", "Options"),
            StatEntry("Dropped Items", "Potion", "Items"),
            StatEntry("Weakness", "Fire", "Properties"),
        ],
    ),
    "status": ScreenConfig(
        "status",
        context=KeyContext.STATUS,
        group_names={
            "Status": "Status",
            "Physical": "Physical",
            "Magical": "Magical",
            "Equipment": "Equipment",
        },
        entries=[
            StatEntry("Level", "12", "Status"),
            StatEntry("HP", "30/30", "Status"),
            StatEntry("Strength", "28", "Physical"),
            StatEntry("Attack", "41", "Physical"),
            StatEntry("Magic", "19", "Magical"),
            StatEntry("Magic Defense", "8", "Magical"),
            StatEntry("Right Hand", "Broadsword", "Equipment"),
        ],
    ),
}
