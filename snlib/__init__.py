"""
StatNav Library Package

This package contains modules for the accessible stat navigation application.
"""

# Version information
__version__ = "1.0"

# Import key components to simplify importing from the package
from snlib.utils import setup_logging
from snlib.entry import StatEntry, build_group_bounds
from snlib.navigator import StatNavigator
from snlib.bindings import KeyBindingRegistry, KeyContext, KeyModifier
from snlib.profile import ScreenConfig, load_profile
from snlib.screens import ScreenManager
