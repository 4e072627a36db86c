"""
Main entry point for the StatNav application
"""

import sys
import argparse

from snlib.profile import DEFAULT_SCREENS, ProfileError, load_profile
from snlib.screens import ScreenManager
from snlib.speech import SpeechOutput
from snlib.utils import APP_TITLE, setup_logging

def build_parser():
    parser = argparse.ArgumentParser(description="Accessible stat screen navigation")
    parser.add_argument("profile", nargs="?", default=None, help="Path to screen profile JSON file")
    parser.add_argument("-s", "--screen", default=None, help="Screen to open (default: first screen in the profile)")
    parser.add_argument("-d", "--debug", action="store_true", help="Enable debug mode (logs to file)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable verbose logging")
    parser.add_argument("--list-keys", action="store_true", help="Print the key map and exit")
    return parser

def main(argv=None):
    """Main function: load screens, start speech and listen for keys"""
    args = build_parser().parse_args(argv)

    # Set up logging
    logger = setup_logging(args.debug, args.verbose)

    # Load screens from the profile, or fall back to the built-in ones
    if args.profile is None:
        logger.info("No profile given, using built-in screens")
        screens = DEFAULT_SCREENS
    else:
        try:
            screens = load_profile(args.profile)
        except ProfileError as e:
            logger.error(str(e))
            print(f"Failed to load profile: {e}")
            return 1

    screen_name = args.screen or next(iter(screens))
    if screen_name not in screens:
        logger.error(f"Unknown screen '{screen_name}'. Available: {', '.join(screens)}")
        return 1

    speech = SpeechOutput()
    manager = ScreenManager(speech.speak)

    if args.list_keys:
        for combo, description in manager.registry.describe(screens[screen_name].context):
            print(f"{combo:<16} {description}")
        return 0

    # Imported here so --list-keys works without a keyboard hook backend
    from snlib.keyboard_input import KeyboardInput

    speech.start()
    try:
        speech.speak(f"{APP_TITLE} ready", False)
        manager.open_screen(screens[screen_name])
        keys = KeyboardInput(manager.registry, get_context=manager.active_context, announce=speech.speak)
        keys.run()
    except KeyboardInterrupt:
        print("\nKeyboard interrupt received. Exiting...")
    except Exception as e:
        logger.error(f"Fatal error: {e}")
        print(f"Fatal error: {e}")
        speech.output("Fatal error occurred. StatNav will now exit.", True)
        return 1
    finally:
        manager.close_screen()
        speech.stop()
        logger.info("Exiting StatNav")

    return 0

if __name__ == "__main__":
    sys.exit(main())
