"""
Utilities for the StatNav application
"""

import logging
import os

# Constants for application
APP_TITLE = "StatNav"
APP_VERSION = "1.0"

LOGGER_NAME = "StatNav"
LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'

# Longest message handed to the screen reader before truncation
MAX_SPEECH_LENGTH = 200

def setup_logging(debug=False, verbose=False, log_file="sn_debug.log"):
    """
    Configure the shared StatNav logger

    Verbose and debug mode both lower the StatNav logger to DEBUG; debug
    mode also writes the log file, once per path.

    Args:
        debug: Also log to log_file at DEBUG level
        verbose: Log StatNav debug messages to the console
        log_file: Path of the debug log file

    Returns:
        logging.Logger: The StatNav logger
    """
    formatter = logging.Formatter(LOG_FORMAT)
    logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG if (debug or verbose) else logging.INFO)

    if debug and not any(getattr(h, "baseFilename", None) == os.path.abspath(log_file)
                         for h in logger.handlers):
        file_handler = logging.FileHandler(log_file, mode='w')
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)
        print(f"Debug logging enabled. Log file: {log_file}")

    return logger

def sanitize_speech_text(text, max_length=MAX_SPEECH_LENGTH):
    """
    Sanitize text for screen reader to avoid issues

    Args:
        text: Raw text string
        max_length: Truncate messages longer than this

    Returns:
        str: Sanitized text
    """
    if not text:
        return ""

    # Replace control whitespace and collapse runs of spaces
    text = text.replace("\t", " ").replace("\r", " ").replace("\n", " ")
    while "  " in text:
        text = text.replace("  ", " ")
    text = text.strip()

    if len(text) > max_length:
        text = text[:max_length] + "..."

    return text
