"""
StatNav main script
"""

import sys

from snlib.main import main

if __name__ == "__main__":
    sys.exit(main())
