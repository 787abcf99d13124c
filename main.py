"""STOP word game - entry point for running from a source checkout."""

import os
import sys

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from stop_game.main import main

if __name__ == "__main__":
    main()
