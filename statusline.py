#!/usr/bin/env python3
"""Statusline CLI entry point.

This file allows running statusline directly:
    python statusline.py < payload.json

For installed usage, use:
    statusline
"""

import sys
from statusline.cli import main

if __name__ == "__main__":
    sys.exit(main())
