"""
Entry point for the Qt preferences window.

Run: python main.py
Requires: pip install -e .
"""
from __future__ import annotations

import sys

from prefs_app.launcher import main

if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:
        sys.exit(0)
