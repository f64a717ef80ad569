#!/usr/bin/env python3
"""
run.py - Main entry point for the column-drop game driver
"""

import sys

from connect4core.interfaces.cli import main

if __name__ == "__main__":
    sys.exit(main())
