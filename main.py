#!/usr/bin/env python3
"""
Minefield - main entry point.

Usage:
    python main.py play [--width W] [--height H] [--min-mines N] [--max-mines N] [--seed S]
    python main.py show [--seed S]
"""
import sys

from src.minefield.cli import main


if __name__ == "__main__":
    sys.exit(main())
