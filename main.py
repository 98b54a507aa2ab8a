#!/usr/bin/env python3
"""
Minehunter - Main entry point.

Usage:
    python main.py [--level {easy,medium,hard}] [--cols N] [--rows N] [--mines N]
"""
from src.minehunter.cli import main


if __name__ == "__main__":
    raise SystemExit(main())
