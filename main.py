#!/usr/bin/env python3
"""
Ticker List Builder - Main Entry Point
======================================

Usage:
    python main.py                  # Download NSE list, merge with bse.csv, write ./files
    python main.py --help           # Show help
"""

import sys

from tickerlist.main import main

if __name__ == "__main__":
    sys.exit(main())
