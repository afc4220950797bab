#!/usr/bin/env python3
"""
HarAmmo - HAR to raw HTTP request converter

This is a convenience wrapper that calls the packaged implementation.
The actual implementation is in src/harammo/cli.py

Usage:
    python har2ammo.py -i session.har -o ammo.txt
"""

import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent / "src"))

from harammo.cli import main

if __name__ == '__main__':
    main()
