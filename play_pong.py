#!/usr/bin/env python3
"""
Main script to launch Mini Pong with PyGame graphical interface
"""

import importlib.util
import sys

try:
    from mini_pong.gui.game_app import main

except ImportError as e:
    print(f"Import error: {e}")
    print()
    print("Checking dependencies:")
    for package in ("pygame", "numpy", "pydantic"):
        if importlib.util.find_spec(package) is not None:
            print(f"✓ {package} is installed")
        else:
            print(f"✗ {package} is not installed - pip install {package}")
    sys.exit(1)

if __name__ == "__main__":
    print("=== PONG ===")
    print()
    print("CONTROLS:")
    print("  Left paddle: W/S")
    print("  Right paddle: I/K")
    print("  Close the window to quit")
    print()

    main(sys.argv[1:])
