#!/usr/bin/env python3
"""
Main script to launch Canvas Pong with PyGame graphical interface
"""

import sys

from canvas_pong.gui.game_app import main

if __name__ == "__main__":
    print("=== CANVAS PONG ===")
    print()
    print("CONTROLS:")
    print("  Mouse: move the right paddle")
    print("  ESC: Quit")
    print()
    print("First player to 5 points wins.")
    print()

    sys.exit(main())
