#!/usr/bin/env python
"""
SnapOCR - Main entry point
"""
import sys
import os


def main():
    """Main entry point for SnapOCR."""
    # Ensure the snapocr package can be found
    if hasattr(sys, '_MEIPASS'):
        # Running in PyInstaller bundle
        base_path = sys._MEIPASS
    else:
        # Running from a source checkout
        base_path = os.path.dirname(os.path.abspath(__file__))

    if base_path not in sys.path:
        sys.path.insert(0, base_path)

    from snapocr.main import main as app_main
    return app_main()


if __name__ == "__main__":
    sys.exit(main())
