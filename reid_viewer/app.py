#!/usr/bin/env python3
"""
ReID Viewer - compare re-identification images side by side with their similarity scores.
"""

import argparse
import logging
import sys

from PySide6.QtWidgets import QApplication

from . import __version__
from .windows.main_window import MainWindow


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Side-by-side ReID image viewer")
    parser.add_argument("directory", nargs="?",
                        help="Dataset directory with an images folder and a similarity table")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def main(argv=None):
    """Main entry point for the ReID Viewer application."""
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = QApplication(sys.argv[:1])
    app.setApplicationName("ReID Viewer")
    app.setApplicationVersion(__version__)

    window = MainWindow()
    window.show()
    if args.directory:
        window.open_directory(args.directory)

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
