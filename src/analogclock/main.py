"""
Application Initialization
==========================
This module wires logging, the Qt application and the main window together
and starts the Qt Event Loop.
"""
import argparse
import logging
import sys
from typing import List, Optional

from analogclock.app.application import create_app
from analogclock.logging_config import setup_logging
from analogclock.view.main_window import MainWindow

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="analogclock", description="Show an analog clock.")
    parser.add_argument("--debug", action="store_true", help="enable debug logging")
    parser.add_argument("--log-file", default=None, help="also write the log to this file")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)

    # 1. Setup Logging (Console + Optional File)
    setup_logging(level=logging.DEBUG if args.debug else logging.INFO, log_file=args.log_file)

    # 2. Create the Qt Application
    app = create_app([sys.argv[0]])

    # 3. Initialize the Main Window
    window = MainWindow()
    window.show()
    logger.info("Clock window shown.")

    # 4. Start Event Loop
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
