#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Document Browser - paged PDF viewer with chapter and index navigation.

Entry point: ``docbrowser [PDF]``.  Sets up logging, creates the Qt
application and opens the optional PDF given on the command line.
"""

import logging
import sys
from typing import Optional, Sequence

from .utils.logging_utils import default_log_file, setup_logging


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    Launch the browser window.

    Args:
        argv: Command line (defaults to ``sys.argv``); ``argv[1]``, when
            present, is a PDF to open.

    Returns:
        int: Exit code (0 for success)
    """
    argv = list(sys.argv if argv is None else argv)
    setup_logging(log_file=str(default_log_file()))
    logger = logging.getLogger(__name__)
    logger.info("Starting Document Browser")

    try:
        # Import Qt modules here so logging is configured first
        from PySide6.QtWidgets import QApplication

        from .ui.main_window import MainWindow

        app = QApplication.instance() or QApplication(argv)
        app.setApplicationName("Document Browser")

        window = MainWindow()
        window.show()
        if len(argv) > 1:
            window.open_pdf(argv[1])

        exit_code = app.exec()
        logger.info(f"Application exited with code {exit_code}")
        return exit_code

    except Exception as e:
        logger.exception(f"Fatal error in main application: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
