"""
Console and file logging of a run.

Sub-model reports go through logging.getLogger(__name__); on the console they
read like plain printed lines.
"""

import sys
import logging


_console_format = "%(message)s"
_file_format = "%(name)s %(levelname)s %(message)s"


def setup_logging(level=logging.INFO, log_file=None):
    """
    Route the root logger to stdout, message only, and optionally to a file.

    Calling it again replaces the handlers installed before.
    """
    root_logger = logging.getLogger()

    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        if isinstance(handler, logging.FileHandler):
            handler.close()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(logging.Formatter(_console_format))
    root_logger.addHandler(console_handler)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(_file_format))
        root_logger.addHandler(file_handler)

    root_logger.setLevel(level)
