"""Logging utilities."""

import logging
import sys
from pathlib import Path


def setup_logger(name: str = 'quadwarp', log_level: int = logging.INFO,
                 log_file: str = None) -> logging.Logger:
    """Setup logger with console and optional file handler.

    Calling it again for the same logger replaces the handlers it added
    earlier instead of stacking new ones.
    """
    logger = logging.getLogger(name)
    logger.setLevel(log_level)

    for handler in [h for h in logger.handlers if getattr(h, '_quadwarp', False)]:
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    console_handler._quadwarp = True
    logger.addHandler(console_handler)

    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(formatter)
        file_handler._quadwarp = True
        logger.addHandler(file_handler)

    return logger
