"""This module contains small miscellaneous utility functions."""
from typing import Optional

import logging
import os

import envelope3d


def setup_logging(save_folder: Optional[str] = None,
                  log_level: int = logging.INFO
                 ) -> Optional[logging.FileHandler]:
    """Setup logging.

    This will setup logging to stdout and, if `save_folder` is given, to an
    `envelope3d.log` file within `save_folder`.

    Args:
        save_folder: Folder to save logs.
        log_level: Default logging level.

    Returns:
        The log file handler, or `None` if no `save_folder` is given.
    """
    logging.basicConfig(format=envelope3d.LOG_FORMAT)
    logging.getLogger("").setLevel(log_level)

    if save_folder is None:
        return None

    os.makedirs(save_folder, exist_ok=True)

    # Now also log to file.
    log_file_handler = logging.FileHandler(
        os.path.join(save_folder, "envelope3d.log"))
    log_file_handler.setFormatter(logging.Formatter(envelope3d.LOG_FORMAT))
    # Add handler to root logger.
    logging.getLogger("").addHandler(log_file_handler)

    return log_file_handler
