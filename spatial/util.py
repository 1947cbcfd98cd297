"""Logging configuration for the `spatial` package."""
import logging
import os

import spatial

LOG_FILENAME = "spatial.log"


def setup_logging(save_folder: str, log_level: int = logging.INFO):
    """Sends the package's log records to `spatial.log` in `save_folder`.

    The handler is attached to the `spatial` logger only, so records from
    `spatial.box_io` and other package modules are captured while the root
    logger and other libraries are left alone. Calling this again for the
    same folder replaces the earlier handler instead of duplicating output.

    Args:
        save_folder: Folder to save logs.
        log_level: Level of the `spatial` logger.

    Returns:
        The log file handler.
    """
    os.makedirs(save_folder, exist_ok=True)
    log_path = os.path.abspath(os.path.join(save_folder, LOG_FILENAME))

    package_logger = logging.getLogger(spatial.__name__)
    for handler in list(package_logger.handlers):
        if (isinstance(handler, logging.FileHandler) and
                handler.baseFilename == log_path):
            package_logger.removeHandler(handler)
            handler.close()

    log_file_handler = logging.FileHandler(log_path)
    log_file_handler.setFormatter(logging.Formatter(spatial.LOG_FORMAT))
    package_logger.addHandler(log_file_handler)
    package_logger.setLevel(log_level)

    return log_file_handler
