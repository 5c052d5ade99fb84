"""
Error logging utility for the application.
"""

import logging
import os
from datetime import datetime


LOGGER_NAME = 'LinearFitting'
DEFAULT_LOG_DIR = 'logs'
DEFAULT_LOG_LEVEL = 'INFO'

# Silent until an application calls setup_logger
logging.getLogger(LOGGER_NAME).addHandler(logging.NullHandler())


def _env_log_level():
    name = os.environ.get('LINFIT_LOG_LEVEL', DEFAULT_LOG_LEVEL).upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO


def setup_logger(log_dir=None, log_level=None):
    """
    Set up application logger that writes to both file and console.

    Parameters
    ----------
    log_dir : str, optional
        Directory to store log files. Default: $LINFIT_LOG_DIR or 'logs'
    log_level : int, optional
        Logging level (logging.DEBUG, INFO, WARNING, ERROR, CRITICAL).
        Default: $LINFIT_LOG_LEVEL or INFO

    Returns
    -------
    logger : logging.Logger
        Configured logger instance
    """
    global _logger

    if log_dir is None:
        log_dir = os.environ.get('LINFIT_LOG_DIR', DEFAULT_LOG_DIR)
    if log_level is None:
        log_level = _env_log_level()

    os.makedirs(log_dir, exist_ok=True)

    timestamp = datetime.now().strftime('%Y%m%d_%H%M%S')
    log_file = os.path.join(log_dir, f'linear_fitting_{timestamp}.log')

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(log_level)

    # Remove existing handlers to avoid duplicates
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)

    file_handler = logging.FileHandler(log_file)
    file_handler.setLevel(log_level)
    file_formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )
    file_handler.setFormatter(file_formatter)
    logger.addHandler(file_handler)

    # Console handler (only warnings and errors)
    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.WARNING)
    console_formatter = logging.Formatter('%(levelname)s: %(message)s')
    console_handler.setFormatter(console_formatter)
    logger.addHandler(console_handler)

    logger.info("=" * 60)
    logger.info("Linear Fitting Started")
    logger.info(f"Log file: {log_file}")
    logger.info("=" * 60)

    _logger = logger
    return logger


# Global logger instance
_logger = None


def get_logger():
    """
    Get the global logger instance.

    Library code never configures logging itself: before ``setup_logger``
    has run this is the bare named logger, which writes no files.
    """
    if _logger is None:
        return logging.getLogger(LOGGER_NAME)
    return _logger


def log_error(message, exception=None):
    """
    Log an error message with optional exception details.

    Parameters
    ----------
    message : str
        Error message
    exception : Exception, optional
        Exception object to log
    """
    logger = get_logger()
    if exception:
        logger.error(f"{message}: {str(exception)}", exc_info=exception)
    else:
        logger.error(message)


def log_warning(message):
    """Log a warning message."""
    get_logger().warning(message)


def log_info(message):
    """Log an info message."""
    get_logger().info(message)


def log_debug(message):
    """Log a debug message."""
    get_logger().debug(message)
