import logging

from rich.logging import RichHandler

from .globals import LOGGER_NAME, err_console


def setup_logging(verbose: bool = False) -> logging.Logger:
    """
    Configure the package logger.

    Args:
        verbose (bool, optional): DEBUG level if True, INFO otherwise. Defaults to False.

    Returns:
        logging.Logger: The configured "hexgen" logger
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.handlers.clear()

    level = logging.DEBUG if verbose else logging.INFO
    logger.setLevel(level)

    handler = RichHandler(console=err_console, show_path=False, show_time=False)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.propagate = False

    return logger
