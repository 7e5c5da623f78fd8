"""Logging setup for the command line entry point."""
import logging
import sys
from typing import Optional, Union


def configure_logging(log_level: Union[int, str] = "WARNING",
                      log_file: Optional[str] = None,
                      trace_mode: bool = False) -> logging.Logger:
    """
    Configures root logging handlers.

    Args:
        log_level (int | str): Numeric level or name such as "DEBUG".
        log_file (str, optional): Also append log output to this file.
        trace_mode (bool): Include timestamps and logger names.

    Returns:
        logging.Logger: The configured root logger.
    """
    if isinstance(log_level, int):
        level = log_level
    else:
        level = getattr(logging, str(log_level).upper(), logging.INFO)

    root = logging.getLogger()
    root.setLevel(level)
    root.handlers.clear()

    if trace_mode:
        formatter = logging.Formatter("[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s",
                                      datefmt="%Y-%m-%d %H:%M:%S")
    else:
        formatter = logging.Formatter("%(levelname)s: %(message)s")

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(level)
    console.setFormatter(formatter)
    root.addHandler(console)

    if log_file:
        try:
            file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        except OSError as e:
            root.warning("Could not create log file %s: %s", log_file, e)
        else:
            file_handler.setLevel(level)
            file_handler.setFormatter(formatter)
            root.addHandler(file_handler)
            root.info("Logging to file: %s", log_file)

    return root
