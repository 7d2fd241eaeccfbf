"""Logging configuration for grid_escape.

The library never installs handlers on import; applications (or a test
session) call :func:`setup_logging` once. Modules obtain their logger with
``get_logger(__name__)``.
"""

import logging
import sys


def setup_logging(level: str = "INFO", format_style: str = "simple") -> None:
    """
    Set up logging configuration for the application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_style: Format style - "simple" or "detailed"
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    formats = {
        "simple": "%(name)s - %(levelname)s - %(message)s",
        "detailed": "%(asctime)s - %(name)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s",
    }
    log_format = formats.get(format_style, formats["simple"])

    logging.basicConfig(
        level=numeric_level,
        format=log_format,
        handlers=[logging.StreamHandler(sys.stdout)],
    )


def get_logger(module_name: str) -> logging.Logger:
    """
    Get a logger with a shortened name for package modules.

    Args:
        module_name: Full module name (e.g., 'grid_escape.systems.movement')

    Returns:
        Logger named without the package prefix (e.g., 'systems.movement')
    """
    if module_name.startswith("grid_escape."):
        module_name = module_name[len("grid_escape.") :]
    return logging.getLogger(module_name)
