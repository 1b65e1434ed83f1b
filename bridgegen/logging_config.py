"""Logging setup shared by every bridgegen module.

Modules obtain their logger with ``get_logger(__name__)``; the CLI calls
``configure_logging`` once to route records through rich.
"""

import logging
from typing import Optional

from rich.logging import RichHandler

ROOT_LOGGER_NAME = "bridgegen"


def get_logger(name: str) -> logging.Logger:
    """Return a logger nested under the package root logger."""
    if name != ROOT_LOGGER_NAME and not name.startswith(ROOT_LOGGER_NAME + "."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def configure_logging(level: int = logging.WARNING, console=None) -> logging.Logger:
    """
    Attach a RichHandler to the package root logger.

    Calling this more than once replaces the previously installed handler
    instead of stacking another one.

    Args:
        level: Logging level for the package root logger
        console: Optional rich Console to write records to

    Returns:
        The configured root logger
    """
    root = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in list(root.handlers):
        if isinstance(handler, RichHandler):
            root.removeHandler(handler)

    handler_kwargs = {"show_path": False, "rich_tracebacks": True}
    if console is not None:
        handler_kwargs["console"] = console
    handler = RichHandler(**handler_kwargs)
    handler.setFormatter(logging.Formatter("%(message)s"))

    root.addHandler(handler)
    root.setLevel(level)
    return root


def level_from_flags(verbose: bool = False, quiet: Optional[bool] = False) -> int:
    """Map CLI verbosity flags to a logging level."""
    if verbose:
        return logging.DEBUG
    if quiet:
        return logging.ERROR
    return logging.WARNING
