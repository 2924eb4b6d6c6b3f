"""Logging for prodgraph.

Every module logs through a child of the ``prodgraph`` logger obtained with
`get_logger(__name__)`. What each level carries:

- DEBUG: search parameters and per-search statistics (branches evaluated,
  branches expanded, peak frontier size) from ``prodgraph.algorithms.search``,
  graph sizes from ``prodgraph.graph.io``, procedure dispatch.
- INFO: CLI progress (graph loaded, nodes reached, elapsed time).
- ERROR: CLI failures before exiting with status 1.

The package root defaults to INFO so library users see nothing from the
search unless they opt into DEBUG with `enable_debug_logging()` or
``prodgraph -v``.
"""

import logging
import sys
from typing import Optional

ROOT_LOGGER_NAME = "prodgraph"
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_ROOT_LOGGER_CONFIGURED = False


def setup_root_logger(
    level: int = logging.INFO,
    format_string: Optional[str] = None,
    handler: Optional[logging.Handler] = None,
) -> None:
    """Attach a single handler to the ``prodgraph`` logger.

    Only the first call takes effect; later calls return immediately until
    `reset_logging()` runs, so importing several modules never stacks handlers.

    Args:
        level: Level for the ``prodgraph`` logger.
        format_string: Record format, `DEFAULT_FORMAT` when omitted.
        handler: Destination, a stdout StreamHandler when omitted.
    """
    global _ROOT_LOGGER_CONFIGURED

    if _ROOT_LOGGER_CONFIGURED:
        return

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    if handler is None:
        handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(format_string or DEFAULT_FORMAT))
    root_logger.addHandler(handler)

    # Records still reach the Python root logger (pytest's caplog hooks there).
    root_logger.propagate = True

    _ROOT_LOGGER_CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    """Return the logger for a prodgraph module.

    The returned logger has no level or handlers of its own; it follows
    whatever the ``prodgraph`` logger is set to.

    Args:
        name: Usually ``__name__`` of the calling module.
    """
    setup_root_logger()
    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    return logger


def set_global_log_level(level: int) -> None:
    """Set the level of the ``prodgraph`` logger and its handlers."""
    setup_root_logger()

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(level)
    for handler in root_logger.handlers:
        handler.setLevel(level)


def configure_cli_logging(verbose: bool = False, quiet: bool = False) -> int:
    """Map the CLI's ``--verbose``/``--quiet`` flags to a log level and apply it.

    ``--verbose`` wins over ``--quiet``. Verbose runs show the search
    statistics logged at DEBUG; quiet runs keep only warnings and errors so
    ``--json`` output stays clean.

    Returns:
        The level that was applied.
    """
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.WARNING
    else:
        level = logging.INFO
    set_global_log_level(level)
    return level


def enable_debug_logging() -> None:
    """Show search statistics and other DEBUG records."""
    set_global_log_level(logging.DEBUG)


def disable_debug_logging() -> None:
    """Return to the INFO default."""
    set_global_log_level(logging.INFO)


def reset_logging() -> None:
    """Drop the ``prodgraph`` handler and level (used between tests)."""
    global _ROOT_LOGGER_CONFIGURED
    _ROOT_LOGGER_CONFIGURED = False

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.handlers.clear()
    root_logger.setLevel(logging.NOTSET)


setup_root_logger()
