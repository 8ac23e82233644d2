"""
Logging configuration for Capture Inventory.

Log records go to stderr through rich so that ``--format json`` output on
stdout stays machine-readable. Only the ``capture_inventory`` namespace
follows the verbosity flags; libraries that log on their own (rich's markdown
parser, for instance) are held at WARNING so ``-v`` shows derivation steps
rather than third-party chatter.
"""

import logging
from pathlib import Path
from typing import Optional, Union

from rich.console import Console
from rich.logging import RichHandler

ROOT_LOGGER = "capture_inventory"

THIRD_PARTY_LOGGERS = ("markdown_it", "asyncio", "urllib3")

FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _level_for(verbose: bool, quiet: bool) -> int:
    if quiet:
        return logging.ERROR
    if verbose:
        return logging.DEBUG
    return logging.WARNING


def setup_logging(
    verbose: bool = False,
    quiet: bool = False,
    log_file: Optional[Union[str, Path]] = None,
) -> logging.Logger:
    """
    Route capture_inventory logs to a rich stderr handler.

    Args:
        verbose: DEBUG for capture_inventory loggers (quiet wins if both are set)
        quiet: Only ERROR and above
        log_file: Optional file that also receives every capture_inventory record

    Returns:
        The capture_inventory root logger
    """
    level = _level_for(verbose, quiet)

    # Evidence text (names, URLs, style values) can contain brackets, so no markup.
    handlers: list[logging.Handler] = [
        RichHandler(
            console=Console(stderr=True),
            rich_tracebacks=True,
            tracebacks_show_locals=verbose,
            markup=False,
            show_time=verbose,
            show_path=verbose,
        )
    ]

    if log_file:
        file_handler = logging.FileHandler(Path(log_file).expanduser(), mode="a", encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        handlers.append(file_handler)

    # force=True: the CLI callback runs once per invocation, possibly in one process
    logging.basicConfig(
        level=logging.WARNING, format="%(message)s", datefmt="[%X]", handlers=handlers, force=True
    )

    for name in THIRD_PARTY_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))

    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(level)
    logger.debug("Logging at %s", logging.getLevelName(level))

    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Get a logger under the capture_inventory namespace.

    Args:
        name: Module name (e.g. ``__name__``). Names outside the namespace are
              nested under it; None returns the namespace root.
    """
    if name is None:
        return logging.getLogger(ROOT_LOGGER)

    if name != ROOT_LOGGER and not name.startswith(ROOT_LOGGER + "."):
        name = f"{ROOT_LOGGER}.{name}"

    return logging.getLogger(name)
