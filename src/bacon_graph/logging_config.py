"""
Logging setup for the bacon-graph command.

Build and search progress goes to stderr, leaving stdout to the interactive shell.
"""

import logging
import sys
from rich.logging import RichHandler
from rich.console import Console

PLAIN_FORMAT = "[%(asctime)s] %(levelname)-5s %(name)s: %(message)s"


def _rich_handler(level: int) -> logging.Handler:
    handler = RichHandler(
        console=Console(file=sys.stderr),
        level=level,
        show_path=False,
        rich_tracebacks=True,
        markup=False,  # actor names may contain brackets
        log_time_format="[%H:%M:%S]",
    )
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    return handler


def _plain_handler() -> logging.Handler:
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(PLAIN_FORMAT, datefmt="%H:%M:%S"))
    return handler


def setup_logging(level: str = "INFO", use_rich: bool = True) -> None:
    """
    Replace the root logger's handlers with a single stderr handler.

    Args:
        level: Log level name; unknown names fall back to INFO
        use_rich: Rich's colored output instead of plain timestamped lines
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = _rich_handler(numeric_level) if use_rich else _plain_handler()
    handler.setLevel(numeric_level)
    root_logger.addHandler(handler)

    logging.getLogger(__name__).debug(f"Logging configured: level={level}, rich={use_rich}")
