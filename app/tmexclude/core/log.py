"""Logging setup and debug-mode detection.

Debug mode is switched on by ``--debug`` or by setting ``TMEXCLUDE_DEBUG``
to a truthy value. It traces every skip and match decision to stdout.
"""

import logging
import os

from rich.console import Console
from rich.logging import RichHandler

DEBUG_ENV_VAR = "TMEXCLUDE_DEBUG"

_TRUTHY = frozenset({"1", "true", "yes", "on"})


def debug_enabled_from_env() -> bool:
    """Check whether the debug environment variable is set to a truthy value."""
    return os.environ.get(DEBUG_ENV_VAR, "").strip().lower() in _TRUTHY


def configure_logging(debug: bool = False) -> None:
    """Install a Rich log handler on the ``tmexclude`` logger.

    Args:
        debug: Log at DEBUG level to stdout. Otherwise only warnings and
            errors are logged, to stderr.
    """
    level = logging.DEBUG if debug else logging.WARNING
    handler = RichHandler(
        console=Console(stderr=not debug),
        show_time=debug,
        show_path=debug,
        markup=False,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))

    package_logger = logging.getLogger("tmexclude")
    for existing in list(package_logger.handlers):
        package_logger.removeHandler(existing)
    package_logger.addHandler(handler)
    package_logger.setLevel(level)
    package_logger.propagate = False
