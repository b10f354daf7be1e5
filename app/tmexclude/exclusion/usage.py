"""Disk usage measurement for excluded directories."""

import logging

from tmexclude.utils.shell import run_command

logger = logging.getLogger(__name__)


def measure_disk_usage(path: str) -> int | None:
    """Measure the on-disk size of a directory tree with ``du -sk``.

    Measurement is best effort: any failure yields None ("size unknown").
    ``du`` may exit non-zero after printing a total when some entries are
    unreadable; the total is still used.

    Args:
        path: Directory to measure.

    Returns:
        Size in bytes, or None if it could not be determined.
    """
    try:
        result = run_command(["du", "-sk", path])
    except (OSError, UnicodeError) as e:
        logger.warning("Cannot measure disk usage of %s: %s", path, e)
        return None

    fields = result.stdout.split(maxsplit=1)
    if not fields:
        logger.warning("Cannot measure disk usage of %s: %s", path, result.error_text)
        return None

    try:
        kibibytes = int(fields[0])
    except ValueError:
        logger.warning("Unexpected du output for %s: %r", path, result.stdout.strip())
        return None

    if not result.success:
        logger.debug("du reported errors for %s: %s", path, result.stderr.strip())
    return kibibytes * 1024
