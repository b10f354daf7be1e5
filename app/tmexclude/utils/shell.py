"""Subprocess helpers for the external tools tmexclude drives.

``tmutil`` and ``du`` are invoked through :func:`run_command`, which
captures their output into an immutable :class:`CommandResult`.
"""

import logging
import shlex
import shutil
import subprocess
from dataclasses import dataclass

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CommandResult:
    """Captured output of a finished command.

    Attributes:
        stdout: Standard output from the command.
        stderr: Standard error from the command.
        returncode: Exit code of the command.
    """

    stdout: str
    stderr: str
    returncode: int

    @property
    def success(self) -> bool:
        """Check if command exited with status 0."""
        return self.returncode == 0

    @property
    def error_text(self) -> str:
        """Best available failure description (stderr, then stdout)."""
        return self.stderr.strip() or self.stdout.strip() or f"exit status {self.returncode}"


def run_command(args: list[str], *, timeout: float | None = None) -> CommandResult:
    """Run a command to completion and capture its output.

    No timeout is applied unless one is given; a hung tool blocks the
    caller. Output is decoded with ``surrogateescape`` because tools echo
    paths back, and path names need not be valid UTF-8.

    Args:
        args: Command and arguments to execute.
        timeout: Maximum time in seconds to wait, or None to wait forever.

    Returns:
        CommandResult with stdout, stderr, and returncode.

    Raises:
        subprocess.TimeoutExpired: If command exceeds timeout.
        FileNotFoundError: If command executable is not found.
    """
    logger.debug("Running: %s", shlex.join(args))
    result = subprocess.run(
        args,
        capture_output=True,
        text=True,
        errors="surrogateescape",
        check=False,
        timeout=timeout,
    )
    return CommandResult(
        stdout=result.stdout,
        stderr=result.stderr,
        returncode=result.returncode,
    )


def command_exists(name: str) -> bool:
    """Check if a command exists in the system PATH."""
    return shutil.which(name) is not None
