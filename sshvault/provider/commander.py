"""Run external vault executables and turn failures into ExecutionFailedError."""

from __future__ import annotations

import logging
import subprocess

from sshvault.provider.errors import ExecutionFailedError

logger = logging.getLogger(__name__)


class Commander:
    """Thin wrapper over ``subprocess.run`` used by every provider.

    Providers never spawn processes directly, so tests can swap in a fake
    commander that answers known command lines with canned output.
    """

    def run(self, command: str, *args: str) -> bytes:
        """Run ``command args...`` and return its stdout.

        Raises ExecutionFailedError on non-zero exit or if the program
        cannot be launched. No retries, no timeout.
        """
        cmd = [command, *args]
        # Only the subcommand is logged: later arguments may carry key material.
        logger.debug("Running %s %s", command, args[0] if args else "")

        try:
            proc = subprocess.run(cmd, capture_output=True)
        except OSError as e:
            raise ExecutionFailedError(" ".join(cmd), f"{e}: ") from e

        if proc.returncode != 0:
            stderr = (proc.stderr or b"").decode("utf-8", errors="replace")
            raise ExecutionFailedError(
                " ".join(cmd),
                f"exit status {proc.returncode}: {stderr}",
                stdout=proc.stdout or b"",
                stderr=stderr,
            )

        return proc.stdout or b""
