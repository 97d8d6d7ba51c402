"""CommandRunner: run external toolchain commands with inherited streams."""

import subprocess
from typing import List, Sequence


class CommandFailedError(RuntimeError):
    """An external command exited non-zero or could not be started."""

    def __init__(self, cmd: Sequence[str], returncode: int, reason: str = ""):
        self.cmd = list(cmd)
        self.returncode = returncode
        detail = reason or f"exit code {returncode}"
        super().__init__(f"Command failed ({detail}): {' '.join(self.cmd)}")


class CommandRunner:
    """Runs commands to completion, blocking, with no capture, retry, or timeout."""

    def run(self, cmd: List[str], cwd: str, check: bool = True) -> subprocess.CompletedProcess:
        """Run *cmd* in *cwd* and wait for it to exit.

        Raises:
            CommandFailedError: If the executable is missing, or if *check*
                is set and the command exits non-zero.
        """
        try:
            result = subprocess.run(cmd, cwd=cwd)
        except FileNotFoundError:
            raise CommandFailedError(cmd, 127, reason=f"{cmd[0]} not found")
        if check and result.returncode != 0:
            raise CommandFailedError(cmd, result.returncode)
        return result
