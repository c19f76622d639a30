"""
Command execution utilities.

Wraps subprocess and filesystem writes so the setup sequence can be
previewed with --dry-run. Read-only queries always execute; anything
that changes the host or the container is only printed in dry-run mode.
"""

import shlex
import shutil
import subprocess
import time
from pathlib import Path
from typing import Callable, Optional

from ..errors import CommandNotFound
from .colors import Colors


class CommandRunner:
    """Runs host commands and file writes, or prints them in dry-run mode."""

    def __init__(self, dry_run: bool = False, sleep: Callable[[float], None] = time.sleep):
        self.dry_run = dry_run
        self._sleep = sleep

    def _announce(self, what: str) -> None:
        print(f"{Colors.DIM}[dry-run]{Colors.NC} {what}")

    def query(self, cmd: list[str]) -> subprocess.CompletedProcess:
        """
        Run a read-only command and capture its output.

        Executes even in dry-run mode. Never raises on a non-zero exit
        status; callers inspect returncode.
        """
        try:
            return subprocess.run(cmd, capture_output=True, text=True)
        except FileNotFoundError as e:
            raise CommandNotFound(cmd[0]) from e

    def run(
        self,
        cmd: list[str],
        input: Optional[str] = None,
        check: bool = True,
        capture: bool = False,
    ) -> subprocess.CompletedProcess:
        """
        Run a command that changes system state.

        Args:
            cmd: Command and arguments
            input: Optional text fed to the command's stdin
            check: Raise CalledProcessError on a non-zero exit status
            capture: Capture stdout/stderr instead of passing them through

        Returns:
            The completed process (a synthetic success in dry-run mode)

        Raises:
            CommandNotFound: the executable is not installed
        """
        if self.dry_run:
            self._announce(shlex.join(cmd))
            return subprocess.CompletedProcess(cmd, 0, "", "")

        try:
            return subprocess.run(
                cmd,
                input=input,
                text=True,
                capture_output=capture,
                check=check,
            )
        except FileNotFoundError as e:
            raise CommandNotFound(cmd[0]) from e

    def wait(self, seconds: float) -> None:
        """Fixed-duration wait for services to come up."""
        if self.dry_run:
            self._announce(f"sleep {seconds}")
            return
        self._sleep(seconds)

    def copy_file(self, src: Path, dst: Path) -> None:
        """Copy a file, preserving metadata."""
        if self.dry_run:
            self._announce(f"cp {src} {dst}")
            return
        shutil.copy2(src, dst)

    def append_line(self, path: Path, line: str) -> None:
        """Append a single line to a text file."""
        if self.dry_run:
            self._announce(f"append to {path}: {line}")
            return
        with open(path, 'a') as f:
            f.write(line + "\n")

    def write_file(self, path: Path, content: str, mode: Optional[int] = None) -> None:
        """Write a text file, creating parent directories as needed."""
        if self.dry_run:
            self._announce(f"write {path}")
            return
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content)
        if mode is not None:
            path.chmod(mode)
