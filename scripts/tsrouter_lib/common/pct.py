"""
Proxmox container runtime utilities.

Thin helpers around the `pct` CLI: status, start, stop, exec, and
writing files inside a container.
"""

import re
import subprocess
from typing import Optional

from .runner import CommandRunner


def pct_status(runner: CommandRunner, container_id: int) -> Optional[str]:
    """
    Get the status of a container.

    Args:
        runner: Command runner
        container_id: Proxmox container ID (e.g., 100)

    Returns:
        Status word reported by pct (e.g. "running", "stopped"),
        or None if the container does not exist.
    """
    result = runner.query(["pct", "status", str(container_id)])
    if result.returncode != 0:
        return None

    match = re.search(r"status:\s*(\w+)", result.stdout)
    if not match:
        return None
    return match.group(1)


def pct_start(runner: CommandRunner, container_id: int) -> None:
    """Start a container."""
    runner.run(["pct", "start", str(container_id)])


def pct_stop(runner: CommandRunner, container_id: int) -> None:
    """Stop a container."""
    runner.run(["pct", "stop", str(container_id)])


def pct_exec(
    runner: CommandRunner,
    container_id: int,
    command: list[str],
    read_only: bool = False,
) -> subprocess.CompletedProcess:
    """
    Run a command inside a container.

    Args:
        runner: Command runner
        container_id: Proxmox container ID
        command: Command and arguments to run inside the container
        read_only: The command only inspects state; run it even in
            dry-run mode and capture its output

    Returns:
        The completed pct process
    """
    cmd = ["pct", "exec", str(container_id), "--"] + command
    if read_only:
        return runner.query(cmd)
    return runner.run(cmd)


def pct_write_file(
    runner: CommandRunner,
    container_id: int,
    path: str,
    content: str,
    executable: bool = False,
) -> None:
    """
    Write a file inside a container by piping content through tee.

    Args:
        runner: Command runner
        container_id: Proxmox container ID
        path: Absolute path inside the container
        content: File contents
        executable: chmod +x the file after writing
    """
    runner.run(
        ["pct", "exec", str(container_id), "--", "tee", path],
        input=content,
        capture=True,
    )
    if executable:
        runner.run(["pct", "exec", str(container_id), "--", "chmod", "+x", path])
