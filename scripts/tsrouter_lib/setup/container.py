"""
Container preflight, address detection and restart.
"""

import os
import re
from typing import Optional

from ..common import CommandRunner, info, log, pct_exec, pct_start, pct_status, pct_stop
from ..config import constants
from ..errors import ContainerNotFound, NotRoot


INET_RE = re.compile(r'inet\s+(\d+(?:\.\d+){3})')


def check_root() -> None:
    """Raise NotRoot unless running with effective UID 0."""
    if os.geteuid() != 0:
        raise NotRoot()


def ensure_running(runner: CommandRunner, container_id: int) -> None:
    """
    Make sure the container exists and is running.

    Starts a stopped container and waits for it to boot.
    """
    status = pct_status(runner, container_id)
    if status is None:
        raise ContainerNotFound(container_id)

    if status != "running":
        info(f"Starting container {container_id}...")
        pct_start(runner, container_id)
        runner.wait(constants.START_WAIT)


def parse_global_ipv4(output: str) -> Optional[str]:
    """Return the first IPv4 address in `ip -4 addr show` output."""
    match = INET_RE.search(output)
    if not match:
        return None
    return match.group(1)


def detect_container_ip(runner: CommandRunner, container_id: int) -> Optional[str]:
    """
    Detect the container's primary global-scope IPv4 address.

    Returns:
        Bare IPv4 address, or None if nothing was found
    """
    result = pct_exec(
        runner,
        container_id,
        ["ip", "-4", "addr", "show", "scope", "global"],
        read_only=True,
    )
    if result.returncode != 0:
        return None
    return parse_global_ipv4(result.stdout)


def restart_container(runner: CommandRunner, container_id: int) -> None:
    """Stop and start the container so config changes take effect."""
    log(f"Stopping container {container_id}...")
    pct_stop(runner, container_id)
    runner.wait(constants.STOP_WAIT)
    log(f"Starting container {container_id}...")
    pct_start(runner, container_id)
    runner.wait(constants.BOOT_WAIT)
