"""
Tailscale installation and boot-time route persistence inside the container.
"""

from pathlib import Path

from ..common import CommandRunner, pct_exec, pct_write_file
from ..config import RouterConfig, constants
from .render import render_template, tailscale_up_flags


def install_tailscale(runner: CommandRunner, container_id: int) -> None:
    """Run the upstream install script inside the container."""
    pct_exec(runner, container_id, [
        "bash", "-c", f"curl -fsSL {constants.TAILSCALE_INSTALL_URL} | sh",
    ])


def enable_ip_forwarding(runner: CommandRunner, container_id: int) -> None:
    """Persist IPv4/IPv6 forwarding in sysctl.conf and load it."""
    for setting in constants.SYSCTL_FORWARDING:
        pct_exec(runner, container_id, [
            "bash", "-c", f"echo '{setting}' | tee -a {constants.SYSCTL_CONF}",
        ])
    pct_exec(runner, container_id, ["sysctl", "-p"])


def enable_tailscaled(runner: CommandRunner, container_id: int) -> None:
    """Enable tailscaled at boot and start it now."""
    pct_exec(runner, container_id, ["systemctl", "enable", "tailscaled"])
    pct_exec(runner, container_id, ["systemctl", "start", "tailscaled"])
    runner.wait(constants.TAILSCALED_WAIT)


def install_boot_service(runner: CommandRunner, config: RouterConfig, template_dir: Path) -> None:
    """
    Install the startup script and oneshot unit that re-advertise routes.

    The script only runs `tailscale up` once the client reports a
    Running backend, so it never triggers an interactive login.
    """
    ctid = config.container_id

    script = render_template(
        template_dir,
        "tailscale-startup.sh.j2",
        container_id=ctid,
        network_wait=constants.BOOT_WAIT,
        up_flags=tailscale_up_flags(config.target),
    )
    pct_write_file(runner, ctid, constants.STARTUP_SCRIPT, script, executable=True)

    unit = render_template(
        template_dir,
        "tailscale-subnet.service.j2",
        startup_script=constants.STARTUP_SCRIPT,
    )
    pct_write_file(runner, ctid, constants.SERVICE_UNIT, unit)

    pct_exec(runner, ctid, ["systemctl", "daemon-reload"])
    pct_exec(runner, ctid, ["systemctl", "enable", constants.SERVICE_NAME])
