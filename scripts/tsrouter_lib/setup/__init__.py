"""
tsrouter_lib.setup - The ordered setup sequence.

Runs once a RouterConfig has been validated:
- container: root check, container status/start, IP detection, restart
- host: LXC config patch and bridge tuning
- tailscale: install, forwarding, tailscaled, boot-time route service
- summary: plan and completion output

There is no rollback. A command failing after confirmation raises
StepFailed (chained to the CalledProcessError or CommandNotFound) and
leaves whatever was already applied in place. StepFailed carries the LXC
config backup path once step 3 has taken it.
"""

import shlex
import subprocess
import sys
from pathlib import Path
from typing import Optional

from ..common import CommandRunner, info, log, prompt_yes_no, step, warn
from ..config import RouterConfig, SetupOptions, host_bits_set, resolve_detected_target
from ..errors import CommandNotFound, SetupCancelled, StepFailed
from .container import check_root, detect_container_ip, ensure_running, restart_container
from .host import backup_path, lxc_config_path, patch_lxc_config, tune_bridge
from .summary import show_complete, show_plan
from .tailscale import enable_ip_forwarding, enable_tailscaled, install_boot_service, install_tailscale


def confirm(config: RouterConfig, options: SetupOptions) -> bool:
    """Ask before changing anything, unless running unattended."""
    if options.assume_yes or options.dry_run or not sys.stdin.isatty():
        return True
    answer = prompt_yes_no(
        f"Container {config.container_id} will be modified and restarted. Continue?",
        default=True,
    )
    return bool(answer)


def resolve_target(runner: CommandRunner, config: RouterConfig) -> RouterConfig:
    """Fill in the target from the container's address when none was given."""
    if config.target is not None:
        return config

    info("Auto-detecting container IP address...")
    detected = detect_container_ip(runner, config.container_id)
    config = resolve_detected_target(config, detected)
    log(f"Detected container IP: {detected}")
    log(f"Will advertise: {config.target}")
    return config


def run_setup(
    config: RouterConfig,
    options: SetupOptions,
    runner: Optional[CommandRunner] = None,
) -> RouterConfig:
    """
    Configure a container as a Tailscale subnet router.

    Args:
        config: Validated configuration (target may still be unresolved)
        options: Bridge, dry-run, confirmation and template settings
        runner: Command runner (default: one honoring options.dry_run)

    Returns:
        The configuration with its target resolved
    """
    if runner is None:
        runner = CommandRunner(dry_run=options.dry_run)

    ctid = config.container_id

    check_root()
    ensure_running(runner, ctid)
    config = resolve_target(runner, config)

    if host_bits_set(config.target):
        warn(f"{config.target} has host bits set; Tailscale may reject this route")

    show_plan(config, options)
    if not confirm(config, options):
        raise SetupCancelled()

    current = 0
    backup: Optional[Path] = None
    try:
        current = 1
        step(1, "Installing Tailscale in container...")
        install_tailscale(runner, ctid)

        current = 2
        step(2, "Enabling IP forwarding...")
        enable_ip_forwarding(runner, ctid)

        current = 3
        step(3, "Configuring LXC container permissions...")
        conf = lxc_config_path(ctid)
        added = patch_lxc_config(runner, conf)
        backup = backup_path(conf)
        for line in added:
            log(f"Added: {line}")

        current = 4
        step(4, f"Optimizing UDP GRO on host ({options.bridge})...")
        tune_bridge(runner, options.bridge, options.template_dir)

        current = 5
        step(5, "Restarting container to apply changes...")
        restart_container(runner, ctid)

        current = 6
        step(6, "Starting Tailscale with subnet routing...")
        enable_tailscaled(runner, ctid)
        info("Creating persistent Tailscale configuration...")
        install_boot_service(runner, config, options.template_dir)
    except subprocess.CalledProcessError as e:
        raise StepFailed(current, f"exit status {e.returncode}: {shlex.join(e.cmd)}", backup) from e
    except CommandNotFound as e:
        raise StepFailed(current, str(e), backup) from e

    if options.dry_run:
        log("Dry run complete; no changes were made")
    else:
        show_complete(config, options)
    return config


__all__ = ['run_setup', 'resolve_target', 'confirm']
