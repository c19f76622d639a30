"""
Host-side changes: LXC config permissions and bridge tuning.
"""

from pathlib import Path
from typing import Optional

from ..common import CommandRunner, log, warn
from ..config import constants
from ..errors import CommandNotFound
from .render import render_template


def lxc_config_path(container_id: int, config_dir: Optional[Path] = None) -> Path:
    """Path of a container's Proxmox config file."""
    return (config_dir or constants.LXC_CONFIG_DIR) / f"{container_id}.conf"


def backup_path(config_path: Path) -> Path:
    return config_path.with_name(config_path.name + ".backup")


def patch_lxc_config(runner: CommandRunner, config_path: Path) -> list[str]:
    """
    Back up the container config and allow /dev/net/tun.

    Lines already present are not added again.

    Returns:
        The lines that were appended
    """
    runner.copy_file(config_path, backup_path(config_path))

    existing = config_path.read_text()
    added = []

    if constants.LXC_TUN_DEVICE_ALLOW not in existing:
        runner.append_line(config_path, constants.LXC_TUN_DEVICE_ALLOW)
        added.append(constants.LXC_TUN_DEVICE_ALLOW)

    # Any existing /dev/net/tun mount entry counts, whatever its options
    if "lxc.mount.entry: /dev/net/tun" not in existing:
        runner.append_line(config_path, constants.LXC_TUN_MOUNT_ENTRY)
        added.append(constants.LXC_TUN_MOUNT_ENTRY)

    return added


def tune_bridge(
    runner: CommandRunner,
    bridge: str,
    template_dir: Path,
    hook_path: Optional[Path] = None,
) -> bool:
    """
    Enable UDP GRO forwarding on the host bridge and persist it.

    The ethtool call may fail on older kernels or be missing entirely;
    that only warns. The if-up hook is written once and never
    overwritten.

    Returns:
        True if the if-up hook was created
    """
    hook_path = hook_path or constants.ETHTOOL_HOOK

    try:
        result = runner.run(
            ["ethtool", "-K", bridge, "rx-udp-gro-forwarding", "on"],
            check=False,
            capture=True,
        )
    except CommandNotFound:
        warn("ethtool is not installed; skipping UDP GRO optimization")
    else:
        if result.returncode != 0:
            warn("UDP GRO optimization not available on this kernel")

    if hook_path.exists():
        return False

    content = render_template(template_dir, "ethtool-gro.sh.j2", bridge=bridge)
    runner.write_file(hook_path, content, mode=0o755)
    log("Created persistent UDP GRO configuration")
    return True
