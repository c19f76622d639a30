"""
Configuration constants for the subnet router setup.

Paths, defaults and wait times used across the tool.
"""

from pathlib import Path


# Defaults for command-line options
DEFAULT_CONTAINER_ID = "100"
DEFAULT_BRIDGE = "vmbr0"

# Jinja2 templates shipped with the package
TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "templates"

# Host paths
LXC_CONFIG_DIR = Path("/etc/pve/lxc")
ETHTOOL_HOOK = Path("/etc/network/if-up.d/ethtool-gro")

# Paths inside the container
STARTUP_SCRIPT = "/usr/local/bin/tailscale-startup.sh"
SERVICE_NAME = "tailscale-subnet.service"
SERVICE_UNIT = f"/etc/systemd/system/{SERVICE_NAME}"
SYSCTL_CONF = "/etc/sysctl.conf"

TAILSCALE_INSTALL_URL = "https://tailscale.com/install.sh"
TAILSCALE_ADMIN_URL = "https://login.tailscale.com/admin/machines"

# Lines appended to the container config for /dev/net/tun access
LXC_TUN_DEVICE_ALLOW = "lxc.cgroup2.devices.allow: c 10:200 rwm"
LXC_TUN_MOUNT_ENTRY = "lxc.mount.entry: /dev/net/tun dev/net/tun none bind,create=file"

SYSCTL_FORWARDING = [
    "net.ipv4.ip_forward = 1",
    "net.ipv6.conf.all.forwarding = 1",
]

# Fixed waits (seconds)
START_WAIT = 5
STOP_WAIT = 5
BOOT_WAIT = 10
TAILSCALED_WAIT = 5
