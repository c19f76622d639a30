#!/usr/bin/env python3
"""
setup-tailscale-subnet-router.py - Configure a Proxmox LXC container as a Tailscale subnet router

Installs Tailscale in the container, enables IP forwarding, allows
/dev/net/tun in the container config, tunes the host bridge, restarts the
container and installs a boot-time service that re-advertises the subnet.

Usage:
    setup-tailscale-subnet-router.py                            # container 100, auto-detect IP
    setup-tailscale-subnet-router.py -c 102 -s 192.168.1.0/24   # explicit container and subnet
    setup-tailscale-subnet-router.py --dry-run                  # show what would change
"""

import sys

from tsrouter_lib.cli import main


if __name__ == "__main__":
    sys.exit(main())
