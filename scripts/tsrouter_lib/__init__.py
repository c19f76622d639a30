"""
tsrouter_lib - Library for the Tailscale subnet router setup tool

This package contains the components used to turn a Proxmox VE LXC
container into a Tailscale subnet router: argument parsing, target
validation, and the ordered setup sequence run against the host.
"""

__version__ = "1.0.0"
