"""
Validation functions for the subnet router configuration.

Container ID and IPv4 CIDR checks. Targets are validated by shape and
range only and returned as given: leading zeros and host bits are left
alone, a bare address just gains a /32 suffix.
"""

import ipaddress
import re
from dataclasses import replace
from typing import Optional

from ..errors import (
    InvalidFormat,
    NonNumericContainerId,
    OctetOutOfRange,
    PrefixOutOfRange,
    UnresolvedTarget,
)
from .dataclasses import RouterConfig


CONTAINER_ID_RE = re.compile(r'^[0-9]+$')
BARE_IPV4_RE = re.compile(r'^([0-9]{1,3}\.){3}[0-9]{1,3}$')
IPV4_CIDR_RE = re.compile(r'^([0-9]{1,3}\.){3}[0-9]{1,3}/[0-9]{1,2}$')


def validate_container_id(value: str) -> int:
    """Validate a container ID string and return it as an integer."""
    if not CONTAINER_ID_RE.fullmatch(value):
        raise NonNumericContainerId(value)
    return int(value)


def normalize_target(value: str) -> str:
    """Append /32 to a bare IPv4 address; return anything else unchanged."""
    if BARE_IPV4_RE.fullmatch(value):
        return f"{value}/32"
    return value


def parse_cidr(cidr: str) -> tuple[str, int]:
    """Parse CIDR notation into address and prefix."""
    addr, prefix = cidr.rsplit("/", 1)
    return addr, int(prefix)


def validate_cidr(value: str) -> str:
    """
    Validate an IPv4 subnet or address.

    Args:
        value: CIDR (e.g. "192.168.1.0/24") or bare IPv4 address

    Returns:
        The target in CIDR form

    Raises:
        InvalidFormat: not dotted-quad/prefix shaped
        OctetOutOfRange: an octet is above 255
        PrefixOutOfRange: the prefix length is above 32
    """
    cidr = normalize_target(value)

    if not IPV4_CIDR_RE.fullmatch(cidr):
        raise InvalidFormat(value)

    addr, prefix = cidr.split("/")

    for octet in addr.split("."):
        if not 0 <= int(octet) <= 255:
            raise OctetOutOfRange(cidr, octet)

    if not 0 <= int(prefix) <= 32:
        raise PrefixOutOfRange(cidr, prefix)

    return cidr


def host_bits_set(cidr: str) -> bool:
    """
    Check whether a validated CIDR has bits set below its prefix.

    Tailscale refuses to advertise such routes (e.g. 192.168.1.5/24).
    """
    addr, prefix = parse_cidr(cidr)
    packed = 0
    for octet in addr.split("."):
        packed = (packed << 8) | int(octet)

    address = ipaddress.IPv4Address(packed)
    network = ipaddress.IPv4Network((address, prefix), strict=False)
    return network.network_address != address


def validate_config(container_id: str, target: Optional[str], auto_detect: bool) -> RouterConfig:
    """
    Build a validated RouterConfig from raw command-line values.

    Args:
        container_id: Raw container ID string
        target: Raw subnet/IP string, or None/"" when not given
        auto_detect: True when no subnet/IP option was supplied

    Raises:
        ValidationError subclass describing the first problem found
    """
    ctid = validate_container_id(container_id)

    if target:
        return RouterConfig(container_id=ctid, target=validate_cidr(target), auto_detect=False)

    if not auto_detect:
        raise UnresolvedTarget("No subnet specified and auto-detection disabled")

    return RouterConfig(container_id=ctid, target=None, auto_detect=True)


def resolve_detected_target(config: RouterConfig, detected_ip: Optional[str]) -> RouterConfig:
    """Return a copy of config advertising the detected container address."""
    if not detected_ip:
        raise UnresolvedTarget(
            "Could not auto-detect container IP address",
            details="specify a subnet manually using --subnet",
        )
    return replace(config, target=validate_cidr(detected_ip))
