"""
tsrouter_lib.config - Configuration dataclasses and validation.

This package contains:
- constants: Paths, defaults and wait times
- dataclasses: RouterConfig and SetupOptions
- validation: Container ID and IPv4 CIDR validation
"""

from .constants import (
    DEFAULT_CONTAINER_ID,
    DEFAULT_BRIDGE,
    TEMPLATE_DIR,
    LXC_CONFIG_DIR,
    ETHTOOL_HOOK,
)

from .dataclasses import (
    RouterConfig,
    SetupOptions,
)

from .validation import (
    validate_container_id,
    normalize_target,
    validate_cidr,
    parse_cidr,
    host_bits_set,
    validate_config,
    resolve_detected_target,
)

__all__ = [
    # Constants
    'DEFAULT_CONTAINER_ID',
    'DEFAULT_BRIDGE',
    'TEMPLATE_DIR',
    'LXC_CONFIG_DIR',
    'ETHTOOL_HOOK',
    # Dataclasses
    'RouterConfig',
    'SetupOptions',
    # Validation
    'validate_container_id',
    'normalize_target',
    'validate_cidr',
    'parse_cidr',
    'host_bits_set',
    'validate_config',
    'resolve_detected_target',
]
