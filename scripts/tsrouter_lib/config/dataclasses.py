"""
Configuration dataclasses for the subnet router setup.

RouterConfig is built once per invocation from the command line,
validated, and then passed read-only to the setup sequence.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from .constants import DEFAULT_BRIDGE, TEMPLATE_DIR


@dataclass(frozen=True)
class RouterConfig:
    """Validated subnet router configuration."""
    container_id: int
    target: Optional[str] = None  # CIDR to advertise; None until auto-detected
    auto_detect: bool = True


@dataclass(frozen=True)
class SetupOptions:
    """How the setup sequence runs, independent of what it configures."""
    bridge: str = DEFAULT_BRIDGE
    dry_run: bool = False
    assume_yes: bool = False
    template_dir: Path = field(default=TEMPLATE_DIR)
