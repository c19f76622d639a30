"""
tsrouter_lib.common - Shared utilities

This module provides:
- colors: ANSI color codes and logging functions
- runner: subprocess wrapper with dry-run support
- pct: Proxmox container runtime (pct) helpers
- prompts: Interactive confirmation prompts
"""

from .colors import Colors, log, warn, error, info, step
from .runner import CommandRunner
from .pct import (
    pct_status,
    pct_start,
    pct_stop,
    pct_exec,
    pct_write_file,
)
from .prompts import prompt_yes_no

__all__ = [
    'Colors', 'log', 'warn', 'error', 'info', 'step',
    'CommandRunner',
    'pct_status', 'pct_start', 'pct_stop', 'pct_exec', 'pct_write_file',
    'prompt_yes_no',
]
