"""
Command-line entry point for the subnet router setup.

Translates errors into a single message and an exit status:
0 on success or --help, 1 on any failure.
"""

import subprocess
import sys
from typing import Optional, Sequence

from .args import build_config, parse_args
from .common import error, info, warn
from .config import normalize_target
from .errors import HelpRequested, RouterSetupError, StepFailed, UsageError
from .setup import run_setup


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point."""
    try:
        args = parse_args(argv)
    except HelpRequested as e:
        print(e.usage)
        return 0
    except UsageError as e:
        error(str(e))
        print("Use --help for usage information")
        return 1

    try:
        config, options = build_config(args)
        if args.subnet and normalize_target(args.subnet) != args.subnet:
            info(f"Converting single IP address to /32 CIDR notation: {args.subnet} -> {config.target}")
        run_setup(config, options)
    except StepFailed as e:
        error(str(e))
        if e.backup is not None:
            warn(f"Setup is partially applied; LXC config backup: {e.backup}")
        else:
            warn("Setup is partially applied; the LXC config was not modified")
        return 1
    except RouterSetupError as e:
        error(str(e))
        return 1
    except subprocess.CalledProcessError as e:
        error(f"Command failed with exit status {e.returncode}: {' '.join(e.cmd)}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
