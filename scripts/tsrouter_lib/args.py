"""
Command-line argument parsing for the subnet router setup.

Parsing never exits the process. Problems are raised as UsageError
subclasses and --help is raised as HelpRequested, leaving exit codes to
the CLI entry point.
"""

import argparse
from pathlib import Path
from typing import Optional, Sequence

from .config import (
    DEFAULT_BRIDGE,
    DEFAULT_CONTAINER_ID,
    TEMPLATE_DIR,
    RouterConfig,
    SetupOptions,
    validate_config,
)
from .errors import HelpRequested, MissingOptionValue, UnknownOption


PROG = "setup-tailscale-subnet-router"

DESCRIPTION = "Setup Tailscale subnet routing in a Proxmox LXC container."

EPILOG = f"""\
subnet forms:
  Use CIDR notation for subnets: 192.168.1.0/24
  Use a single IP for a specific host: 192.168.1.10 (auto-converts to /32)
  If not specified, the container's IP address is auto-detected

examples:
  {PROG}                                        # container 100, auto-detect IP
  {PROG} --container 102                        # container 102, auto-detect IP
  {PROG} --subnet 192.168.1.0/24                # advertise an entire /24
  {PROG} --subnet 192.168.129.59                # advertise a single IP as /32
  {PROG} --container 102 --subnet 192.168.1.10  # custom container, single IP
  {PROG} -c 102 -s 192.168.1.0/24               # short form flags
"""


class _HelpAction(argparse.Action):
    """Stop parsing as soon as --help is seen."""

    def __init__(self, option_strings, dest=argparse.SUPPRESS, default=argparse.SUPPRESS, help=None):
        super().__init__(option_strings=option_strings, dest=dest, default=default, nargs=0, help=help)

    def __call__(self, parser, namespace, values, option_string=None):
        raise HelpRequested(parser.format_help())


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog=PROG,
        description=DESCRIPTION,
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        add_help=False,
        allow_abbrev=False,
        exit_on_error=False,
    )
    parser.add_argument("-c", "--container", metavar="ID", default=DEFAULT_CONTAINER_ID,
                        help=f"LXC container ID to configure (default: {DEFAULT_CONTAINER_ID})")
    parser.add_argument("-s", "--subnet", "-i", "--ipaddr", dest="subnet", metavar="CIDR", default=None,
                        help="Subnet or IP to advertise (default: auto-detect container IP)")
    parser.add_argument("-b", "--bridge", metavar="NAME", default=DEFAULT_BRIDGE,
                        help=f"Host bridge to tune for UDP GRO forwarding (default: {DEFAULT_BRIDGE})")
    parser.add_argument("-n", "--dry-run", action="store_true",
                        help="Print the commands that would change the system instead of running them")
    parser.add_argument("-y", "--yes", action="store_true",
                        help="Do not ask for confirmation before making changes")
    parser.add_argument("--template-dir", type=Path, default=TEMPLATE_DIR, metavar="DIR",
                        help="Directory containing the Jinja2 templates")
    parser.add_argument("-h", "--help", action=_HelpAction,
                        help="Show this help message")
    return parser


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """
    Parse command-line tokens.

    Args:
        argv: Tokens to parse (default: sys.argv[1:])

    Returns:
        Namespace with container, subnet, bridge, dry_run, yes, template_dir

    Raises:
        HelpRequested: --help was given
        UnknownOption: a token is not a recognized option
        MissingOptionValue: a value option had no value
    """
    parser = build_parser()

    try:
        args, extras = parser.parse_known_args(argv)
    except argparse.ArgumentError as e:
        raise MissingOptionValue(e.argument_name or "option") from e

    if extras:
        raise UnknownOption(extras[0])

    return args


def build_config(args: argparse.Namespace) -> tuple[RouterConfig, SetupOptions]:
    """Validate parsed arguments into a RouterConfig and SetupOptions."""
    config = validate_config(
        container_id=args.container,
        target=args.subnet,
        auto_detect=args.subnet is None,
    )
    options = SetupOptions(
        bridge=args.bridge,
        dry_run=args.dry_run,
        assume_yes=args.yes,
        template_dir=args.template_dir,
    )
    return config, options
