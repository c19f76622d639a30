"""
Console summaries shown before and after the setup sequence.
"""

from rich.console import Console
from rich.table import Table

from ..config import RouterConfig, SetupOptions, constants
from .host import backup_path, lxc_config_path
from .render import tailscale_up_flags


console = Console()


def build_plan_table(config: RouterConfig, options: SetupOptions) -> Table:
    """Table describing what the setup is about to do."""
    table = Table(title=f"Tailscale Subnet Router Setup for LXC Container {config.container_id}",
                  show_header=False)
    table.add_column("Setting", style="bold")
    table.add_column("Value")

    source = "auto-detected" if config.auto_detect else "command line"
    table.add_row("Container ID", str(config.container_id))
    table.add_row("Subnet", f"{config.target} ({source})")
    table.add_row("Host bridge", options.bridge)
    table.add_row("Config backup", str(backup_path(lxc_config_path(config.container_id))))
    if options.dry_run:
        table.add_row("Mode", "[yellow]dry run - no changes will be made[/yellow]")
    return table


def show_plan(config: RouterConfig, options: SetupOptions) -> None:
    console.print()
    console.print(build_plan_table(config, options))
    console.print()


def show_complete(config: RouterConfig, options: SetupOptions) -> None:
    """Print the completion summary and the manual authentication steps."""
    ctid = config.container_id

    console.print()
    console.print("[bold green]=== Setup Complete! ===[/bold green]")
    console.print()
    console.print(f"Container ID: {ctid}")
    console.print(f"Advertised subnet: {config.target}")
    console.print(f"Configuration backup: {backup_path(lxc_config_path(ctid))}")
    console.print()
    console.print("Tailscale has been configured to:")
    console.print("  [green]✓[/green] Start automatically on container boot")
    console.print("  [green]✓[/green] Maintain subnet routing configuration after reboots")
    console.print(f"  [green]✓[/green] Advertise subnet: {config.target}")
    console.print("  [green]✓[/green] Ready for manual authentication")
    console.print()
    console.print("Next steps:")
    console.print(f"  1. SSH into the container: pct enter {ctid}")
    console.print(f"  2. Run: tailscale up {tailscale_up_flags(config.target)}")
    console.print("  3. Follow the authentication URL that appears")
    console.print(f"  4. Or go to {constants.TAILSCALE_ADMIN_URL} to authenticate")
    console.print(f"  5. Approve the subnet routes for {config.target}")
    console.print("  6. Test connectivity from another device on your Tailscale network")
    console.print()
    console.print("After authentication, the container will keep its subnet routing after reboots.")
    console.print(f"UDP GRO forwarding has been optimized on {options.bridge}.")
