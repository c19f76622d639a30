"""
Template rendering for files installed on the host and in the container.
"""

from pathlib import Path

from jinja2 import Environment, FileSystemLoader, StrictUndefined

from ..common import error


def tailscale_up_flags(target: str) -> str:
    """Flags passed to `tailscale up` for a subnet router advertising target."""
    return f"--advertise-routes={target} --accept-routes --advertise-exit-node=false"


def make_environment(template_dir: Path) -> Environment:
    """Create the Jinja2 environment for a template directory."""
    return Environment(
        loader=FileSystemLoader(str(template_dir)),
        keep_trailing_newline=True,
        trim_blocks=True,
        lstrip_blocks=True,
        undefined=StrictUndefined,
    )


def render_template(template_dir: Path, name: str, **context) -> str:
    """Render a single template with the given context."""
    env = make_environment(template_dir)
    try:
        return env.get_template(name).render(**context)
    except Exception as e:
        error(f"Failed to render {name}: {e}")
        raise
