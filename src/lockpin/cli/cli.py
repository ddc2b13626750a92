import logging
import os
from pathlib import Path

import click

from lockpin.cli.output import machine_output, user_output
from lockpin.core.context import LockpinContext, create_context
from lockpin.core.converter import convert

logger = logging.getLogger(__name__)

# Enable debug logging if LOCKPIN_DEBUG environment variable is set
if os.getenv("LOCKPIN_DEBUG"):
    logging.basicConfig(level=logging.DEBUG, format="[DEBUG %(name)s:%(lineno)d] %(message)s")

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])  # terse help flags


@click.command(name="lockpin", context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="lockpin")
@click.argument("manifest", type=click.Path(path_type=Path))
@click.pass_context
def cli(ctx: click.Context, manifest: Path) -> None:
    """Print the packages of a TOML lock file as pinned requirements.

    Reads the [[package]] tables of MANIFEST and prints one name==version
    line per package, in file order.
    """
    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        ctx.obj = create_context()
    lockpin_ctx: LockpinContext = ctx.obj

    try:
        requirements = convert(manifest, reader=lockpin_ctx.manifest_reader)
    except (OSError, ValueError) as e:
        logger.debug("Conversion failed: %r", e)
        user_output(click.style("Error: ", fg="red") + str(e))
        raise SystemExit(1) from None

    machine_output(requirements)


def main() -> None:
    """CLI entry point used by the `lockpin` console script."""
    cli()
