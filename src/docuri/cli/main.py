"""
docuri CLI - Main entry point.

This module registers all CLI commands. Each command is implemented
in its own module under cli/commands/.
"""

import logging
from pathlib import Path
from typing import Optional

import click

from ..config import load_settings
from ..core.errors import ConfigError
from ..core.platform import PLATFORM_CHOICES, resolve_platform
from .commands import compare, normalize, parse, paths, read
from .utils import fail


@click.group()
@click.version_option(package_name="docuri")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.option(
    "--platform",
    "platform_choice",
    type=click.Choice(PLATFORM_CHOICES),
    default=None,
    help="Path convention to use (default: settings file, then host)",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Settings file (default: .docuri/config.yaml)",
)
@click.pass_context
def main(ctx: click.Context, verbose: bool, platform_choice: Optional[str], config_path: Optional[Path]):
    """docuri: Document URI toolkit.

    Parse, normalize and compare document URIs, map them to filesystem
    paths, and load their content with a 1 MiB cap.

    \b
    Quick Start:
      docuri parse "file:///home/user/my%20doc.txt"
      docuri normalize file://localhost/home/user/
      docuri contains file:///home/user file:///home/user/doc.txt
      docuri read file:///home/user/doc.txt
    """
    try:
        settings = load_settings(config_path)
    except ConfigError as e:
        fail(e)

    level = logging.DEBUG if verbose else getattr(logging, settings.log_level.upper(), logging.INFO)
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(message)s")

    ctx.ensure_object(dict)
    ctx.obj["settings"] = settings
    ctx.obj["windows"] = resolve_platform(platform_choice or settings.platform)


# Register commands
main.add_command(parse.parse)
main.add_command(normalize.normalize)
main.add_command(paths.to_path)
main.add_command(paths.from_path)
main.add_command(compare.contains)
main.add_command(compare.equals)
main.add_command(read.read)

if __name__ == "__main__":
    main()
