# extension_exporter/cli/main.py
"""Main CLI entry point for extension-exporter"""

import logging
import os
import sys
from pathlib import Path
from typing import Optional

import click
from rich.logging import RichHandler

from .. import __version__
from ..constants import APP_NAME, LOG_FORMAT, ENV_LOG_LEVEL
from .utils.output import console

# Import all commands
from .commands import (
    export,
    paths,
    clean
)


def setup_logging(verbose: bool = False, debug: bool = False) -> None:
    """Setup logging configuration

    Args:
        verbose: Enable verbose output (INFO level)
        debug: Enable debug output (DEBUG level)
    """
    if debug:
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    else:
        level = os.environ.get(ENV_LOG_LEVEL, "WARNING").upper()

    # Configure rich handler
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        handlers=[
            RichHandler(
                console=console,
                show_time=debug,
                show_path=debug,
                rich_tracebacks=True,
                tracebacks_suppress=[click]
            )
        ],
        force=True
    )


class Context:
    """CLI context object"""

    def __init__(self):
        self.config_path: Optional[Path] = None
        self.verbose: bool = False
        self.debug: bool = False


@click.group(name=APP_NAME)
@click.version_option(__version__, prog_name=APP_NAME)
@click.option('-v', '--verbose', is_flag=True, help='Enable verbose output')
@click.option('-d', '--debug', is_flag=True, help='Enable debug output')
@click.option('-q', '--quiet', is_flag=True, help='Suppress all output except errors')
@click.option(
    '-c', '--config', 'config_path',
    type=click.Path(dir_okay=False, path_type=Path),
    help='Configuration file (default: ./.extension-exporter.yaml)'
)
@click.pass_context
def cli(ctx, verbose, debug, quiet, config_path):
    """Extension Exporter - Package installed CMS extensions

    Collects a component, module, plugin or template from a site
    installation, including its language and media files, and builds
    a distributable ZIP archive named <bucket>-<version>.zip.
    """
    # Setup logging
    if quiet:
        logging.disable(logging.CRITICAL)
    else:
        setup_logging(verbose=verbose, debug=debug)

    ctx.obj = Context()
    ctx.obj.config_path = config_path
    ctx.obj.verbose = verbose
    ctx.obj.debug = debug


# Register commands
cli.add_command(export.export)
cli.add_command(paths.paths)
cli.add_command(clean.clean)


def main():
    """Main entry point for the CLI application

    This function handles:
    - Keyboard interrupts
    - Unexpected exceptions with proper error display
    """
    try:
        cli(prog_name=APP_NAME)

    except KeyboardInterrupt:
        console.print("\n[yellow]Operation cancelled by user[/yellow]")
        sys.exit(130)

    except Exception as e:
        console.print(f"[red]Unexpected error: {e}[/red]")
        if '--debug' in sys.argv or '-d' in sys.argv:
            console.print_exception()
        sys.exit(1)


if __name__ == "__main__":
    main()
