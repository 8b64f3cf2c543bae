"""Shared options for commands that address one extension"""

from functools import wraps
from pathlib import Path
from typing import Callable

import click

from ..utils.output import print_error
from ...api import Exporter, ExporterError
from ...constants import CLIENT_NAMES, ExtensionType
from ...models import parse_mode
from ...services import ConfigService


def extension_options(func: Callable) -> Callable:
    """Add the NAME argument plus type, client and group options"""
    options = [
        click.argument('name'),
        click.option(
            '--type', '-t', 'extension_type',
            required=True,
            type=click.Choice([t.value for t in ExtensionType], case_sensitive=False),
            help='Extension type'
        ),
        click.option(
            '--client',
            type=click.Choice(sorted(CLIENT_NAMES), case_sensitive=False),
            default='site',
            show_default=True,
            help='Client the module or template belongs to'
        ),
        click.option(
            '--group', '-g', 'plugin_group',
            help='Plugin group (required for plugins)'
        ),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def host_options(func: Callable) -> Callable:
    """Add options overriding configured paths and modes"""
    options = [
        click.option(
            '--export-dir', '-o', 'export_directory',
            type=click.Path(file_okay=False, path_type=Path),
            help='Export (working) directory'
        ),
        click.option(
            '--site-root',
            type=click.Path(file_okay=False, path_type=Path),
            help='Host site root'
        ),
        click.option(
            '--admin-root',
            type=click.Path(file_okay=False, path_type=Path),
            help='Host administrator root (default: <site-root>/administrator)'
        ),
        click.option(
            '--dir-mode',
            help='Octal permissions for exported directories (default: 0755)'
        ),
        click.option(
            '--file-mode',
            help='Octal permissions for exported files (default: 0644)'
        ),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def with_exporter(func: Callable) -> Callable:
    """Build an Exporter from config file, environment and host options

    The wrapped command receives ``exporter`` instead of the host options.
    """
    @wraps(func)
    def wrapper(*args, **kwargs):
        ctx = click.get_current_context()
        overrides = {
            key: kwargs.pop(key, None)
            for key in ('export_directory', 'site_root', 'admin_root', 'dir_mode', 'file_mode')
        }

        try:
            if overrides['dir_mode'] is not None:
                overrides['dir_mode'] = parse_mode(overrides['dir_mode'], 0)
            if overrides['file_mode'] is not None:
                overrides['file_mode'] = parse_mode(overrides['file_mode'], 0)

            config_path = ctx.obj.config_path if ctx.obj else None
            config = ConfigService(config_path).load_config(**overrides)
            kwargs['exporter'] = Exporter.from_config(config)

        except ExporterError as e:
            print_error("Invalid configuration", e)
            ctx.exit(1)

        return func(*args, **kwargs)

    return wrapper
