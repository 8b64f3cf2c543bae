"""Staging tree cleanup command"""

import click

from ..decorators import extension_options, host_options, with_exporter
from ..utils.output import console, print_error, print_warning
from ...api import ExporterError
from ...constants import CLIENT_NAMES, MSG_STAGING_REMOVED


@click.command()
@extension_options
@host_options
@click.pass_context
@with_exporter
def clean(ctx, name, extension_type, client, plugin_group, exporter):
    """Remove the staging tree left behind by an export

    Examples:
        extension-exporter clean com_content --type component
    """
    try:
        removed = exporter.remove_artifacts(name, extension_type, CLIENT_NAMES[client.lower()], plugin_group)
    except ExporterError as e:
        print_error("Cleanup failed", e)
        ctx.exit(1)

    if removed:
        console.print(MSG_STAGING_REMOVED.format(path=removed))
    else:
        print_warning(f"No staging tree found for {extension_type} {name}")
