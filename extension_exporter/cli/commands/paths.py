"""Path inspection command"""

import click

from ..decorators import extension_options, host_options, with_exporter
from ..utils.output import console, format_paths_table, print_error
from ...api import ExporterError
from ...constants import CLIENT_NAMES


@click.command()
@extension_options
@host_options
@click.pass_context
@with_exporter
def paths(ctx, name, extension_type, client, plugin_group, exporter):
    """Show the paths an export would read and write

    Nothing is created or removed.

    Examples:
        extension-exporter paths com_content --type component
        extension-exporter paths cache --type plugin --group system
    """
    try:
        resolved = exporter.describe_paths(name, extension_type, CLIENT_NAMES[client.lower()], plugin_group)
    except ExporterError as e:
        print_error("Cannot resolve paths", e)
        ctx.exit(1)

    console.print(format_paths_table(resolved, title=f"Paths for {extension_type} {name}"))
