"""Export command implementation"""

import click

from ..decorators import extension_options, host_options, with_exporter
from ..utils.output import console, format_export_result, print_error
from ...constants import CLIENT_NAMES, EMOJI_PACKAGE, ExtensionType, MSG_STAGING_REMOVED


@click.command()
@extension_options
@host_options
@click.option(
    '--clean',
    is_flag=True,
    help='Remove the staging tree after a successful export'
)
@click.pass_context
@with_exporter
def export(ctx, name, extension_type, client, plugin_group, clean, exporter):
    """Package an installed extension as a ZIP archive

    Examples:
        extension-exporter export com_content --type component
        extension-exporter export mod_login --type module --client admin
        extension-exporter export cache --type plugin --group system
        extension-exporter export protostar --type template -o ./dist
    """
    client_id = CLIENT_NAMES[client.lower()]

    if extension_type == ExtensionType.PLUGIN.value and not plugin_group:
        print_error("Plugin group required (use --group)")
        ctx.exit(1)

    console.print(f"\n{EMOJI_PACKAGE} Exporting {extension_type} {name}...")

    result = exporter.export_with_result(name, extension_type, client_id, plugin_group)

    format_export_result(result)

    if not result.is_success:
        ctx.exit(1)

    if clean:
        removed = exporter.remove_artifacts(name, extension_type, client_id, plugin_group)
        if removed:
            console.print(MSG_STAGING_REMOVED.format(path=removed))
