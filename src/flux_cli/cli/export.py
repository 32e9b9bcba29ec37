"""`export` commands: print resources as YAML."""

from typing import Optional

import typer

from ..errors import UsageError
from ..exporters import YamlExporter
from .common import (
    KIND_COMMANDS,
    SOURCE_COMMANDS,
    KindCommand,
    failuref,
    get_service,
    handle_errors,
    namespace_option,
)

export_app = typer.Typer(
    name="export",
    help="Export resources in YAML format",
    no_args_is_help=True,
)

source_app = typer.Typer(
    name="source",
    help="Export sources",
    no_args_is_help=True,
)
export_app.add_typer(source_app, name="source")


def export_resources(
    ctx: typer.Context,
    kind_command: KindCommand,
    name: Optional[str],
    export_all: bool,
    namespace: Optional[str],
    with_credentials: bool = False,
):
    """Export one named object, or every object in the namespace."""
    if not export_all and not name:
        raise UsageError("name is required")

    resource_type = kind_command.resource_type
    service = get_service(ctx, namespace)

    if export_all:
        resources = service.list_resources(resource_type)
        if not resources:
            failuref(f"no {kind_command.empty_noun} found in {service.namespace} namespace")
            return
    else:
        resources = [service.get_resource(resource_type, name)]

    service.export(resource_type, resources, YamlExporter(), with_credentials=with_credentials)


def _make_export_command(kind_command: KindCommand):
    if kind_command.resource_type.has_credentials:

        def export_command(
            ctx: typer.Context,
            name: Optional[str] = typer.Argument(None, help="Resource name"),
            export_all: bool = typer.Option(False, "--all", help="Select all resources"),
            with_credentials: bool = typer.Option(
                False, "--with-credentials", help="Include credential secrets"
            ),
            namespace: Optional[str] = namespace_option(),
        ):
            with handle_errors():
                export_resources(ctx, kind_command, name, export_all, namespace, with_credentials)

        return export_command

    def export_command(
        ctx: typer.Context,
        name: Optional[str] = typer.Argument(None, help="Resource name"),
        export_all: bool = typer.Option(False, "--all", help="Select all resources"),
        namespace: Optional[str] = namespace_option(),
    ):
        with handle_errors():
            export_resources(ctx, kind_command, name, export_all, namespace)

    return export_command


def _register(app: typer.Typer, kind_command: KindCommand):
    command = _make_export_command(kind_command)
    kind = kind_command.resource_type.kind
    help_text = f"Export {kind} resources in YAML format"
    primary, *aliases = kind_command.names
    app.command(primary, help=help_text)(command)
    for alias in aliases:
        app.command(alias, help=help_text, hidden=True)(command)


for _kind_command in SOURCE_COMMANDS:
    _register(source_app, _kind_command)

for _kind_command in KIND_COMMANDS:
    _register(export_app, _kind_command)
