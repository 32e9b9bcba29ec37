"""`get` commands: print resource status tables."""

from typing import Optional

import typer

from ..core import StatusReporter
from .common import (
    KIND_COMMANDS,
    SOURCE_COMMANDS,
    KindCommand,
    console,
    failuref,
    get_service,
    handle_errors,
    namespace_option,
)

get_app = typer.Typer(
    name="get",
    help="Get the resources and their status",
    no_args_is_help=True,
)

sources_app = typer.Typer(
    name="sources",
    help="Get source statuses",
    no_args_is_help=True,
)
get_app.add_typer(sources_app, name="sources")


def _scope(namespace: str, all_namespaces: bool) -> str:
    return "any namespace" if all_namespaces else f"{namespace} namespace"


def _make_get_command(kind_command: KindCommand):
    resource_type = kind_command.resource_type

    def get_command(
        ctx: typer.Context,
        name: Optional[str] = typer.Argument(None, help="Resource name (default: all)"),
        all_namespaces: bool = typer.Option(
            False, "--all-namespaces", "-A", help="List the requested object(s) across all namespaces"
        ),
        namespace: Optional[str] = namespace_option(),
    ):
        with handle_errors():
            service = get_service(ctx, namespace)

            if name:
                resources = [service.get_resource(resource_type, name)]
                all_namespaces = False
            else:
                resources = service.list_resources(resource_type, all_namespaces)

            if not resources:
                scope = _scope(service.namespace, all_namespaces)
                failuref(f"no {kind_command.empty_noun} found in {scope}")
                return

            reporter = StatusReporter(resource_type, all_namespaces=all_namespaces)
            console.print(reporter.build_table(service.statuses(resource_type, resources)))

    return get_command


def _register(app: typer.Typer, kind_command: KindCommand):
    command = _make_get_command(kind_command)
    help_text = f"Get {kind_command.resource_type.kind} statuses"
    primary, *aliases = kind_command.list_names
    app.command(primary, help=help_text)(command)
    for alias in aliases:
        app.command(alias, help=help_text, hidden=True)(command)


for _kind_command in SOURCE_COMMANDS:
    _register(sources_app, _kind_command)

for _kind_command in KIND_COMMANDS:
    _register(get_app, _kind_command)


@sources_app.command("all")
def get_all_sources(
    ctx: typer.Context,
    all_namespaces: bool = typer.Option(
        False, "--all-namespaces", "-A", help="List the requested object(s) across all namespaces"
    ),
    namespace: Optional[str] = namespace_option(),
):
    """Get all source statuses."""
    with handle_errors():
        service = get_service(ctx, namespace)
        found = False

        for kind_command in SOURCE_COMMANDS:
            resource_type = kind_command.resource_type
            resources = service.list_resources(resource_type, all_namespaces)
            if not resources:
                continue

            found = True
            reporter = StatusReporter(resource_type, all_namespaces=all_namespaces)
            table = reporter.build_table(service.statuses(resource_type, resources))
            table.title = resource_type.plural
            console.print(table)

        if not found:
            failuref(f"no source found in {_scope(service.namespace, all_namespaces)}")
