"""`suspend` commands: stop reconciliation of a resource."""

from typing import List, Optional

import typer

from ..api import ResourceService
from ..errors import UsageError
from .common import (
    KIND_COMMANDS,
    SOURCE_COMMANDS,
    KindCommand,
    actionf,
    failuref,
    get_service,
    handle_errors,
    namespace_option,
    successf,
)

suspend_app = typer.Typer(
    name="suspend",
    help="Suspend resources",
    no_args_is_help=True,
)

source_app = typer.Typer(
    name="source",
    help="Suspend sources",
    no_args_is_help=True,
)
suspend_app.add_typer(source_app, name="source")


def resolve_targets(
    service: ResourceService, kind_command: KindCommand, name: Optional[str], select_all: bool
) -> List[str]:
    """Return the object names a suspend/resume acts on.

    An empty list means --all matched nothing, which has already been reported.
    """
    resource_type = kind_command.resource_type
    if select_all:
        names = [r.name for r in service.list_resources(resource_type)]
        if not names:
            failuref(f"no {kind_command.empty_noun} found in {service.namespace} namespace")
        return names
    return [name]


def require_name(kind_command: KindCommand, name: Optional[str], select_all: bool):
    if not name and not select_all:
        raise UsageError(f"{kind_command.resource_type.display_name} name is required")


def _make_suspend_command(kind_command: KindCommand):
    resource_type = kind_command.resource_type
    noun = resource_type.display_name

    def suspend_command(
        ctx: typer.Context,
        name: Optional[str] = typer.Argument(None, help="Resource name"),
        select_all: bool = typer.Option(False, "--all", help="Suspend all resources in the namespace"),
        namespace: Optional[str] = namespace_option(),
    ):
        with handle_errors():
            require_name(kind_command, name, select_all)
            service = get_service(ctx, namespace)

            for target in resolve_targets(service, kind_command, name, select_all):
                actionf(f"suspending {noun} {target} in {service.namespace} namespace")
                service.suspend(resource_type, target)
                successf(f"{noun} suspended")

    return suspend_command


def register_kind_commands(verb_app: typer.Typer, source: typer.Typer, factory, verb: str):
    """Register a per-kind command for every suspendable kind."""
    for kind_command in SOURCE_COMMANDS + KIND_COMMANDS:
        if not kind_command.resource_type.suspendable:
            continue
        app = source if kind_command.is_source else verb_app
        command = factory(kind_command)
        help_text = f"{verb} reconciliation of a {kind_command.resource_type.kind}"
        primary, *aliases = kind_command.names
        app.command(primary, help=help_text)(command)
        for alias in aliases:
            app.command(alias, help=help_text, hidden=True)(command)


register_kind_commands(suspend_app, source_app, _make_suspend_command, "Suspend")
