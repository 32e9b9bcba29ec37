"""`reconcile` commands: ask a controller to reconcile a resource now."""

from typing import Optional

import typer

from ..errors import ReconciliationError
from .common import (
    KindCommand,
    actionf,
    get_service,
    handle_errors,
    namespace_option,
    successf,
)
from .resume import report_ready, wait_option
from .suspend import register_kind_commands

reconcile_app = typer.Typer(
    name="reconcile",
    help="Reconcile resources",
    no_args_is_help=True,
)

source_app = typer.Typer(
    name="source",
    help="Reconcile sources",
    no_args_is_help=True,
)
reconcile_app.add_typer(source_app, name="source")


def _make_reconcile_command(kind_command: KindCommand):
    resource_type = kind_command.resource_type

    def reconcile_command(
        ctx: typer.Context,
        name: str = typer.Argument(..., help="Resource name"),
        wait: bool = wait_option(),
        namespace: Optional[str] = namespace_option(),
    ):
        with handle_errors():
            service = get_service(ctx, namespace)

            resource = service.get_resource(resource_type, name)
            if resource.suspended:
                raise ReconciliationError("resource is suspended")

            actionf(f"annotating {resource_type.kind} {name} in {service.namespace} namespace")
            requested_at = service.request_reconcile(resource_type, name)
            successf(f"{resource_type.kind} annotated")

            if wait:
                report_ready(service, resource_type, name, requested_at=requested_at)

    return reconcile_command


register_kind_commands(reconcile_app, source_app, _make_reconcile_command, "Trigger")
