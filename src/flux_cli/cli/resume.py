"""`resume` commands: restart reconciliation of a suspended resource."""

from typing import Optional

import typer

from ..api import ResourceService
from ..model.kubernetes import ResourceType
from .common import (
    KindCommand,
    actionf,
    get_service,
    handle_errors,
    namespace_option,
    successf,
    waitingf,
)
from .suspend import register_kind_commands, require_name, resolve_targets

resume_app = typer.Typer(
    name="resume",
    help="Resume suspended resources",
    no_args_is_help=True,
)

source_app = typer.Typer(
    name="source",
    help="Resume sources",
    no_args_is_help=True,
)
resume_app.add_typer(source_app, name="source")


def wait_option():
    return typer.Option(
        True, "--wait/--no-wait", help="Wait for the resource to become ready"
    )


def report_ready(
    service: ResourceService,
    resource_type: ResourceType,
    name: str,
    requested_at: Optional[str] = None,
):
    """Wait for reconciliation and print the applied revision."""
    waitingf(f"waiting for {resource_type.kind} reconciliation")
    resource = service.wait_for_ready(resource_type, name, requested_at=requested_at)
    successf(f"{resource_type.kind} reconciliation completed")

    if resource_type.revision_path:
        revision = resource.status_field(resource_type.revision_path)
        if revision:
            successf(f"applied revision {revision}")


def _make_resume_command(kind_command: KindCommand):
    resource_type = kind_command.resource_type
    noun = resource_type.display_name

    def resume_command(
        ctx: typer.Context,
        name: Optional[str] = typer.Argument(None, help="Resource name"),
        select_all: bool = typer.Option(False, "--all", help="Resume all resources in the namespace"),
        wait: bool = wait_option(),
        namespace: Optional[str] = namespace_option(),
    ):
        with handle_errors():
            require_name(kind_command, name, select_all)
            service = get_service(ctx, namespace)

            for target in resolve_targets(service, kind_command, name, select_all):
                actionf(f"resuming {noun} {target} in {service.namespace} namespace")
                service.resume(resource_type, target)
                successf(f"{noun} resumed")

                if wait:
                    report_ready(service, resource_type, target)

    return resume_command


register_kind_commands(resume_app, source_app, _make_resume_command, "Resume")
