"""Helpers shared by the command modules."""

import os
from contextlib import contextmanager
from typing import Iterator, List, NamedTuple, Optional

import typer
from rich.console import Console
from rich.markup import escape

from ..api import ResourceService
from ..errors import FluxCliError
from ..k8s import K8sClient
from ..model.config import GlobalOptions
from ..model.kinds import (
    ALERT,
    BUCKET,
    GIT_REPOSITORY,
    HELM_CHART,
    HELM_RELEASE,
    HELM_REPOSITORY,
    KUSTOMIZATION,
    PROVIDER,
    RECEIVER,
)
from ..model.kubernetes import ResourceType

# Width used for tables when stdout is not a terminal and COLUMNS is unset
PIPED_WIDTH = 512


def stdout_console() -> Console:
    """Console for tables; piped output keeps one row per object."""
    out = Console()
    if not out.is_terminal and "COLUMNS" not in os.environ:
        out.width = PIPED_WIDTH
    return out


console = stdout_console()
err_console = Console(stderr=True)


class KindCommand(NamedTuple):
    """How a kind is addressed on the command line."""

    resource_type: ResourceType
    list_names: List[str]
    names: List[str]
    is_source: bool = False

    @property
    def empty_noun(self) -> str:
        return "source" if self.is_source else self.resource_type.plural


SOURCE_COMMANDS = [
    KindCommand(GIT_REPOSITORY, ["git"], ["git"], True),
    KindCommand(HELM_REPOSITORY, ["helm"], ["helm"], True),
    KindCommand(BUCKET, ["bucket"], ["bucket"], True),
    KindCommand(HELM_CHART, ["chart"], ["chart"], True),
]

KIND_COMMANDS = [
    KindCommand(KUSTOMIZATION, ["kustomizations", "ks", "kustomization"], ["kustomization", "ks"]),
    KindCommand(HELM_RELEASE, ["helmreleases", "hr", "helmrelease"], ["helmrelease", "hr"]),
    KindCommand(ALERT, ["alerts", "alert"], ["alert"]),
    KindCommand(PROVIDER, ["alert-providers", "alert-provider"], ["alert-provider"]),
    KindCommand(RECEIVER, ["receivers", "receiver"], ["receiver"]),
]


def actionf(message: str) -> None:
    err_console.print(f"► {escape(message)}", highlight=False, soft_wrap=True)


def successf(message: str) -> None:
    err_console.print(f"[green]✔[/green] {escape(message)}", highlight=False, soft_wrap=True)


def waitingf(message: str) -> None:
    err_console.print(f"◎ {escape(message)}", highlight=False, soft_wrap=True)


def failuref(message: str) -> None:
    err_console.print(f"[red]✗[/red] {escape(message)}", highlight=False, soft_wrap=True)


def namespace_option():
    return typer.Option(
        None, "--namespace", "-n", help="The namespace scope for this operation"
    )


def get_options(ctx: typer.Context) -> GlobalOptions:
    """Return the global options stored by the root callback."""
    if isinstance(ctx.obj, GlobalOptions):
        return ctx.obj
    return GlobalOptions()


def get_service(ctx: typer.Context, namespace: Optional[str] = None) -> ResourceService:
    """Build a service bound to the effective namespace."""
    options = get_options(ctx)
    client = K8sClient(
        context=options.context, kubeconfig=options.kubeconfig, timeout=options.timeout
    )
    return ResourceService(client, namespace or options.namespace, timeout=options.timeout)


@contextmanager
def handle_errors() -> Iterator[None]:
    """Print CLI errors as failure lines and exit with status 1."""
    try:
        yield
    except FluxCliError as e:
        failuref(str(e))
        raise typer.Exit(1)
