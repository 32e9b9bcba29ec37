"""Main CLI interface using Typer."""

from pathlib import Path
from typing import Optional

import typer

from .. import __version__
from ..model.config import DEFAULT_NAMESPACE, DEFAULT_TIMEOUT, GlobalOptions
from ..utils.duration import parse_duration
from ..utils.logger import configure_logging, get_logger
from .common import console, handle_errors
from .export import export_app
from .get import get_app
from .reconcile import reconcile_app
from .resume import resume_app
from .suspend import suspend_app

# Create CLI app
app = typer.Typer(
    name="flux",
    help="Command line utility for assembling Kubernetes CD pipelines the GitOps way",
    add_completion=True,
    no_args_is_help=True,
)

app.add_typer(get_app, name="get")
app.add_typer(export_app, name="export")
app.add_typer(suspend_app, name="suspend")
app.add_typer(resume_app, name="resume")
app.add_typer(reconcile_app, name="reconcile")

logger = get_logger(__name__)


@app.callback()
def main(
    ctx: typer.Context,
    kubeconfig: Optional[Path] = typer.Option(
        None, "--kubeconfig", help="Path to the kubeconfig file (default: kubectl's own lookup)"
    ),
    context: Optional[str] = typer.Option(None, "--context", help="Kubernetes context to use"),
    namespace: str = typer.Option(
        DEFAULT_NAMESPACE,
        "--namespace",
        "-n",
        envvar="FLUX_SYSTEM_NAMESPACE",
        help="The namespace scope for the operation",
    ),
    timeout: str = typer.Option(
        DEFAULT_TIMEOUT, "--timeout", help="Timeout for this operation, e.g. 30s, 5m0s, 1h"
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Print generated objects and API calls"),
):
    """Command line utility for assembling Kubernetes CD pipelines the GitOps way."""
    configure_logging(verbose)

    with handle_errors():
        timeout_seconds = parse_duration(timeout)

    ctx.obj = GlobalOptions(
        kubeconfig=kubeconfig,
        context=context,
        namespace=namespace,
        timeout=timeout_seconds,
        verbose=verbose,
    )
    logger.debug(f"Global options: {ctx.obj}")


@app.command()
def version():
    """Show version information."""
    console.print(f"[bold]flux[/bold] version {__version__}")


if __name__ == "__main__":
    app()
