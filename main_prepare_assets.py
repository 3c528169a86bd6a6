"""Mini README: Entry point CLI for preparing assets for cooking.

This script exposes a Typer CLI that runs the preparation batch for one
package. The run options are passed through as the same free-form
``PackageName=... OnlyPrepareMaps=... OnlyMoveMeshes=...`` string the
build scripts already produce, while the content layout comes from
``COOKPREP_*`` settings that can be overridden on the command line.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from cookprep.configuration import get_settings
from cookprep.logging_utils import configure_root_logger
from cookprep.orchestration import OperatingParams, Orchestrator
from cookprep.repository import REGISTRY

cli = typer.Typer(help="Prepare imported map and prop assets for the cook step.")


@cli.command()
def run(
    params: str = typer.Argument(
        "", help="Run options, e.g. 'PackageName=Town OnlyPrepareMaps=true'."
    ),
    content_directory: Optional[Path] = typer.Option(
        None, help="Content directory backing the /Game root."
    ),
    repository: Optional[str] = typer.Option(None, help="Asset repository provider to use."),
    verbose: bool = typer.Option(False, help="Enable debug logging."),
) -> None:
    """Run one preparation mode for a package."""

    settings = get_settings()
    overrides = {}
    if content_directory is not None:
        overrides["content_directory"] = content_directory.expanduser().resolve()
    if repository is not None:
        overrides["repository"] = repository
    if overrides:
        settings = settings.model_copy(update=overrides)
    configure_root_logger("DEBUG" if verbose else settings.log_level)

    operating_params = OperatingParams.parse(params)
    typer.echo(
        f"Preparing package '{operating_params.package_name}' "
        f"({operating_params.mode}) from {settings.content_directory}"
    )
    status = Orchestrator(settings=settings).run(operating_params)
    raise typer.Exit(code=status)


@cli.command()
def providers() -> None:
    """List the registered asset repository providers."""

    for identifier in REGISTRY.available_providers():
        typer.echo(identifier)


if __name__ == "__main__":
    cli()
