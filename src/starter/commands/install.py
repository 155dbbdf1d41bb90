"""Install command implementation."""

from pathlib import Path

import typer

from ..config import load_config
from ..constants import COMPOSER_MANIFEST, NEXT_STEPS
from ..core import InstallContext, run_install
from ..errors import ProcessError, StarterError
from ..models import InstallOptions
from ..output import get_output_context


def install(
    skip_packages: bool = typer.Option(
        False, "--skip-packages", help="Skip installing Composer/NPM packages"
    ),
    skip_pest: bool = typer.Option(False, "--skip-pest", help="Skip migrating to Pest"),
    skip_docs: bool = typer.Option(
        False, "--skip-docs", help="Skip VitePress documentation setup"
    ),
    no_interaction: bool = typer.Option(
        False,
        "--no-interaction",
        "-n",
        help="Do not ask questions; use default answers",
    ),
    path: Path = typer.Option(
        Path("."),
        "--path",
        "-p",
        help="Laravel project root (default: current directory)",
    ),
) -> None:
    """Install the Laravel starter pack."""
    ctx = get_output_context()
    project_root = path.resolve()

    if not (project_root / COMPOSER_MANIFEST).exists():
        ctx.error(f"{COMPOSER_MANIFEST} not found in {project_root}")
        raise typer.Exit(1)

    options = InstallOptions(
        skip_packages=skip_packages,
        skip_pest=skip_pest,
        skip_docs=skip_docs,
        no_interaction=no_interaction,
    )

    ctx.info("[bold]Installing Laravel Starter Pack...[/bold]")

    try:
        config = load_config(project_root)
        install_ctx = InstallContext(
            project_root=project_root,
            output=ctx,
            options=options,
            config=config,
        )
        run_install(install_ctx)
    except ProcessError as e:
        ctx.error(str(e))
        if e.output:
            ctx.console.print(e.output, markup=False, highlight=False)
        raise typer.Exit(1) from None
    except StarterError as e:
        ctx.error(str(e))
        raise typer.Exit(1) from None

    ctx.info("")
    ctx.success("Laravel Starter Pack installed successfully!")
    ctx.info("")
    ctx.info("[bold]Next steps:[/bold]")
    for n, line in enumerate(NEXT_STEPS, start=1):
        ctx.info(f"  {n}. {line}")
