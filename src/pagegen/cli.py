"""
PageGen CLI.

Commands:

- generate: compile every page model of a project to Java
- show: print the Java generated for one page model
- inspect: print the parsed model tree of one page model as JSON
"""

import logging
from dataclasses import replace
from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from pagegen._version import get_version
from pagegen.codegen.java_writer import JavaWriter
from pagegen.core.errors import ConfigError, PagegenError
from pagegen.core.manifest import MANIFEST_NAME, ProjectManifest, load_manifest
from pagegen.core.parser import read_pagemodel
from pagegen.generator import GenerationReport, generate_from_manifest

app = typer.Typer(
    help="Generate typed Java page model classes from .pagemodel files.",
    no_args_is_help=True,
)
console = Console()


def version_callback(value: bool) -> None:
    if value:
        typer.echo(f"pagegen {get_version()}")
        raise typer.Exit()


@app.callback()
def main_callback(
    version: bool = typer.Option(
        False,
        "--version",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _load(manifest: str) -> ProjectManifest:
    try:
        return load_manifest(Path(manifest))
    except ConfigError as e:
        typer.echo(f"Error loading manifest: {e}", err=True)
        raise typer.Exit(code=1)


def _with_overrides(mf: ProjectManifest, src: str | None, out: str | None) -> ProjectManifest:
    """Apply --src/--out to the manifest; overrides resolve against the working directory."""
    config = mf.generator
    if src:
        config = replace(config, src_dir=str(Path(src).resolve()))
    if out:
        config = replace(config, gen_root_dir=str(Path(out).resolve()))
    return replace(mf, generator=config)


def _print_report(report: GenerationReport) -> None:
    table = Table(title="Page model generation")
    table.add_column("Status")
    table.add_column("File")
    for path in report.generated:
        table.add_row("[green]generated[/green]", str(path))
    for failure in report.failures:
        table.add_row("[red]failed[/red]", f"{failure.path}: {failure.message}")
    console.print(table)


@app.command()
def generate(
    manifest: str = typer.Option(MANIFEST_NAME, "--manifest", "-m", help="Project manifest."),
    src: str | None = typer.Option(None, "--src", help="Page model directory (overrides manifest)."),
    out: str | None = typer.Option(
        None, "--out", "-o", help="Java output root (overrides manifest)."
    ),
) -> None:
    """
    Generate Java classes for every page model in the project.

    Examples:
        pagegen generate
        pagegen generate --src pagemodels --out build/gen/java
    """
    mf = _with_overrides(_load(manifest), src, out)

    try:
        report = generate_from_manifest(mf)
    except ConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    _print_report(report)
    typer.echo(f"Generated {len(report.generated)} file(s), {len(report.failures)} failure(s)")
    if not report.ok:
        for failure in report.failures:
            typer.echo(f"ERROR: {failure.path}: {failure.message}", err=True)
        raise typer.Exit(code=1)


@app.command()
def show(
    file: Path = typer.Argument(..., help="Page model file."),
    manifest: str = typer.Option(MANIFEST_NAME, "--manifest", "-m", help="Project manifest."),
) -> None:
    """Print the Java generated for one page model."""
    config = _load(manifest).generator
    try:
        tree = read_pagemodel(file, config.extension)
    except (PagegenError, OSError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)
    typer.echo(JavaWriter(config.imports).generate(tree), nl=False)


@app.command()
def inspect(
    file: Path = typer.Argument(..., help="Page model file."),
    manifest: str = typer.Option(MANIFEST_NAME, "--manifest", "-m", help="Project manifest."),
) -> None:
    """Print the parsed model tree of one page model as JSON."""
    extension = _load(manifest).generator.extension
    try:
        tree = read_pagemodel(file, extension)
    except (PagegenError, OSError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)
    typer.echo(tree.model_dump_json(indent=2))


def main() -> None:
    app()


if __name__ == "__main__":
    main()
