"""Command-line interface for the localization export."""

import asyncio
import logging
from pathlib import Path
from typing import List, Optional

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from .config import Config
from .errors import ConfigError, ExportError
from .models.artifact import OutputArtifact
from .pipeline import ExportPipeline
from .storage.artifact_writer import ArtifactWriter
from .storage.document_store import DocumentStore, MongoDocumentStore

console = Console()


def create_store(config: Config) -> DocumentStore:
    """Build the document store for a validated config."""
    return MongoDocumentStore(config.mongo_uri, config.database_name)


def load_config(platform: Optional[str] = None, output_dir: Optional[str] = None) -> Config:
    """Load config from the environment, apply CLI overrides and validate it."""
    config = Config()
    if platform:
        config.platform = platform
    if output_dir:
        config.output_dir = Path(output_dir)

    errors = config.validate()
    if errors:
        raise ConfigError(errors)
    return config


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def _abort(error: ExportError) -> click.Abort:
    if isinstance(error, ConfigError):
        console.print("[red]Configuration errors:[/red]")
        for problem in error.problems:
            console.print(f"  - {problem}")
    else:
        console.print(f"[red]{type(error).__name__}:[/red] {escape(str(error))}", highlight=False)
    return click.Abort()


@click.group()
@click.version_option(version="0.1.0")
def cli():
    """Export localization strings from MongoDB to web, Android and iOS resources."""
    pass


@cli.command()
@click.option(
    "--platform", "-p",
    type=click.Choice(["web", "js", "android", "ios"], case_sensitive=False),
    default=None,
    help="Target platform (defaults to the PLATFORM env variable)"
)
@click.option(
    "--output-dir", "-o",
    type=click.Path(file_okay=False),
    default=None,
    help="Directory for the generated files (defaults to OUTPUT_DIR or ./localization-artifacts)"
)
@click.option(
    "--dry-run",
    is_flag=True,
    help="Render the files without writing them"
)
@click.option(
    "--verbose", "-v",
    is_flag=True,
    help="Log every collection and file"
)
def export(platform: Optional[str], output_dir: Optional[str], dry_run: bool, verbose: bool):
    """Export all collections into one file per language."""
    _setup_logging(verbose)
    try:
        config = load_config(platform, output_dir)
    except ConfigError as e:
        raise _abort(e)

    console.print(
        f"[blue]Exporting:[/blue] {config.target_platform.value} "
        f"(database [bold]{config.database_name}[/bold])"
    )

    try:
        artifacts = asyncio.run(_run_export(config, dry_run))
    except ExportError as e:
        raise _abort(e)

    _print_artifacts(artifacts, ArtifactWriter(config.output_dir), dry_run)
    if dry_run:
        console.print("\n[yellow]Dry run - no files written[/yellow]")
    else:
        console.print("\n[green]Complete![/green]")


async def _run_export(config: Config, dry_run: bool) -> List[OutputArtifact]:
    async with create_store(config) as store:
        pipeline = ExportPipeline(config, store)
        return await pipeline.run(dry_run=dry_run)


@cli.command()
@click.option(
    "--platform", "-p",
    type=click.Choice(["web", "js", "android", "ios"], case_sensitive=False),
    default=None,
    help="Target platform (defaults to the PLATFORM env variable)"
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def stats(platform: Optional[str], verbose: bool):
    """Show key counts per collection and language."""
    _setup_logging(verbose)
    try:
        config = load_config(platform)
        exports = asyncio.run(_collect(config))
    except ExportError as e:
        raise _abort(e)

    table = Table(title=f"Collections in {config.database_name}")
    table.add_column("Collection", style="cyan")
    for lang in config.languages:
        table.add_column(lang.label, justify="right")

    totals = [0] * len(config.languages)
    for export_ in exports:
        counts = [len(export_.entries_for(lang.code)) for lang in config.languages]
        totals = [total + count for total, count in zip(totals, counts)]
        name = export_.name if not export_.is_empty else f"[dim]{export_.name} (empty)[/dim]"
        table.add_row(name, *(str(count) for count in counts))
    table.add_row("[bold]Total[/bold]", *(f"[bold]{total}[/bold]" for total in totals))

    console.print(table)


async def _collect(config: Config):
    async with create_store(config) as store:
        return await ExportPipeline(config, store).collect_collections()


def _print_artifacts(artifacts: List[OutputArtifact], writer: ArtifactWriter, dry_run: bool):
    """Print a table of generated files."""
    table = Table(title="Would write" if dry_run else "Updated")
    table.add_column("File", style="cyan")
    table.add_column("Language")
    table.add_column("Keys", justify="right")
    table.add_column("Size", justify="right")

    for artifact in artifacts:
        table.add_row(
            str(writer.path_for(artifact)),
            artifact.language,
            str(artifact.entry_count),
            f"{artifact.size_bytes} B",
        )

    console.print(table)


if __name__ == "__main__":
    cli()
