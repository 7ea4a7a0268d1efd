from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from noogle.core.config import NoogleConfig
from noogle.core.exceptions import NoogleError
from noogle.core.logging import setup_logging
from noogle.core.positions import Found
from noogle.core.resolver import static_params
from noogle.engine.page import PageBuilder
from noogle.engine.site import SiteBuilder
from noogle.infra.corpus import load_corpus

app = typer.Typer(name="noogle", help="Noogle - static pages for Nix function documentation")

console = Console()


def _load_config(site_root: Path | None, data: Path | None = None, out: Path | None = None) -> NoogleConfig:
    config = NoogleConfig.load(site_root)
    # Paths given on the command line are relative to the working directory,
    # not to the site root.
    if data is not None:
        config.paths.data_file = data.resolve()
    if out is not None:
        config.paths.output_dir = out.resolve()
    return config


@app.command()
def build(
    data: Path | None = typer.Option(None, "--data", help="Path to the JSON corpus."),
    out: Path | None = typer.Option(None, "--out", help="Output directory for the rendered site."),
    site_root: Path | None = typer.Option(None, "--site-root", help="Directory holding .noogle.toml."),
    log_level: str = typer.Option("INFO", "--log-level", help="Logging level."),
):
    """
    Render one static page per documentation entry.
    """
    setup_logging(log_level)
    try:
        config = _load_config(site_root, data, out)
        written = SiteBuilder(config).build()
    except NoogleError as exc:
        console.print(f"[bold red]Build failed:[/] {escape(str(exc))}")
        raise typer.Exit(code=1) from exc

    console.print(f"✅ Rendered {written} pages to {config.paths.abs_output_dir}")


@app.command()
def show(
    path: str = typer.Argument(..., help="Dotted path of the entry, e.g. lib.strings.concat."),
    data: Path | None = typer.Option(None, "--data", help="Path to the JSON corpus."),
    site_root: Path | None = typer.Option(None, "--site-root", help="Directory holding .noogle.toml."),
):
    """
    Show the resolved page metadata of a single entry.
    """
    try:
        config = _load_config(site_root, data)
        corpus = load_corpus(config.paths.abs_data_file)
    except NoogleError as exc:
        console.print(f"[bold red]Error:[/] {escape(str(exc))}")
        raise typer.Exit(code=1) from exc

    page = PageBuilder(config).build_path(corpus, path.split("."))
    if page.doc is None:
        console.print("No documentation found yet.")
        raise typer.Exit(code=1)

    table = Table(title=page.title, show_header=False)
    table.add_column("Field", style="bold cyan")
    table.add_column("Value")
    table.add_row("From", ", ".join(page.types.args) or "-")
    table.add_row("To", ", ".join(page.types.returns) or "-")
    if isinstance(page.position, Found):
        table.add_row(f"Source ({page.position.origin.value})", page.edit_url)
    elif page.raw_source_url:
        table.add_row("Underlying source", page.raw_source_url)
    else:
        table.add_row("Source", "Position of the source could not be detected automatically.")
    for alias in page.aliases:
        table.add_row("Alias", f"{alias.label} ({alias.href})")
    console.print(table)


@app.command()
def paths(
    data: Path | None = typer.Option(None, "--data", help="Path to the JSON corpus."),
    site_root: Path | None = typer.Option(None, "--site-root", help="Directory holding .noogle.toml."),
):
    """
    List the route parameters of every entry page.
    """
    try:
        config = _load_config(site_root, data)
        corpus = load_corpus(config.paths.abs_data_file)
    except NoogleError as exc:
        console.print(f"[bold red]Error:[/] {escape(str(exc))}")
        raise typer.Exit(code=1) from exc

    for params in static_params(corpus):
        console.print("/".join(params["path"]), markup=False, highlight=False)
