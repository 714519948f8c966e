"""Discography CLI - Main entry point."""
from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from discography.cli import library

app = typer.Typer(
    name="discography",
    help="Discography - album and track catalog API",
    add_completion=True,
)

console = Console()

# Add subcommands
app.add_typer(library.app, name="library", help="Catalog browsing commands")


@app.command()
def version():
    """Show version information."""
    from discography import __version__
    console.print(f"Discography v{__version__}")


@app.command()
def status():
    """Check dataset and media status."""
    from discography.config import settings
    from discography.exceptions import DiscographyError
    from discography.services.dataset import DatasetStore

    table = Table(title="Discography Status")
    table.add_column("Component", style="cyan")
    table.add_column("Status", style="green")

    try:
        store = DatasetStore.from_file(settings.dataset_path)
        table.add_row(
            "Dataset",
            f"OK ({store.album_count} albums, {store.track_count} tracks)",
        )
        if store.unorganized_album() is None:
            table.add_row("Unorganized album", "[yellow]Missing (ID 0)[/yellow]")
        else:
            table.add_row("Unorganized album", "OK")
    except DiscographyError as e:
        table.add_row("Dataset", f"[red]Error: {e.message}[/red]")

    images = Path(settings.images_dir)
    if images.is_dir():
        table.add_row("Images", f"OK ({settings.images_dir})")
    else:
        table.add_row("Images", f"[yellow]Missing ({settings.images_dir})[/yellow]")

    console.print(table)


@app.command()
def serve(
    host: str = typer.Option(None, "--host", help="Bind address (default: HOST)"),
    port: int = typer.Option(None, "--port", "-p", help="Port (default: PORT)"),
    reload: bool = typer.Option(False, "--reload", help="Reload on code changes"),
):
    """Run the API server."""
    import uvicorn
    from discography.config import settings

    uvicorn.run(
        "discography.main:app",
        host=host or settings.host,
        port=port or settings.port,
        reload=reload,
    )


if __name__ == "__main__":
    app()
