"""Discography CLI - Catalog commands."""
from typing import List, Tuple

import typer
from rich.console import Console
from rich.table import Table

from discography.config import settings
from discography.exceptions import DiscographyError
from discography.models import Album, Track
from discography.services.catalog import CatalogService
from discography.services.dataset import DatasetStore

app = typer.Typer()
console = Console()


def load_catalog() -> CatalogService:
    """Load the dataset from the configured path, exiting on failure."""
    try:
        return CatalogService(DatasetStore.from_file(settings.dataset_path))
    except DiscographyError as e:
        console.print(f"[red]{e.message}[/red]")
        raise typer.Exit(1)


def print_songs(title: str, songs: List[Tuple[Album, Track]]):
    table = Table(title=f"{title} ({len(songs)})")
    table.add_column("Song", style="cyan")
    table.add_column("Album")
    table.add_column("Artist")
    table.add_column("Length", justify="right")
    table.add_column("Rating", justify="right")

    for album, track in songs:
        table.add_row(
            track.name or "",
            album.title,
            album.resolve_artist(track),
            track.length,
            "" if track.rating is None else str(track.rating),
        )

    console.print(table)


@app.command()
def albums():
    """List albums in the catalog."""
    catalog = load_catalog()

    table = Table(title="Albums")
    table.add_column("ID", style="dim")
    table.add_column("Title", style="cyan")
    table.add_column("Artist")
    table.add_column("Released", justify="right")
    table.add_column("Tracks", justify="right")

    for album in catalog.list_albums():
        table.add_row(
            str(album.id),
            album.title,
            album.artist,
            album.released_text,
            str(len(album.tracks)),
        )

    console.print(table)


@app.command()
def songs(
    title: str = typer.Option(None, "--title", "-t", help="Filter by song name"),
    year: str = typer.Option(None, "--year", "-y", help="Filter by album release year"),
):
    """List songs, optionally filtered by name and year."""
    catalog = load_catalog()
    if title or year:
        print_songs("Songs", catalog.search_songs(title, year))
    else:
        print_songs("Songs", catalog.list_songs())


@app.command()
def lyrics(term: str = typer.Argument(..., help="Text to look for in lyrics")):
    """Find songs by lyrics."""
    catalog = load_catalog()
    try:
        matches = catalog.search_lyrics(term)
    except DiscographyError as e:
        console.print(f"[red]{e.message}[/red]")
        raise typer.Exit(1)

    print_songs(f"Lyrics matching '{term}'", matches)
