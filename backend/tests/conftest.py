"""Pytest fixtures for Discography tests."""
import copy
import json

import pytest
from fastapi.testclient import TestClient

from discography.dependencies import get_store
from discography.main import app
from discography.services.dataset import DatasetStore

SAMPLE_ALBUMS = [
    {
        "ID": 0,
        "AlbumTitle": "Unorganized",
        "AlbumArtist": "Test Artist",
        "CoverImage": "",
        "Released": "",
        "Length": "",
        "Label": "",
        "Description": "",
        "YoutubeURL": "",
        "SpotifyURL": "",
        "AppleURL": "",
        "WikiURL": "",
        "Tracks": [],
    },
    {
        "ID": 1,
        "AlbumTitle": "Once in a Long While",
        "AlbumArtist": "Test Artist",
        "CoverImage": "once.png",
        "Released": 2016,
        "Length": "40:00",
        "Label": "Test Label",
        "Description": "Third album.",
        "YoutubeURL": "https://youtube.example/once",
        "SpotifyURL": "https://spotify.example/once",
        "AppleURL": "https://apple.example/once",
        "WikiURL": "https://wiki.example/once",
        "Tracks": [
            {"Name": "Existing Track", "Length": "4:00", "Lyrics": "I walk alone at night"},
            {"Name": "Rated Track", "Length": "3:10", "Lyrics": "", "Rating": 3},
            {"Name": "Guest Track", "Length": "5:20", "Lyrics": "Together we sing", "TrackArtist": "Guest Singer"},
        ],
    },
    {
        "ID": 2,
        "AlbumTitle": "Early Days",
        "AlbumArtist": "Test Artist",
        "CoverImage": "early.png",
        "Released": "2011",
        "Length": "35:00",
        "Label": "Test Label",
        "Description": "Debut.",
        "YoutubeURL": "",
        "SpotifyURL": "",
        "AppleURL": "",
        "WikiURL": "",
        "Tracks": [
            {"Name": "ALONE AGAIN", "Length": "2:59", "Lyrics": "Alone again, naturally not"},
            {"Name": "No Lyrics", "Length": "3:33"},
            {"Length": "1:00", "Lyrics": "a nameless interlude, alone"},
            {"Name": "Existing Track", "Length": "4:44", "Lyrics": "Second copy"},
        ],
    },
    {
        "ID": 3,
        "AlbumTitle": "Once More",
        "AlbumArtist": "Other Artist",
        "CoverImage": "once more.png",
        "Released": 2019,
        "Length": "30:00",
        "Label": "Other Label",
        "Description": "",
        "YoutubeURL": "",
        "SpotifyURL": "",
        "AppleURL": "",
        "WikiURL": "",
        "Tracks": [
            {"Name": "Late Song", "Length": "3:00", "Lyrics": "Nothing to see here"},
        ],
    },
]


@pytest.fixture
def sample_albums():
    """Fresh copy of the sample dataset records."""
    return copy.deepcopy(SAMPLE_ALBUMS)


@pytest.fixture(scope="function")
def store(sample_albums):
    """Create a fresh dataset store for each test."""
    return DatasetStore.from_records(sample_albums)


@pytest.fixture(scope="function")
def client(store):
    """Create a test client serving the test store."""
    app.dependency_overrides[get_store] = lambda: store
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def dataset_file(tmp_path, sample_albums):
    """Sample dataset written to a JSON file."""
    path = tmp_path / "discography.json"
    path.write_text(json.dumps(sample_albums), encoding="utf-8")
    return path
