"""Tests for loading the dataset store."""
import json

import pytest

from discography.exceptions import DatasetError
from discography.models import Album, Track
from discography.services.dataset import DatasetStore


def test_load_from_file(dataset_file):
    """Albums and tracks load in file order."""
    store = DatasetStore.from_file(dataset_file)

    assert store.album_count == 4
    assert store.track_count == 8
    assert [a.id for a in store.albums] == [0, 1, 2, 3]
    assert [t.name for t in store.albums[1].tracks] == ["Existing Track", "Rated Track", "Guest Track"]


def test_load_missing_file(tmp_path):
    """A missing dataset file is reported as DatasetError."""
    with pytest.raises(DatasetError, match="not found"):
        DatasetStore.from_file(tmp_path / "missing.json")


def test_load_invalid_json(tmp_path):
    """Malformed JSON is reported as DatasetError."""
    path = tmp_path / "broken.json"
    path.write_text("[{", encoding="utf-8")

    with pytest.raises(DatasetError, match="not valid JSON"):
        DatasetStore.from_file(path)


def test_load_rejects_non_array(tmp_path):
    """The dataset must be a JSON array."""
    path = tmp_path / "object.json"
    path.write_text(json.dumps({"ID": 0}), encoding="utf-8")

    with pytest.raises(DatasetError, match="JSON array"):
        DatasetStore.from_file(path)


def test_load_rejects_album_without_id():
    """Every entry needs an ID."""
    with pytest.raises(DatasetError, match="entry 1"):
        DatasetStore.from_records([{"ID": 0, "AlbumTitle": "Unorganized"}, {"AlbumTitle": "No ID"}])


def test_missing_fields_get_defaults():
    """Optional album and track fields default sensibly."""
    store = DatasetStore.from_records([{"ID": 0, "Tracks": [{"Name": "Bare"}]}])
    album = store.albums[0]
    track = album.tracks[0]

    assert album.title == ""
    assert album.released == ""
    assert track.length == ""
    assert track.lyrics is None
    assert track.rating is None
    assert track.track_artist is None


def test_missing_unorganized_album_is_allowed(caplog):
    """A dataset without ID 0 loads but logs a warning."""
    store = DatasetStore.from_records([{"ID": 5, "AlbumTitle": "Only"}])

    assert store.unorganized_album() is None
    assert "unorganized" in caplog.text.lower()


def test_find_album_is_case_insensitive_and_exact(store):
    """Album lookup ignores case but needs the whole title."""
    assert store.find_album("early days").id == 2
    assert store.find_album("EARLY DAYS").id == 2
    assert store.find_album("Early") is None


def test_find_track_first_match_wins(store):
    """The first album holding a track name wins."""
    album, track = store.find_track("existing track")

    assert album.id == 1
    assert track.length == "4:00"


def test_nameless_track_never_matches():
    """Tracks without a name are skipped by name lookups."""
    album = Album(id=1, title="A", tracks=[Track(name=None, length="1:00")])

    assert album.find_track("") is None
    assert album.find_track("anything") is None


def test_resolve_artist_falls_back_to_album(store):
    """Track artist wins, album artist otherwise."""
    album = store.albums[1]

    assert album.resolve_artist(album.tracks[0]) == "Test Artist"
    assert album.resolve_artist(album.tracks[2]) == "Guest Singer"
