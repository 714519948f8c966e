"""Tests for song endpoints."""


def song_names(response):
    return [s.get("SongName") for s in response.json()]


class TestGetSongs:
    """Tests for /getSongs."""

    def test_lists_all_tracks(self, client):
        response = client.get("/getSongs")

        assert response.status_code == 200
        data = response.json()
        assert len(data) == 8
        assert data[0] == {
            "CoverImage": "/getImage?image=once.png",
            "SongName": "Existing Track",
            "Length": "4:00",
            "Lyrics": "I walk alone at night",
            "Artist": "Test Artist",
        }

    def test_rating_only_when_present(self, client):
        data = client.get("/getSongs").json()
        by_name = {s.get("SongName"): s for s in data}

        assert by_name["Rated Track"]["Rating"] == 3
        assert "Rating" not in by_name["ALONE AGAIN"]

    def test_artist_fallback(self, client):
        data = client.get("/getSongs").json()
        by_name = {s.get("SongName"): s for s in data}

        assert by_name["Guest Track"]["Artist"] == "Guest Singer"
        assert by_name["Late Song"]["Artist"] == "Other Artist"

    def test_missing_lyrics_are_omitted(self, client):
        data = client.get("/getSongs").json()
        no_lyrics = next(s for s in data if s.get("SongName") == "No Lyrics")

        assert "Lyrics" not in no_lyrics

    def test_head(self, client):
        response = client.head("/getSongs")

        assert response.status_code == 200
        assert response.content == b""
        assert int(response.headers["content-length"]) == len(client.get("/getSongs").content)


class TestSongSearch:
    """Tests for /songSearch."""

    def test_missing_params(self, client):
        response = client.get("/songSearch")

        assert response.status_code == 400
        assert response.json()["id"] == "MissingTitleOrYear"

    def test_by_year(self, client):
        response = client.get("/songSearch", params={"year": "2016"})

        assert response.status_code == 200
        assert song_names(response) == ["Existing Track", "Rated Track", "Guest Track"]

    def test_by_title(self, client):
        response = client.get("/songSearch", params={"title": "alone"})

        assert response.status_code == 200
        data = response.json()
        assert len(data) == 1
        assert data[0]["SongName"] == "ALONE AGAIN"
        assert data[0]["CoverImage"] == "/getImage?image=early.png"

    def test_shape_matches_get_songs(self, client):
        rated = client.get("/songSearch", params={"title": "rated"}).json()[0]
        assert rated["Rating"] == 3
        assert rated["Artist"] == "Test Artist"


class TestLyricsSearch:
    """Tests for /getSongFromLyrics."""

    def test_missing_lyrics(self, client):
        response = client.get("/getSongFromLyrics")

        assert response.status_code == 400
        assert response.json()["id"] == "MissingLyrics"

    def test_matches(self, client):
        response = client.get("/getSongFromLyrics", params={"lyrics": "alone"})

        assert response.status_code == 200
        data = response.json()
        assert len(data) == 3
        for song in data:
            assert "alone" in song["Lyrics"].lower()
            assert set(song) <= {"CoverImage", "SongName", "Length", "Lyrics"}

    def test_no_rating_or_artist(self, client):
        data = client.get("/getSongFromLyrics", params={"lyrics": "walk"}).json()
        assert data == [{
            "CoverImage": "/getImage?image=once.png",
            "SongName": "Existing Track",
            "Length": "4:00",
            "Lyrics": "I walk alone at night",
        }]


class TestAddSong:
    """Tests for POST /addSong."""

    def test_add_then_update(self, client, store):
        response = client.post("/addSong", data={"title": "New Track", "length": "3:00"})

        assert response.status_code == 201
        assert response.json() == {"message": "Song added successfully.", "id": "SongAdded"}
        track = store.unorganized_album().tracks[-1]
        assert track.name == "New Track"
        assert track.lyrics == ""

        response = client.post("/addSong", data={"title": "new track", "length": "3:15"})

        assert response.status_code == 204
        assert response.content == b""
        assert len(store.unorganized_album().tracks) == 1
        assert store.unorganized_album().tracks[0].length == "3:15"

    def test_update_clears_lyrics(self, client, store):
        response = client.post(
            "/addSong",
            data={"title": "Existing Track", "length": "4:30", "album": "once in a long while"},
        )

        assert response.status_code == 204
        track = store.albums[1].tracks[0]
        assert track.length == "4:30"
        assert track.lyrics == ""

    def test_added_song_is_listed(self, client):
        client.post("/addSong", data={"title": "Listed", "length": "1:23", "album": "Early Days"})

        songs = client.get("/songSearch", params={"title": "listed"}).json()
        assert songs == [{
            "CoverImage": "/getImage?image=early.png",
            "SongName": "Listed",
            "Length": "1:23",
            "Lyrics": "",
            "Artist": "Test Artist",
        }]

    def test_missing_length(self, client, store):
        before = client.get("/getSongs").json()

        response = client.post("/addSong", data={"title": "New Track"})

        assert response.status_code == 400
        assert response.json()["id"] == "MissingFields"
        assert client.get("/getSongs").json() == before

    def test_missing_unorganized_album(self, client, store):
        store.albums.pop(0)

        response = client.post("/addSong", data={"title": "New Track", "length": "3:00"})

        assert response.status_code == 500
        assert response.json()["id"] == "InternalServerError"


class TestAddRating:
    """Tests for POST /addRating."""

    def test_rating_shows_in_songs(self, client):
        response = client.post("/addRating", data={"title": "Existing Track", "rating": "4"})

        assert response.status_code == 200
        data = response.json()
        assert data["song"] == {"title": "Existing Track", "rating": 4}
        assert "Existing Track" in data["message"]

        songs = client.get("/getSongs").json()
        assert songs[0]["SongName"] == "Existing Track"
        assert songs[0]["Rating"] == 4

    def test_case_insensitive_title(self, client):
        response = client.post("/addRating", data={"title": "guest TRACK", "rating": "5"})

        assert response.status_code == 200
        assert response.json()["song"]["title"] == "Guest Track"

    def test_repeat_is_idempotent(self, client):
        client.post("/addRating", data={"title": "Existing Track", "rating": "4"})
        first = client.get("/getSongs").json()
        client.post("/addRating", data={"title": "Existing Track", "rating": "4"})

        assert client.get("/getSongs").json() == first

    def test_unknown_song(self, client):
        response = client.post("/addRating", data={"title": "Unknown Song", "rating": "5"})

        assert response.status_code == 404
        assert response.json()["id"] == "SongNotFound"

    def test_missing_fields(self, client):
        response = client.post("/addRating", data={"title": "Existing Track"})

        assert response.status_code == 400
        assert response.json()["id"] == "MissingFields"

    def test_invalid_rating(self, client):
        response = client.post("/addRating", data={"title": "Existing Track", "rating": "five"})

        assert response.status_code == 400
        assert response.json()["id"] == "InvalidRating"
