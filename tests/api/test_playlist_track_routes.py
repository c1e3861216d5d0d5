"""Playlist Track Routes — membership listing and the add-track flow.

Tests cover:
    - GET /playlists/{id}/tracks: [] for an empty playlist, ordered by track id
    - POST /playlists/{id}/tracks: 201, then 400 duplicate with one stored row
    - check order: malformed id before body, body before existence,
      missing playlist (404) before missing track (400)
"""

import pytest


async def test_empty_playlist_has_no_tracks(client, playlist):
    res = await client.get(f"/playlists/{playlist.id}/tracks")
    assert res.status_code == 200
    assert res.json() == []


async def test_tracks_of_unknown_playlist(client):
    res = await client.get("/playlists/999999/tracks")
    assert res.status_code == 404
    assert res.json() == {"error": "Playlist not found"}


async def test_tracks_of_malformed_playlist_id(client):
    res = await client.get("/playlists/1.5/tracks")
    assert res.status_code == 400
    assert res.json() == {"error": "Playlist ID must be a valid positive integer"}


async def test_add_track(client, tracks, playlist):
    res = await client.post(
        f"/playlists/{playlist.id}/tracks", json={"trackId": tracks[2].id},
    )
    assert res.status_code == 201
    body = res.json()
    assert body["playlist_id"] == playlist.id
    assert body["track_id"] == tracks[2].id
    assert body["id"] > 0


async def test_playlist_tracks_ordered_by_track_id(client, tracks, playlist):
    for track in reversed(tracks):
        await client.post(
            f"/playlists/{playlist.id}/tracks", json={"trackId": track.id},
        )
    res = await client.get(f"/playlists/{playlist.id}/tracks")
    assert [t["id"] for t in res.json()] == sorted(t.id for t in tracks)
    assert set(res.json()[0]) == {"id", "name", "duration_ms"}


async def test_add_same_track_twice(client, tracks, playlist):
    url = f"/playlists/{playlist.id}/tracks"

    first = await client.post(url, json={"trackId": tracks[0].id})
    second = await client.post(url, json={"trackId": tracks[0].id})

    assert first.status_code == 201
    assert second.status_code == 400
    assert second.json() == {"error": "Track is already in this playlist"}

    listed = (await client.get(url)).json()
    assert [t["id"] for t in listed] == [tracks[0].id]


async def test_add_unknown_track(client, playlist):
    res = await client.post(
        f"/playlists/{playlist.id}/tracks", json={"trackId": 999999},
    )
    assert res.status_code == 400
    assert res.json() == {"error": "Track does not exist"}


async def test_add_to_unknown_playlist_reports_playlist_first(client):
    res = await client.post("/playlists/999999/tracks", json={"trackId": 999999})
    assert res.status_code == 404
    assert res.json() == {"error": "Playlist not found"}


async def test_malformed_playlist_id_checked_before_body(client):
    res = await client.post("/playlists/abc/tracks")
    assert res.status_code == 400
    assert res.json() == {"error": "Playlist ID must be a valid positive integer"}


async def test_add_without_body(client, playlist):
    res = await client.post(f"/playlists/{playlist.id}/tracks")
    assert res.status_code == 400
    assert res.json() == {"error": "Request body is required"}


async def test_add_without_track_id(client, playlist):
    res = await client.post(f"/playlists/{playlist.id}/tracks", json={})
    assert res.status_code == 400
    assert res.json() == {"error": "trackId is required in request body"}


@pytest.mark.parametrize("value", [0, -3, 1.5, "2", True])
async def test_add_invalid_track_id(client, playlist, value):
    res = await client.post(
        f"/playlists/{playlist.id}/tracks", json={"trackId": value},
    )
    assert res.status_code == 400
    assert res.json() == {"error": "trackId must be a positive integer"}


async def test_body_checked_before_playlist_existence(client):
    res = await client.post("/playlists/999999/tracks", json={})
    assert res.status_code == 400
    assert res.json() == {"error": "trackId is required in request body"}


async def test_add_track_with_integral_float_id(client, tracks, playlist):
    res = await client.post(
        f"/playlists/{playlist.id}/tracks", json={"trackId": float(tracks[1].id)},
    )
    assert res.status_code == 201
    assert res.json()["track_id"] == tracks[1].id


async def test_tracks_of_playlist_with_huge_id(client):
    res = await client.get("/playlists/" + "9" * 5000 + "/tracks")
    assert res.status_code == 404
    assert res.json() == {"error": "Playlist not found"}
