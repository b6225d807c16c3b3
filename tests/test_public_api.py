def test_health(client):
    body = client.get("/api/health").json()
    assert body["status"] == "ok"
    assert body["timestamp"].endswith("Z")
    assert len(body["timestamp"]) == len("2024-12-25T00:00:00.000Z")


def test_timeline_is_sorted(client):
    body = client.get("/api/timeline").json()
    titles = [event["title"] for event in body["data"]]
    assert titles[0].startswith("Early December")
    assert titles[-1].startswith("December 25")
    assert body["pagination"]["total"] == 4


def test_playlist_and_play_count(client):
    songs = client.get("/api/music").json()["data"]
    assert songs[0]["title"] == "Jingle Bells"
    song_id = songs[0]["id"]
    before = songs[0]["play_count"]

    first = client.post(f"/api/music/{song_id}/play")
    assert first.status_code == 200
    assert first.json()["data"]["play_count"] == before + 1

    second = client.post(f"/api/music/{song_id}/play").json()["data"]
    assert second["play_count"] == before + 2


def test_play_missing_song(client):
    response = client.post("/api/music/9999/play")
    assert response.status_code == 404
    assert response.json() == {"success": False, "error": "Song not found"}


def test_stats_start_empty(client):
    data = client.get("/api/stats").json()["data"]
    assert data == {
        "today": {"visits": 0, "activeUsers": 0, "newWishes": 0, "newTodos": 0},
        "total": {"wishes": 0, "todos": 0, "users": 0},
    }


def test_visits_accumulate(client):
    for _ in range(3):
        response = client.post("/api/stats/visit")
        assert response.json() == {"success": True, "message": "Visit recorded"}
    assert client.get("/api/stats").json()["data"]["today"]["visits"] == 3


def test_malformed_body_is_bad_request(client):
    response = client.post("/api/wishes", content="not json", headers={"Content-Type": "application/json"})
    assert response.status_code == 400
    assert response.json()["success"] is False


def test_play_out_of_range_song_is_bad_request(client):
    assert client.post("/api/music/99999999999999999999/play").status_code == 400
