import pytest


@pytest.fixture
def santa_todo(client, santa):
    headers, _ = santa
    response = client.post(
        "/api/todos",
        json={"title": "Feed the reindeer", "priority": "high", "due_date": "2024-12-24"},
        headers=headers,
    )
    assert response.status_code == 201
    return response.json()["data"]


def test_create_todo(santa_todo):
    assert santa_todo["title"] == "Feed the reindeer"
    assert santa_todo["priority"] == "high"
    assert santa_todo["completed"] is False
    assert santa_todo["due_date"] == "2024-12-24T00:00:00.000Z"


def test_create_todo_defaults_priority(client, santa):
    headers, _ = santa
    todo = client.post("/api/todos", json={"title": "Wrap gifts", "priority": ""}, headers=headers).json()["data"]
    assert todo["priority"] == "medium"


def test_create_todo_rejects_invalid_priority(client, santa):
    headers, _ = santa
    response = client.post("/api/todos", json={"title": "x", "priority": "urgent"}, headers=headers)
    assert response.status_code == 400
    assert response.json()["error"] == "priority must be one of: low, medium, high"


def test_create_todo_requires_title(client, santa):
    headers, _ = santa
    response = client.post("/api/todos", json={"description": "no title"}, headers=headers)
    assert response.status_code == 400
    assert response.json()["error"] == "title is required"


def test_create_todo_rejects_bad_due_date(client, santa):
    headers, _ = santa
    response = client.post("/api/todos", json={"title": "x", "due_date": "someday"}, headers=headers)
    assert response.status_code == 400


def test_todos_require_authentication(client):
    assert client.get("/api/todos").status_code == 401
    assert client.post("/api/todos", json={"title": "x"}).status_code == 401


def test_list_only_returns_own_todos(client, santa, grinch, santa_todo):
    grinch_headers, _ = grinch
    client.post("/api/todos", json={"title": "Steal Christmas"}, headers=grinch_headers)

    santa_headers, _ = santa
    titles = [t["title"] for t in client.get("/api/todos", headers=santa_headers).json()["data"]]
    assert titles == ["Feed the reindeer"]


def test_list_filters(client, santa, santa_todo):
    headers, _ = santa
    client.post("/api/todos", json={"title": "Bake", "priority": "low", "completed": True}, headers=headers)

    done = client.get("/api/todos", params={"completed": "true"}, headers=headers).json()["data"]
    assert [t["title"] for t in done] == ["Bake"]

    high = client.get("/api/todos", params={"priority": "high"}, headers=headers).json()["data"]
    assert [t["title"] for t in high] == ["Feed the reindeer"]


def test_patch_updates_only_given_fields(client, santa, santa_todo):
    headers, _ = santa
    response = client.patch(f"/api/todos/{santa_todo['id']}", json={"completed": True}, headers=headers)
    assert response.status_code == 200
    updated = response.json()["data"]
    assert updated["completed"] is True
    assert updated["title"] == "Feed the reindeer"
    assert updated["priority"] == "high"
    assert updated["updated_at"] is not None


def test_patch_can_clear_due_date(client, santa, santa_todo):
    headers, _ = santa
    response = client.patch(f"/api/todos/{santa_todo['id']}", json={"due_date": None}, headers=headers)
    assert response.json()["data"]["due_date"] is None


def test_patch_rejects_invalid_input(client, santa, santa_todo):
    headers, _ = santa
    url = f"/api/todos/{santa_todo['id']}"

    empty = client.patch(url, json={}, headers=headers)
    assert empty.status_code == 400
    assert empty.json()["error"] == "No fields to update"

    assert client.patch(url, json={"priority": "urgent"}, headers=headers).status_code == 400
    assert client.patch(url, json={"title": "   "}, headers=headers).status_code == 400


def test_cannot_touch_someone_elses_todo(client, santa, grinch, santa_todo):
    grinch_headers, _ = grinch
    url = f"/api/todos/{santa_todo['id']}"

    patched = client.patch(url, json={"title": "Stolen"}, headers=grinch_headers)
    assert patched.status_code == 404
    assert patched.json()["error"] == "Todo not found"
    assert client.delete(url, headers=grinch_headers).status_code == 404

    santa_headers, _ = santa
    todos = client.get("/api/todos", headers=santa_headers).json()["data"]
    assert todos[0]["title"] == "Feed the reindeer"


def test_missing_todo_is_404(client, santa):
    headers, _ = santa
    assert client.patch("/api/todos/9999", json={"completed": True}, headers=headers).status_code == 404
    assert client.delete("/api/todos/9999", headers=headers).status_code == 404


def test_delete_todo(client, santa, santa_todo):
    headers, _ = santa
    response = client.delete(f"/api/todos/{santa_todo['id']}", headers=headers)
    assert response.status_code == 200
    assert response.json() == {"success": True, "message": "Todo deleted successfully"}
    assert client.get("/api/todos", headers=headers).json()["data"] == []


def test_creating_todo_bumps_counters(client, santa, santa_todo):
    stats = client.get("/api/stats").json()["data"]
    assert stats["today"]["newTodos"] == 1
    assert stats["total"]["todos"] == 1
    assert stats["total"]["users"] == 1


def test_out_of_range_id_is_bad_request(client, santa):
    headers, _ = santa
    huge = "99999999999999999999"
    assert client.patch(f"/api/todos/{huge}", json={"completed": True}, headers=headers).status_code == 400
    assert client.delete(f"/api/todos/{huge}", headers=headers).status_code == 400
