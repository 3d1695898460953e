from datetime import datetime, timezone

from app.domains.songs.exceptions import DetailFetchError, StoreError

LYRICS = "a\n\nb\n\nc\n\nd\n\ne"

UPDATE_BODY = {
    "group": "Muse",
    "song": "Uprising",
    "release_date": "07.09.2009",
    "text": "new\n\ntext",
    "link": "http://y"
}


def test_create_and_list(client, detail_provider):
    response = client.post("/songs", json={"group": "Muse", "song": "Supermassive Black Hole"})

    assert response.status_code == 201
    assert response.headers["content-type"] == "application/json"
    created = response.json()
    assert created["id"] >= 1
    assert created["group"] == "Muse"
    assert created["song"] == "Supermassive Black Hole"
    assert created["release_date"].startswith("2006-07-16")
    assert created["text"] == "v1\n\nv2"
    assert created["link"] == "http://x"
    assert created["created_at"] and created["updated_at"]
    assert detail_provider.calls == [("Muse", "Supermassive Black Hole")]

    response = client.get("/songs")
    assert response.status_code == 200
    assert response.json() == [created]


def test_create_detail_failure_is_server_error(client, detail_provider):
    detail_provider.error = DetailFetchError("status 500")

    response = client.post("/songs", json={"group": "Muse", "song": "Uprising"})

    assert response.status_code == 500
    assert response.text == "Проблема на сервере"


def test_create_bad_release_date_is_server_error(client, detail_provider):
    detail_provider.detail.release_date = "2006/07/16"

    response = client.post("/songs", json={"group": "Muse", "song": "Uprising"})

    assert response.status_code == 500
    assert response.text == "Проблема на сервере"


def test_create_invalid_body(client):
    response = client.post("/songs", content="{not json", headers={"Content-Type": "application/json"})
    assert response.status_code == 400
    assert response.text == "Неправильный формат данных"

    response = client.post("/songs", json={"group": "Muse"})
    assert response.status_code == 400
    assert response.text == "Неправильный формат данных"


def test_get_song(client, add_song):
    song = add_song()

    response = client.get(f"/songs/{song.id}")
    assert response.status_code == 200
    assert response.json()["id"] == song.id

    response = client.get("/songs/999")
    assert response.status_code == 404
    assert response.text == "Песня не найдена"


def test_verses_in_range(client, add_song):
    song = add_song(text=LYRICS)

    response = client.get(f"/songs/{song.id}/text", params={"page": 2, "page_size": 2})

    assert response.status_code == 200
    assert response.json() == ["c", "d"]


def test_verses_default_pagination(client, add_song):
    song = add_song(text=LYRICS)

    response = client.get(f"/songs/{song.id}/text", params={"page": "x", "page_size": ""})

    assert response.status_code == 200
    assert response.json() == ["a", "b", "c", "d", "e"]


def test_verses_past_end(client, add_song):
    song = add_song(text=LYRICS)

    response = client.get(f"/songs/{song.id}/text", params={"page": 4, "page_size": 2})

    assert response.status_code == 400
    assert response.text == "Страница выходит за пределы доступного диапазона"


def test_verses_page_starting_at_end_is_empty(client, add_song):
    song = add_song(text=LYRICS)

    response = client.get(f"/songs/{song.id}/text", params={"page": 6, "page_size": 1})

    assert response.status_code == 200
    assert response.json() == []


def test_verses_bad_id_and_missing_song(client):
    response = client.get("/songs/abc/text")
    assert response.status_code == 400
    assert response.text == "Неправильный формат ID"

    response = client.get("/songs/123/text")
    assert response.status_code == 404
    assert response.text == "Песня не найдена"


def test_non_ascii_digits_are_not_an_id(client, add_song):
    song = add_song(text=LYRICS)
    assert song.id == 1

    response = client.get("/songs/١/text")
    assert response.status_code == 400
    assert response.text == "Неправильный формат ID"

    response = client.get("/songs/1%0A/text")
    assert response.status_code == 400
    assert response.text == "Неправильный формат ID"


def test_update(client, add_song):
    song = add_song()

    response = client.put(f"/songs/{song.id}", json=UPDATE_BODY)

    assert response.status_code == 200
    updated = response.json()
    assert updated["id"] == song.id
    assert updated["song"] == "Uprising"
    assert updated["release_date"].startswith("2009-09-07")
    assert updated["text"] == "new\n\ntext"
    assert datetime.fromisoformat(updated["created_at"].replace("Z", "+00:00")) == song.created_at


def test_update_not_found(client):
    response = client.put("/songs/999999", json=UPDATE_BODY)

    assert response.status_code == 404
    assert response.text == "Песня не найдена"


def test_update_bad_input(client, add_song):
    song = add_song()

    response = client.put("/songs/abc", json=UPDATE_BODY)
    assert response.status_code == 400
    assert response.text == "Неправильный формат ID"

    response = client.put(f"/songs/{song.id}", json={**UPDATE_BODY, "release_date": "2009-09-07"})
    assert response.status_code == 400
    assert response.text == "Неправильный формат даты"

    body = {k: v for k, v in UPDATE_BODY.items() if k != "release_date"}
    response = client.put(f"/songs/{song.id}", json=body)
    assert response.status_code == 400
    assert response.text == "Неправильный формат даты"

    response = client.put(f"/songs/{song.id}", content="[", headers={"Content-Type": "application/json"})
    assert response.status_code == 400
    assert response.text == "Неправильный формат данных"


def test_delete_twice(client, detail_provider):
    created = client.post("/songs", json={"group": "Muse", "song": "Uprising"}).json()

    response = client.delete(f"/songs/{created['id']}")
    assert response.status_code == 204
    assert response.content == b""

    response = client.delete(f"/songs/{created['id']}")
    assert response.status_code == 404
    assert response.text == "Песня не найдена"


def test_delete_bad_id(client):
    response = client.delete("/songs/1.5")

    assert response.status_code == 400
    assert response.text == "Неправильный формат ID"


def test_filter_by_release_date(client, add_song):
    add_song(title="Supermassive Black Hole", release_date=datetime(2006, 7, 16, tzinfo=timezone.utc))
    second = add_song(title="Uprising", release_date=datetime(2009, 1, 20, tzinfo=timezone.utc))

    response = client.get("/songs", params={"release_date": "20.01.2009"})

    assert response.status_code == 200
    body = response.json()
    assert len(body) == 1
    assert body[0]["id"] == second.id


def test_filter_by_group_and_title(client, add_song):
    add_song(group="Muse", title="Uprising")
    add_song(group="Muse", title="Hysteria")
    add_song(group="Queen", title="Uprising")

    body = client.get("/songs", params={"group": "Muse"}).json()
    assert {s["song"] for s in body} == {"Uprising", "Hysteria"}

    body = client.get("/songs", params={"group": "Muse", "song": "Uprising"}).json()
    assert len(body) == 1


def test_filter_bad_date(client):
    response = client.get("/songs", params={"release_date": "2009-01-20"})

    assert response.status_code == 400
    assert response.text == "Неправильный формат даты"

    response = client.get("/songs", params={"release_date": "١٦.07.2006"})

    assert response.status_code == 400
    assert response.text == "Неправильный формат даты"


def test_list_pagination(client, add_song):
    for day in range(1, 6):
        add_song(title=f"day {day}", release_date=datetime(2020, 1, day, tzinfo=timezone.utc))

    first = client.get("/songs", params={"page": 1, "page_size": 2}).json()
    second = client.get("/songs", params={"page": 2, "page_size": 2}).json()
    default = client.get("/songs", params={"page": "abc", "page_size": "-1"}).json()

    assert [s["song"] for s in first] == ["day 5", "day 4"]
    assert [s["song"] for s in second] == ["day 3", "day 2"]
    assert len(default) == 5


def test_list_empty(client):
    response = client.get("/songs")

    assert response.status_code == 200
    assert response.json() == []


def test_store_failure_is_server_error(client, store, mocker):
    mocker.patch.object(store, "list", side_effect=StoreError("connection lost"))

    response = client.get("/songs")

    assert response.status_code == 500
    assert response.text == "Проблема на сервере"
