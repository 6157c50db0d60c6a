import logging


def test_list_all_returns_catalog_verbatim(client, seed):
    catalog = seed({"news": {"categoryThumbnail": "n.png", "videos": [{"title": "a", "description": "", "url": "u"}]}})
    response = client.get("/api/videos")
    assert response.status_code == 200
    assert response.json() == catalog


def test_list_all_with_missing_file_is_empty(client):
    response = client.get("/api/videos")
    assert response.status_code == 200
    assert response.json() == {}


def test_list_category_videos(client, seed):
    seed({"news": {"categoryThumbnail": "", "videos": [{"title": "a", "description": "", "url": "u"}]}})
    response = client.get("/api/videos/news")
    assert response.status_code == 200
    assert response.json() == [{"title": "a", "description": "", "url": "u"}]


def test_list_unknown_category_is_404(client, seed):
    seed({})
    response = client.get("/api/videos/nope")
    assert response.status_code == 404
    assert response.json()["detail"] == "Category not found"


def test_add_video_to_empty_category(client, seed, read_back):
    seed({"news": {"categoryThumbnail": "", "videos": []}})
    response = client.post("/api/videos/news", json={"title": "T", "url": "U"})
    assert response.status_code == 200
    body = response.json()
    assert body["ok"] is True
    assert body["videos"] == [{"title": "T", "description": "", "url": "U"}]
    assert len(read_back()["news"]["videos"]) == 1


def test_add_video_without_title_is_rejected(client, seed, read_back):
    seed({"news": {"categoryThumbnail": "", "videos": [{"title": "a", "description": "", "url": "u"}]}})
    response = client.post("/api/videos/news", json={"url": "U", "description": "x"})
    assert response.status_code == 400
    assert response.json()["detail"] == "Title and URL are required"
    assert len(read_back()["news"]["videos"]) == 1


def test_add_video_to_unknown_category_is_404(client, seed, read_back):
    seed({"news": {"categoryThumbnail": "", "videos": []}})
    response = client.post("/api/videos/other", json={"title": "T", "url": "U"})
    assert response.status_code == 404
    assert response.json()["detail"] == "Category does not exist"
    assert list(read_back()) == ["news"]


def test_set_video_thumbnail(client, seed, read_back):
    seed({"news": {"categoryThumbnail": "", "videos": [{"title": "a", "description": "", "url": "u"}]}})
    response = client.patch("/api/videos/news/0/thumbnail", json={"thumbnail": "t.png"})
    assert response.status_code == 200
    assert response.json()["videos"][0]["thumbnail"] == "t.png"
    assert read_back()["news"]["videos"][0]["thumbnail"] == "t.png"


def test_set_video_thumbnail_errors(client, seed):
    seed({"news": {"categoryThumbnail": "", "videos": [{"title": "a", "description": "", "url": "u"}]}})
    assert client.patch("/api/videos/news/0/thumbnail", json={}).status_code == 400
    assert client.patch("/api/videos/news/3/thumbnail", json={"thumbnail": "t"}).status_code == 404
    assert client.patch("/api/videos/nope/0/thumbnail", json={"thumbnail": "t"}).status_code == 404


def test_delete_video_by_index(client, seed, read_back):
    videos = [{"title": t, "description": "", "url": t} for t in ("a", "b", "c")]
    seed({"news": {"categoryThumbnail": "", "videos": videos}})
    response = client.delete("/api/videos/news/0")
    assert response.status_code == 200
    assert [v["title"] for v in response.json()["videos"]] == ["b", "c"]
    assert [v["title"] for v in read_back()["news"]["videos"]] == ["b", "c"]


def test_delete_video_unknown_index_is_404(client, seed):
    seed({"news": {"categoryThumbnail": "", "videos": []}})
    response = client.delete("/api/videos/news/0")
    assert response.status_code == 404
    assert response.json()["detail"] == "Video not found"


def test_delete_video_non_integer_index_is_rejected(client, seed):
    seed({"news": {"categoryThumbnail": "", "videos": []}})
    assert client.delete("/api/videos/news/first").status_code == 422


def test_flat_category_record_is_not_overwritten(client, seed, read_back):
    flat = [{"title": "a", "description": "", "url": "u"}]
    seed({"old": flat})

    response = client.post("/api/videos/old", json={"title": "b", "url": "v"})
    assert response.status_code == 400
    assert response.json()["detail"] == "Category record is malformed"
    assert client.patch("/api/categories/old/thumbnail", json={"thumbnail": "x.png"}).status_code == 400
    assert read_back() == {"old": flat}


def test_rejected_delete_is_logged(client, seed, caplog):
    seed({"news": {"categoryThumbnail": "", "videos": []}})
    with caplog.at_level(logging.WARNING, logger="app.videos"):
        client.delete("/api/videos/news/4")
    assert "[DELETE] Rejected" in caplog.text
