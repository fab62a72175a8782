import xml.etree.ElementTree as ET

import pytest
from fastapi.testclient import TestClient


def numbers(response):
    return [p["podcastNumber"] for p in response.json()]


def test_all_podcasts(client):
    response = client.get("/api/allPodcasts")
    assert response.status_code == 200
    assert numbers(response) == [3, 2, 1]


def test_podcast_serialization(client):
    response = client.get("/api/podcasts/3")
    assert response.status_code == 200
    data = response.json()
    assert data["title"] == "Alpha Show"
    assert data["tags"] == ["news", "tech"]
    assert data["audioLink"] == "https://cdn.example.com/3.mp3"
    assert data["createTime"] == 1_600_000_000


def test_podcast_not_found(client):
    response = client.get("/api/podcasts/99")
    assert response.status_code == 404
    assert response.json()["detail"] == "Podcast not found"


def test_search_by_query(client):
    response = client.get("/api/search/podcasts", params={"query": "cast"})
    assert response.status_code == 200
    assert numbers(response) == [1]


def test_search_by_tags_and_pagination(client):
    response = client.get("/api/search/podcasts", params={"tags": "tech,news"})
    assert numbers(response) == [3]

    response = client.get(
        "/api/search/podcasts", params={"tags": "tech", "limit": 1, "skip": 1}
    )
    assert numbers(response) == [1]


def test_search_rejects_negative_skip(client):
    response = client.get("/api/search/podcasts", params={"skip": -1})
    assert response.status_code == 422


def test_search_rss(client):
    response = client.get("/api/search/podcasts/rss", params={"tags": "news"})
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("application/rss+xml")
    channel = ET.fromstring(response.text).find("channel")
    assert channel.findtext("title") == "FDR Finder: news"
    assert [i.findtext("guid") for i in channel.findall("item")] == ["3", "2"]


def test_all_tags(client):
    response = client.get("/api/allTags")
    assert response.json() == ["news", "tech"]


def test_filtered_tags_with_counts(client):
    response = client.get("/api/filteredTagsWithCounts", params={"tags": "tech"})
    assert response.json() == [{"tag": "news", "count": 1}]

    response = client.get("/api/filteredTagsWithCounts")
    assert response.json() == [{"tag": "news", "count": 2}, {"tag": "tech", "count": 2}]


def test_index_dependency_override(client):
    from apps.api import main
    from libs.catalog import PodcastIndex
    from libs.core.models import Podcast

    main.app.dependency_overrides[main.get_index] = lambda: PodcastIndex(
        [Podcast(podcast_number=10, title="Override")]
    )
    response = client.get("/api/allPodcasts")
    assert numbers(response) == [10]


def test_missing_index_returns_503(client):
    client.app.state.index = None
    response = client.get("/api/allTags")
    assert response.status_code == 503


def test_startup_fails_when_catalog_cannot_load(monkeypatch):
    from apps.api import main
    from libs.catalog import CatalogLoader
    from libs.core.exceptions import CatalogLoadError

    class FailingLoader(CatalogLoader):
        async def load(self):
            raise CatalogLoadError("unreachable", source="https://catalog.example.com")

    monkeypatch.setattr(main, "get_loader", lambda: FailingLoader())

    with pytest.raises(CatalogLoadError):
        with TestClient(main.app):
            pass
