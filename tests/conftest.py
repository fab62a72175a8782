import sys
from pathlib import Path
from typing import List

import pytest
from fastapi.testclient import TestClient

# Ensure project root on sys.path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from libs.catalog import CatalogLoader, PodcastIndex
from libs.core.models import Podcast


class StaticLoader(CatalogLoader):
    """Loader returning a fixed list of podcasts."""

    def __init__(self, podcasts: List[Podcast]) -> None:
        self.podcasts = podcasts
        self.calls = 0

    async def load(self) -> List[Podcast]:
        self.calls += 1
        return list(self.podcasts)


@pytest.fixture()
def podcasts() -> List[Podcast]:
    """Small catalog, deliberately unordered."""

    return [
        Podcast(podcast_number=1, title="Beta Cast", tags={"tech"}),
        Podcast(
            podcast_number=3,
            title="Alpha Show",
            tags={"tech", "news"},
            audio_link="https://cdn.example.com/3.mp3",
            create_time=1_600_000_000,
            description="Third show",
        ),
        Podcast(podcast_number=2, title="Gamma Talk", tags={"news"}),
    ]


@pytest.fixture()
def index(podcasts) -> PodcastIndex:
    return PodcastIndex(podcasts)


@pytest.fixture()
def client(podcasts, monkeypatch):
    """FastAPI test client whose catalog comes from the podcasts fixture."""

    from apps.api import main

    loader = StaticLoader(podcasts)
    monkeypatch.setattr(main, "get_loader", lambda: loader)

    with TestClient(main.app) as test_client:
        yield test_client

    main.app.dependency_overrides.clear()
