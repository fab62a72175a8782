from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, List, Optional

from fastapi import Depends, FastAPI, HTTPException, Query, Request, status
from fastapi.responses import Response

from libs.catalog import PodcastIndex, get_loader
from libs.core.exceptions import CatalogLoadError
from libs.core.models import Podcast, TagCount
from libs.core.settings import get_settings
from libs.feeds import render_rss
from libs.logging import setup_logging
from libs.usecases import SearchPodcasts

logger = logging.getLogger(__name__)

RSS_MEDIA_TYPE = "application/rss+xml"


# ---------------------------------------------------------------------------
# Application lifecycle


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Load the catalog once; the service cannot start without it."""
    setup_logging()
    try:
        app.state.index = await PodcastIndex.load(get_loader())
    except CatalogLoadError as exc:
        logger.exception("Podcast catalog could not be loaded", extra={"source": exc.source})
        raise
    yield


app = FastAPI(title="FDR Finder API", lifespan=lifespan)


# ---------------------------------------------------------------------------
# Dependency factories


def get_index(request: Request) -> PodcastIndex:
    index = getattr(request.app.state, "index", None)
    if index is None:
        raise HTTPException(
            status.HTTP_503_SERVICE_UNAVAILABLE, detail="Podcast catalog is not loaded"
        )
    return index


def search_uc(index: PodcastIndex = Depends(get_index)) -> SearchPodcasts:
    return SearchPodcasts(index)


def parse_tags(tags: Optional[str] = Query(None)) -> List[str]:
    """Split the comma-separated ``tags`` query parameter."""
    if not tags:
        return []
    return [t.strip() for t in tags.split(",") if t.strip()]


def page_limit(limit: Optional[int] = Query(None, ge=0)) -> int:
    settings = get_settings()
    if limit is None:
        return settings.search_default_limit
    return min(limit, settings.search_max_limit)


# Routes ---------------------------------------------------------------------


@app.get("/api/allPodcasts", response_model=List[Podcast])
def all_podcasts(index: PodcastIndex = Depends(get_index)) -> List[Podcast]:
    return index.get_all_podcasts()


@app.get("/api/podcasts/{podcast_number}", response_model=Podcast)
def get_podcast(podcast_number: int, index: PodcastIndex = Depends(get_index)) -> Podcast:
    podcast = index.get_podcast(podcast_number)
    if podcast is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Podcast not found")
    return podcast


@app.get("/api/search/podcasts", response_model=List[Podcast])
def search_podcasts(
    query: str = "",
    skip: int = Query(0, ge=0),
    limit: int = Depends(page_limit),
    tags: List[str] = Depends(parse_tags),
    uc: SearchPodcasts = Depends(search_uc),
) -> List[Podcast]:
    return uc(query, tags, limit=limit, skip=skip)


@app.get("/api/search/podcasts/rss")
def search_podcasts_rss(
    query: str = "",
    tags: List[str] = Depends(parse_tags),
    uc: SearchPodcasts = Depends(search_uc),
) -> Response:
    settings = get_settings()
    podcasts = uc(query, tags, limit=settings.search_max_limit)
    parts = [f'"{query}"'] if query else []
    parts.extend(tags)
    title = "FDR Finder" + (f": {', '.join(parts)}" if parts else "")
    body = render_rss(podcasts, title=title, link=settings.public_url)
    return Response(content=body, media_type=RSS_MEDIA_TYPE)


@app.get("/api/allTags", response_model=List[str])
def all_tags(index: PodcastIndex = Depends(get_index)) -> List[str]:
    return sorted(index.get_all_tags())


@app.get("/api/filteredTagsWithCounts", response_model=List[TagCount])
def filtered_tags_with_counts(
    tags: List[str] = Depends(parse_tags),
    index: PodcastIndex = Depends(get_index),
) -> List[TagCount]:
    counts = index.get_filtered_tags_with_podcast_counts(tags)
    ordered = sorted(counts.items(), key=lambda kv: (-kv[1], kv[0]))
    return [TagCount(tag=tag, count=count) for tag, count in ordered]


__all__ = ["app"]
