from __future__ import annotations

import asyncio
import json
import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, List

import httpx
import pydantic

from libs.core.exceptions import CatalogLoadError
from libs.core.models import Podcast
from libs.core.settings import Settings, get_settings

logger = logging.getLogger(__name__)


class CatalogLoader(ABC):
    """Source of the complete podcast catalog."""

    @abstractmethod
    async def load(self) -> List[Podcast]:
        """Return every podcast, or raise :class:`CatalogLoadError`."""


def parse_catalog(payload: Any, source: str) -> List[Podcast]:
    """Validate a decoded JSON payload into podcasts.

    The payload must be a JSON array of podcast records. One invalid record
    fails the whole catalog.
    """
    if not isinstance(payload, list):
        raise CatalogLoadError(
            f"Expected a JSON array of podcasts, got {type(payload).__name__}",
            source=source,
        )
    try:
        return [Podcast.model_validate(record) for record in payload]
    except pydantic.ValidationError as exc:
        raise CatalogLoadError(f"Invalid podcast record: {exc}", source=source) from exc


class HttpCatalogLoader(CatalogLoader):
    """Fetch the catalog with a single GET request."""

    def __init__(
        self,
        url: str,
        *,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        if not url:
            raise CatalogLoadError("CATALOG_URL is not set")
        self.url = url
        self.timeout = timeout
        # Injected in tests to avoid real network calls
        self._transport = transport

    async def load(self) -> List[Podcast]:
        logger.info("Fetching podcast catalog", extra={"source": self.url})
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout, transport=self._transport
            ) as client:
                response = await client.get(self.url)
                response.raise_for_status()
            payload = response.json()
        except httpx.HTTPError as exc:
            raise CatalogLoadError(f"Failed to fetch catalog: {exc}", source=self.url) from exc
        except ValueError as exc:
            raise CatalogLoadError("Catalog response is not valid JSON", source=self.url) from exc
        podcasts = parse_catalog(payload, self.url)
        logger.info("Podcast catalog fetched", extra={"source": self.url, "podcasts": len(podcasts)})
        return podcasts


class FileCatalogLoader(CatalogLoader):
    """Read the catalog from a local JSON dump."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    async def load(self) -> List[Podcast]:
        source = str(self.path)
        try:
            text = await asyncio.to_thread(self.path.read_text, encoding="utf-8")
        except OSError as exc:
            raise CatalogLoadError(f"Cannot read catalog file: {exc}", source=source) from exc
        except UnicodeDecodeError as exc:
            raise CatalogLoadError("Catalog file is not valid UTF-8", source=source) from exc
        try:
            payload = json.loads(text)
        except json.JSONDecodeError as exc:
            raise CatalogLoadError("Catalog file is not valid JSON", source=source) from exc
        podcasts = parse_catalog(payload, source)
        logger.info("Podcast catalog read", extra={"source": source, "podcasts": len(podcasts)})
        return podcasts


def get_loader(settings: Settings | None = None) -> CatalogLoader:
    """Pick the catalog source configured in settings."""
    settings = settings or get_settings()
    if settings.catalog_path:
        return FileCatalogLoader(settings.catalog_path)
    return HttpCatalogLoader(settings.catalog_url, timeout=settings.catalog_timeout)


__all__ = [
    "CatalogLoader",
    "HttpCatalogLoader",
    "FileCatalogLoader",
    "get_loader",
    "parse_catalog",
]
