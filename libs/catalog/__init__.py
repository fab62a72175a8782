"""Podcast catalog loading and indexing."""

from .loader import CatalogLoader, FileCatalogLoader, HttpCatalogLoader, get_loader
from .index import PodcastIndex

__all__ = [
    "CatalogLoader",
    "FileCatalogLoader",
    "HttpCatalogLoader",
    "PodcastIndex",
    "get_loader",
]
