"""Core library exposing domain models, settings, exceptions and types."""

from .settings import Settings, get_settings
from .exceptions import CatalogLoadError, DomainError, NotFoundError, ValidationError, Error
from .models import Podcast, PodcastQuery, TagCount
from .types import PodcastNumber, PodcastTag, TagCounts

__all__ = [
    "Settings",
    "get_settings",
    "DomainError",
    "NotFoundError",
    "ValidationError",
    "CatalogLoadError",
    "Error",
    "Podcast",
    "PodcastQuery",
    "TagCount",
    "PodcastNumber",
    "PodcastTag",
    "TagCounts",
]
