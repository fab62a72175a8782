"""Commonly used typing helpers."""

from __future__ import annotations

from typing import Dict, TypeAlias

# Unique, totally ordered podcast identifier.
PodcastNumber: TypeAlias = int
# Opaque label attached to podcasts.
PodcastTag: TypeAlias = str
TagCounts: TypeAlias = Dict[PodcastTag, int]

__all__ = ["PodcastNumber", "PodcastTag", "TagCounts"]
