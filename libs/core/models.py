"""Pydantic models representing core domain entities."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import FrozenSet, Optional

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator
from pydantic.alias_generators import to_camel


class Podcast(BaseModel):
    """Single show of the catalog.

    Instances are frozen and hashable so the same object can be shared by
    every view of :class:`libs.catalog.PodcastIndex` without copying.
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    podcast_number: int = Field(..., description="Unique catalog number")
    title: str
    tags: FrozenSet[str] = Field(default_factory=frozenset)
    audio_link: str = ""
    create_time: datetime = Field(
        default_factory=lambda: datetime.fromtimestamp(0, tz=timezone.utc)
    )
    description: str = ""
    length_in_seconds: Optional[int] = None

    @field_validator("create_time", mode="before")
    @classmethod
    def _from_epoch(cls, value: object) -> object:
        # The upstream feed sends creation time as epoch seconds
        if isinstance(value, (int, float)):
            try:
                return datetime.fromtimestamp(value, tz=timezone.utc)
            except (OverflowError, OSError, ValueError) as exc:
                raise ValueError(f"createTime {value!r} is out of range") from exc
        return value

    @field_serializer("create_time")
    def _to_epoch(self, value: datetime) -> int:
        return int(value.timestamp())

    @field_serializer("tags")
    def _sorted_tags(self, value: FrozenSet[str]) -> list[str]:
        return sorted(value)


class PodcastQuery(BaseModel):
    """Substring search parameters with a pagination window."""

    query: str = ""
    limit: int = Field(20, ge=0)
    skip: int = Field(0, ge=0)


class TagCount(BaseModel):
    """Number of podcasts carrying ``tag`` within a filtered result."""

    tag: str
    count: int


__all__ = ["Podcast", "PodcastQuery", "TagCount"]
