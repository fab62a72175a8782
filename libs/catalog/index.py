from __future__ import annotations

import logging
from itertools import islice
from typing import Dict, Iterable, List, Optional, Set

from libs.core.models import Podcast, PodcastQuery
from libs.core.types import PodcastNumber, PodcastTag, TagCounts

from .loader import CatalogLoader

logger = logging.getLogger(__name__)


class PodcastIndex:
    """Read-only in-memory index over the podcast catalog.

    Three views share the same :class:`Podcast` objects:

    - a list ordered by descending podcast number (canonical listing order),
    - a lookup by podcast number,
    - a grouping of podcasts by tag.

    The index is built once and never mutated afterwards, so any number of
    readers may query it concurrently.
    """

    def __init__(self, podcasts: Iterable[Podcast]) -> None:
        # Stable sort ascending then reverse. Duplicate numbers are not
        # expected upstream; their relative order here is not meaningful.
        ordered = sorted(podcasts, key=lambda p: p.podcast_number)
        ordered.reverse()
        self._num_sorted: List[Podcast] = ordered

        self._by_tag: Dict[PodcastTag, Set[Podcast]] = {}
        for podcast in ordered:
            for tag in podcast.tags:
                self._by_tag.setdefault(tag, set()).add(podcast)

        self._by_num: Dict[PodcastNumber, Podcast] = {}
        for podcast in ordered:
            if podcast.podcast_number in self._by_num:
                logger.warning(
                    "Duplicate podcast number in catalog",
                    extra={"podcast_number": podcast.podcast_number},
                )
            self._by_num[podcast.podcast_number] = podcast

        logger.info(
            "Podcast index built",
            extra={"podcasts": len(self._num_sorted), "tags": len(self._by_tag)},
        )

    @classmethod
    async def load(cls, loader: CatalogLoader) -> "PodcastIndex":
        """Fetch the catalog once and build the index from it.

        :class:`libs.core.exceptions.CatalogLoadError` from the loader is
        propagated unchanged; no partial index is ever returned.
        """
        podcasts = await loader.load()
        return cls(podcasts)

    def __len__(self) -> int:
        return len(self._num_sorted)

    # ------------------------------------------------------------------
    def query_podcasts(self, query: PodcastQuery) -> List[Podcast]:
        """Case-insensitive title substring match, paginated."""
        needle = query.query.lower()
        matches = (p for p in self._num_sorted if needle in p.title.lower())
        return list(islice(matches, query.skip, query.skip + query.limit))

    def get_all_podcasts(self) -> List[Podcast]:
        return list(self._num_sorted)

    def get_all_tags(self) -> List[PodcastTag]:
        return list(self._by_tag.keys())

    def get_podcast(self, num: PodcastNumber) -> Optional[Podcast]:
        return self._by_num.get(num)

    def get_podcasts_by_tags(self, tags: Iterable[PodcastTag]) -> List[Podcast]:
        """Return podcasts carrying every tag in ``tags``.

        No tags means no filter, so every podcast is returned. A tag that
        labels no podcast empties the result. The result keeps the
        descending podcast number order.
        """
        tags = list(tags)
        if not tags:
            return list(self._num_sorted)

        # Make sure every tag has at least one podcast before intersecting.
        for tag in tags:
            if not self._by_tag.get(tag):
                return []

        seed, *rest = tags
        podcasts = set(self._by_tag[seed])
        for tag in rest:
            tag_podcasts = self._by_tag[tag]
            podcasts = {p for p in podcasts if p in tag_podcasts}
            if not podcasts:
                return []

        return [p for p in self._num_sorted if p in podcasts]

    def get_filtered_tags_with_podcast_counts(
        self, tags: Iterable[PodcastTag]
    ) -> TagCounts:
        """Count co-occurring tags within the podcasts matching ``tags``.

        The selected tags themselves are left out of the result.
        """
        tags = list(tags)
        counts: TagCounts = {}
        for podcast in self.get_podcasts_by_tags(tags):
            for tag in podcast.tags:
                counts[tag] = counts.get(tag, 0) + 1
        for tag in tags:
            counts.pop(tag, None)
        return counts


__all__ = ["PodcastIndex"]
