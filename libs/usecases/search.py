from __future__ import annotations

from itertools import islice
from typing import Iterable, List

from libs.catalog import PodcastIndex
from libs.core.models import Podcast, PodcastQuery


class SearchPodcasts:
    """Search podcast titles within the podcasts matching every given tag."""

    def __init__(self, index: PodcastIndex) -> None:
        self.index = index

    # ------------------------------------------------------------------
    def __call__(
        self,
        query: str = "",
        tags: Iterable[str] = (),
        limit: int = 20,
        skip: int = 0,
    ) -> List[Podcast]:
        tags = [t for t in tags if t]
        if not tags:
            return self.index.query_podcasts(PodcastQuery(query=query, limit=limit, skip=skip))
        needle = query.lower()
        matches = (
            p for p in self.index.get_podcasts_by_tags(tags) if needle in p.title.lower()
        )
        return list(islice(matches, skip, skip + limit))
