"""RSS 2.0 rendering of podcast lists."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from email.utils import format_datetime
from typing import Iterable

from libs.core.models import Podcast

AUDIO_MIME = "audio/mpeg"


def render_rss(
    podcasts: Iterable[Podcast],
    *,
    title: str,
    link: str,
    description: str = "",
) -> str:
    """Return an RSS document listing ``podcasts`` in the given order.

    ``link`` is the public site root; each item links to
    ``{link}/podcast/{number}``.
    """
    link = link.rstrip("/")
    rss = ET.Element("rss", version="2.0")
    channel = ET.SubElement(rss, "channel")
    ET.SubElement(channel, "title").text = title
    ET.SubElement(channel, "link").text = link
    ET.SubElement(channel, "description").text = description or title

    for podcast in podcasts:
        item = ET.SubElement(channel, "item")
        ET.SubElement(item, "title").text = podcast.title
        ET.SubElement(item, "link").text = f"{link}/podcast/{podcast.podcast_number}"
        guid = ET.SubElement(item, "guid", isPermaLink="false")
        guid.text = str(podcast.podcast_number)
        ET.SubElement(item, "pubDate").text = format_datetime(podcast.create_time)
        if podcast.description:
            ET.SubElement(item, "description").text = podcast.description
        for tag in sorted(podcast.tags):
            ET.SubElement(item, "category").text = tag
        if podcast.audio_link:
            ET.SubElement(
                item,
                "enclosure",
                url=podcast.audio_link,
                type=AUDIO_MIME,
                length="0",
            )

    return ET.tostring(rss, encoding="utf-8", xml_declaration=True).decode("utf-8")


__all__ = ["render_rss"]
