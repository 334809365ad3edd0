"""RSS 2.0 / iTunes podcast feed rendering.

Each (episode, track) pair becomes one ``<item>``; episodes without qualifying
tracks are left out. The build date is supplied by the caller so the channel and
every item share one timestamp.
"""

from __future__ import annotations

from datetime import datetime
from email.utils import format_datetime
from typing import List

from podroutes.config import DEFAULT_BASE_URL, DEFAULT_ORIGIN
from podroutes.services.crawl.base import CrawlResult, Episode, flatten_episodes


CHANNEL_TITLE = "American Routes"
CHANNEL_DESCRIPTION = (
    "American Routes is a weekly two-hour public radio program produced in New Orleans, "
    "presenting the breadth and depth of the American musical and cultural landscape."
)
CHANNEL_EMAIL = "info@americanroutes.org"
CHANNEL_IMAGE = (
    "https://s3.amazonaws.com/production.mediajoint.prx.org/public/series_images/23980/ARlogo_redblue_medium.PNG"
)
GENERATOR = "amroutes rss generator"
ITEM_DURATION_SECONDS = 7200

_HOUR_SUFFIXES = (" - Hour One", " - Hour Two")


def escape_xml(text: str) -> str:
    return (
        (text or "")
        .replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace('"', "&quot;")
        .replace("'", "&apos;")
    )


def track_suffix(index: int) -> str:
    """Title suffix for the zero-based track ``index`` of an episode."""
    if index < len(_HOUR_SUFFIXES):
        return _HOUR_SUFFIXES[index]
    return f" - Part {index + 1}"


def format_rfc822(dt: datetime) -> str:
    return format_datetime(dt, usegmt=True)


def _render_items(episode: Episode, pub_date: str) -> List[str]:
    image = escape_xml(episode.thumbnail_url or CHANNEL_IMAGE)
    link = escape_xml(episode.page_url)
    out: List[str] = []
    for index, track in enumerate(episode.tracks):
        title = escape_xml(episode.title + track_suffix(index))
        guid = escape_xml(f"{episode.page_url}#hour-{index + 1}")
        out.append(
            f"""
    <item>
      <title>{title}</title>
      <link>{link}</link>
      <description>{title}</description>
      <guid isPermaLink="false">{guid}</guid>
      <pubDate>{pub_date}</pubDate>

      <enclosure url="{escape_xml(track.url)}" type="audio/mpeg"/>

      <itunes:title>{title}</itunes:title>
      <itunes:summary>{title}</itunes:summary>
      <itunes:image href="{image}"/>
      <itunes:duration>{ITEM_DURATION_SECONDS}</itunes:duration>
    </item>"""
        )
    return out


def render_feed(
    years: CrawlResult,
    *,
    build_date: datetime,
    self_url: str = f"{DEFAULT_BASE_URL}/api/feed",
    site_url: str = DEFAULT_ORIGIN,
) -> str:
    """Serialize the crawled archive as an RSS document.

    Args:
        years: Archive as returned by the crawl, already sorted.
        build_date: Timestamp used for lastBuildDate and every item's pubDate.
        self_url: Public URL of this feed (atom:link rel="self").
        site_url: Channel link.
    """
    stamp = format_rfc822(build_date)
    items: List[str] = []
    for _year, _month, episode in flatten_episodes(years):
        items.extend(_render_items(episode, stamp))

    site = escape_xml(site_url)
    body = "".join(items)
    return f"""<?xml version="1.0" encoding="UTF-8"?>
<rss version="2.0"
     xmlns:itunes="http://www.itunes.com/dtds/podcast-1.0.dtd"
     xmlns:content="http://purl.org/rss/1.0/modules/content/"
     xmlns:atom="http://www.w3.org/2005/Atom">
  <channel>
    <title>{CHANNEL_TITLE}</title>
    <link>{site}</link>
    <description>{CHANNEL_DESCRIPTION}</description>
    <language>en-us</language>
    <copyright>{CHANNEL_TITLE}</copyright>
    <lastBuildDate>{stamp}</lastBuildDate>
    <pubDate>{stamp}</pubDate>
    <generator>{GENERATOR}</generator>

    <itunes:author>{CHANNEL_TITLE}</itunes:author>
    <itunes:summary>{CHANNEL_DESCRIPTION}</itunes:summary>
    <itunes:owner>
      <itunes:name>{CHANNEL_TITLE}</itunes:name>
      <itunes:email>{CHANNEL_EMAIL}</itunes:email>
    </itunes:owner>
    <itunes:explicit>no</itunes:explicit>
    <itunes:category text="Music">
      <itunes:category text="Music History"/>
    </itunes:category>
    <itunes:image href="{escape_xml(CHANNEL_IMAGE)}"/>

    <image>
      <url>{escape_xml(CHANNEL_IMAGE)}</url>
      <title>{CHANNEL_TITLE}</title>
      <link>{site}</link>
    </image>

    <atom:link href="{escape_xml(self_url)}" rel="self" type="application/rss+xml"/>
{body}
  </channel>
</rss>"""
