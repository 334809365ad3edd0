from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple

from ..base import (
    MONTH_TOKENS,
    AudioTrack,
    CrawlResult,
    Episode,
    Link,
    Month,
    Spider,
    Year,
    is_archived_year,
    month_rank,
    resolve_url,
    sort_years,
)
from ..fetcher import DocumentFetcher
from ..markup import HtmlDocument
from podroutes.config import DEFAULT_ORIGIN


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EpisodePage:
    title: str = ""
    tracks: Tuple[AudioTrack, ...] = ()
    thumbnail_url: Optional[str] = None


EMPTY_EPISODE_PAGE = EpisodePage()


def is_qualifying_track(url: str, label: str) -> bool:
    return url.endswith(".mp3") and "hour" in label.lower()


class AmRoutesSpider(Spider):
    """Archive spider for the American Routes Squarespace site.

    The archive is three listing levels deep:

      root    div[data-folder="/archive-1"] holds one link per year
      year    month links labelled JAN..DEC
      month   "Read More" links to episode pages

    Episode pages carry the audio as ``div.sqs-audio-embed`` widgets with
    ``data-url``/``data-title`` attributes.

    Each level fetches its children concurrently and joins the whole batch. A page
    that cannot be fetched contributes an empty result; only the outcome of the
    root fetch decides whether anything comes back at all.
    """

    name = "amroutes"

    archive_sel = 'div[data-folder="/archive-1"] a'
    episode_link_text = "Read More"
    audio_embed_sel = "div.sqs-audio-embed"
    thumbnail_sel = "img.thumb-image"

    def __init__(self, fetcher: DocumentFetcher, *, origin: str = DEFAULT_ORIGIN) -> None:
        self.fetcher = fetcher
        self.origin = origin.rstrip("/")

    # --- Public API ---
    async def crawl(self) -> CrawlResult:
        html = await self.fetcher.fetch(self.origin + "/")
        if html is None:
            logger.warning("Archive root %s unavailable; returning an empty archive", self.origin)
            return []
        links = self.parse_year_links(html)
        years = await asyncio.gather(*(self.crawl_year(link) for link in links))
        result = sort_years(list(years))
        logger.info(
            "Crawled %d years, %d episodes from %s",
            len(result),
            sum(len(m.episodes) for y in result for m in y.months),
            self.origin,
        )
        return result

    async def crawl_year(self, link: Link) -> Year:
        html = await self.fetcher.fetch(link.href)
        if html is None:
            return Year(label=link.text, page_url=link.href)
        months = await asyncio.gather(*(self.crawl_month(m) for m in self.parse_month_links(html)))
        months = sorted(months, key=lambda m: month_rank(m.label))
        return Year(label=link.text, page_url=link.href, months=tuple(months))

    async def crawl_month(self, link: Link) -> Month:
        html = await self.fetcher.fetch(link.href)
        if html is None:
            return Month(label=link.text, page_url=link.href)
        episodes = await asyncio.gather(*(self.crawl_episode(e) for e in self.parse_episode_links(html)))
        episodes = sorted(episodes, key=lambda ep: ep.sort_key, reverse=True)
        return Month(label=link.text, page_url=link.href, episodes=tuple(episodes))

    async def crawl_episode(self, link: Link) -> Episode:
        page = await self.fetch_episode(link.href)
        return Episode(
            page_url=link.href,
            link_text=link.text,
            title=page.title,
            tracks=page.tracks,
            thumbnail_url=page.thumbnail_url,
        )

    async def fetch_episode(self, url: str) -> EpisodePage:
        html = await self.fetcher.fetch(url)
        if html is None:
            return EMPTY_EPISODE_PAGE
        return self.parse_episode(html)

    # --- Parsing ---
    def parse_year_links(self, html: str) -> List[Link]:
        out: List[Link] = []
        for link in self._links(HtmlDocument(html), self.archive_sel):
            if link.text == "Back" or is_archived_year(link.text):
                continue
            out.append(link)
        return out

    def parse_month_links(self, html: str) -> List[Link]:
        return [link for link in self._links(HtmlDocument(html), "a") if link.text in MONTH_TOKENS]

    def parse_episode_links(self, html: str) -> List[Link]:
        return [link for link in self._links(HtmlDocument(html), "a") if link.text == self.episode_link_text]

    def parse_episode(self, html: str) -> EpisodePage:
        doc = HtmlDocument(html)

        h1 = doc.first("h1")
        title = doc.text(h1) if h1 is not None else ""

        tracks: List[AudioTrack] = []
        for node in doc.query(self.audio_embed_sel):
            url = doc.attribute(node, "data-url") or ""
            label = doc.attribute(node, "data-title") or ""
            if is_qualifying_track(url, label):
                tracks.append(AudioTrack(url=url, label=label))

        thumb = doc.first(self.thumbnail_sel)
        thumbnail = doc.attribute(thumb, "data-src") if thumb is not None else None

        return EpisodePage(title=title, tracks=tuple(tracks), thumbnail_url=thumbnail or None)

    # --- Internals ---
    def _links(self, doc: HtmlDocument, selector: str) -> List[Link]:
        out: List[Link] = []
        for node in doc.query(selector):
            href = doc.attribute(node, "href")
            if not href:
                continue
            out.append(Link(href=resolve_url(href, self.origin), text=doc.text(node)))
        return out
