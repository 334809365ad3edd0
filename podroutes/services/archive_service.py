"""Crawl entrypoint shared by the feed, browse and JSON endpoints.

The archive is rebuilt from the origin on every call; nothing is stored between
requests.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

import httpx

from podroutes.config import Settings, get_settings
from podroutes.models.archive import ArchiveOut, YearOut
from podroutes.services.crawl.base import CrawlResult, flatten_episodes
from podroutes.services.crawl.fetcher import DocumentFetcher
from podroutes.services.crawl.spiders.amroutes_spider import AmRoutesSpider
from podroutes.services.feed_service import format_rfc822


async def crawl_archive(
    settings: Optional[Settings] = None,
    *,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> CrawlResult:
    """Crawl the whole archive.

    Args:
        settings: Overrides the environment-derived settings.
        transport: Optional injectable httpx transport for testing.

    Returns:
        Years newest first; empty if the archive root could not be fetched.
    """
    settings = settings or get_settings()
    async with DocumentFetcher(
        timeout=settings.fetch_timeout,
        max_concurrency=settings.max_concurrency,
        transport=transport,
    ) as fetcher:
        spider = AmRoutesSpider(fetcher, origin=settings.origin)
        return await spider.crawl()


def archive_view(years: CrawlResult, build_date: datetime) -> ArchiveOut:
    """JSON-ready view of a crawl."""
    return ArchiveOut(
        build_date=format_rfc822(build_date),
        year_count=len(years),
        episode_count=len(flatten_episodes(years)),
        years=[YearOut.model_validate(y) for y in years],
    )
