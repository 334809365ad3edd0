from datetime import datetime, timezone

from fastapi import APIRouter
from fastapi.responses import Response

from podroutes.config import get_settings
from podroutes.models.archive import ArchiveOut
from podroutes.services.archive_service import archive_view, crawl_archive
from podroutes.services.feed_service import render_feed

router = APIRouter(tags=["feed"])

RSS_MEDIA_TYPE = "application/xml; charset=utf-8"

@router.get("/api/feed")
async def api_get_feed():
    """Crawl the archive and return it as a podcast feed (always 200)."""
    build_date = datetime.now(timezone.utc)
    settings = get_settings()
    years = await crawl_archive(settings)
    body = render_feed(years, build_date=build_date, self_url=settings.feed_url, site_url=settings.origin)
    return Response(content=body, media_type=RSS_MEDIA_TYPE)

@router.get("/api/archive", response_model=ArchiveOut)
async def api_get_archive():
    build_date = datetime.now(timezone.utc)
    years = await crawl_archive(get_settings())
    return archive_view(years, build_date)
