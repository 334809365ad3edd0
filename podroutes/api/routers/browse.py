from fastapi import APIRouter
from fastapi.responses import HTMLResponse

from podroutes.config import get_settings
from podroutes.services.archive_service import crawl_archive
from podroutes.services.browse_service import render_browse_page

router = APIRouter(tags=["browse"])

@router.get("/podroutes", response_class=HTMLResponse)
async def read_podroutes():
    years = await crawl_archive(get_settings())
    return HTMLResponse(render_browse_page(years))
