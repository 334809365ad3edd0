from fastapi import APIRouter
from fastapi.responses import HTMLResponse

from podroutes.services.browse_service import render_index_page

router = APIRouter(tags=["core"])

@router.get("/", response_class=HTMLResponse)
def read_index():
    return HTMLResponse(render_index_page())
