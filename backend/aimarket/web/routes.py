"""
Storefront Page Routes

Serves the HTML page and its stylesheet.
"""
from fastapi import APIRouter, Depends
from fastapi.responses import FileResponse, HTMLResponse

from ..services.state import MarketState, get_market_state
from .page import STYLESHEET_PATH, render_storefront

router = APIRouter()


@router.get("/", response_class=HTMLResponse)
async def storefront_page(state: MarketState = Depends(get_market_state)) -> HTMLResponse:
    html = render_storefront(
        state.catalog,
        client_id=state.settings.paypal_client_id,
        live=state.settings.is_live,
    )
    return HTMLResponse(content=html)


@router.get("/assets/styles.css")
async def stylesheet() -> FileResponse:
    return FileResponse(STYLESHEET_PATH, media_type="text/css")
