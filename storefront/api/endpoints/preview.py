"""Page-builder live preview: render a posted block list without touching storage."""

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

from storefront.api.dependencies import ServicesDep
from storefront.application.services.block_renderer import render_blocks
from storefront.domain.entities.blocks import parse_blocks
from storefront.pages import render_preview_page
from storefront.schemas.preview import PreviewRequest

router = APIRouter()

NO_STORE_HEADERS = {"Cache-Control": "no-cache, no-store, must-revalidate"}


@router.post("/preview", response_class=HTMLResponse)
async def preview(body: PreviewRequest, services: ServicesDep) -> HTMLResponse:
    """Render blocks to a standalone document. Product grids show their empty state."""
    blocks_html = render_blocks(
        parse_blocks(body.blocks),
        editable=body.editable,
        currency_symbol=services.settings.currency_symbol,
    )
    return HTMLResponse(
        content=render_preview_page(blocks_html, title=body.title),
        headers=NO_STORE_HEADERS,
    )
