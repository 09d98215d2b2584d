"""HTML page routes for feedview."""

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

from feedview.pipeline import FeedPipeline
from feedview.render import render_feed_page

router = APIRouter()


@router.get("/", response_class=HTMLResponse)
def feed_page():
    """Render the configured feed as a card list."""
    page = FeedPipeline.from_settings().run()
    return render_feed_page(page)
