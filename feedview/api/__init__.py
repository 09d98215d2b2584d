"""Normalized feed API routes."""

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from feedview.pipeline import FeedPipeline

router = APIRouter(prefix="/api")


@router.get("/feed")
def get_feed():
    """Fetch and normalize the configured feed.

    Answers 502 with the error message when the fetch or parse failed.
    """
    page = FeedPipeline.from_settings().run()
    status_code = 200 if page.ok else 502
    return JSONResponse(content=page.model_dump(mode="json"), status_code=status_code)
