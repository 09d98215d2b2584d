"""feedview FastAPI application."""

import logging

from fastapi import FastAPI

from feedview import __version__
from feedview.api import router as api_router
from feedview.ui import router as ui_router

# Configure logging so all feedview loggers emit INFO+ to stderr
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)

app = FastAPI(
    title="feedview",
    description="Fetches one RSS/Atom feed and renders it as a card list",
    version=__version__,
)

app.include_router(api_router)
app.include_router(ui_router)


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "ok", "version": __version__}


def run() -> None:
    """Serve the app with uvicorn on the configured port."""
    import uvicorn

    from feedview.config import get_settings

    uvicorn.run(app, host="0.0.0.0", port=get_settings().feedview_port)


if __name__ == "__main__":
    run()
