import logging

from fastapi import FastAPI

from postpages.routers import pages
from postpages.settings import settings

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper()),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="postpages preview",
    description="Read-only view of built blog post pages",
)

app.include_router(pages.router)


@app.get("/")
async def root():
    return {"message": "postpages preview is running"}
