import logging

from fastapi import FastAPI

from portfolio.routers import posts, sitemap
from portfolio.settings import settings

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper()),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="Portfolio API", description="Insights posts and sitemap")

app.include_router(posts.router)
app.include_router(sitemap.router)

logger.info(f"Serving insights from {settings.CONTENT_DIR}")


@app.get("/")
async def root():
    return {"message": "Portfolio API is running"}
