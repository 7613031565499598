import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI

from microparse.api.microdata import router as microdata_router
from microparse.config import get_settings

logging.basicConfig(
    level=get_settings().log_level,
    format="%(asctime)s | %(levelname)s | %(name)s | %(message)s"
)

logger = logging.getLogger(__name__)


# --------------------------------------------------
# Startup / Shutdown
# --------------------------------------------------

@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("microparse API started")
    yield
    logger.info("microparse API shutting down")


# --------------------------------------------------
# App
# --------------------------------------------------

app = FastAPI(
    title="microparse",
    description="Extracts HTML microdata (itemscope/itemprop) as nested JSON.",
    version="1.0.0",
    lifespan=lifespan
)

app.include_router(
    microdata_router,
    prefix="/api",
    tags=["Microdata"]
)


# --------------------------------------------------
# Health check
# --------------------------------------------------

@app.get("/health")
def health():
    return {
        "status": "ok",
        "service": "microparse"
    }
