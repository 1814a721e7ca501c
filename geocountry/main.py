from contextlib import asynccontextmanager

from fastapi import FastAPI

from geocountry.api.routes import router as country_router
from geocountry.core.logger import configure_logging


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging()
    yield


app = FastAPI(
    title="geocountry API",
    description="Default country detection from the caller's public IP",
    version="0.1.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

app.include_router(country_router, prefix="/api/v1")


@app.api_route("/health", methods=["GET", "HEAD"])
def health_check():
    return {
        "status": "healthy",
        "service": "geocountry-api",
    }
