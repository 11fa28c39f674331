"""FastAPI application entrypoint."""

from contextlib import asynccontextmanager

from dotenv import load_dotenv

# Load environment variables from .env file before settings are read
load_dotenv()

from fastapi import FastAPI  # noqa: E402

from app.adapters.inbound.http.routes import close_resources, router  # noqa: E402
from app.infrastructure.db import dispose_engine  # noqa: E402


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Close the rate limiter and database pool on shutdown."""
    yield
    await close_resources()
    dispose_engine()


app = FastAPI(
    title="Premium Artisan Leads",
    description="Lead intake service for painting and renovation projects",
    version="0.1.0",
    lifespan=lifespan,
)

app.include_router(router)
