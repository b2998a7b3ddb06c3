import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from foodchooser.core.config import settings
from foodchooser.core.db import init_db
from foodchooser.api.routers import (
    meals_router,
    groceries_router,
    preferences_router,
    recommendations_router,
    spending_router,
)

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

VERSION = "1.0.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application lifecycle - startup and shutdown."""
    try:
        init_db()
    except Exception as e:
        logger.error(f"Failed to initialize database: {e}")
        raise

    yield  # Application runs here


app = FastAPI(title="FoodChooser", version=VERSION, lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(meals_router)
app.include_router(groceries_router)
app.include_router(preferences_router)
app.include_router(recommendations_router)
app.include_router(spending_router)


@app.get("/api/health")
def health_check():
    return {"status": "ok", "version": VERSION}
