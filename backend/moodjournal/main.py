# mood journal backend api
# fastapi app with async mongodb, contract-number login, and keyword mood detection

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from moodjournal.config import settings
from moodjournal.services.db import db
from moodjournal.routers import auth, journal, moods

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """startup: connect to mongodb. shutdown: close connection."""
    logger.info("Starting Mood Journal backend...")
    await db.connect()
    logger.info("Mood Journal backend ready")
    yield
    logger.info("Shutting down Mood Journal backend...")
    await db.close()


app = FastAPI(
    title="Mood Journal API",
    description="Backend API for the mood journal app: login gate, daily notes, keyword mood detection",
    version="0.1.0",
    lifespan=lifespan,
)

# cors: allow frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=[settings.FRONTEND_URL, "http://localhost:3000"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# register routers
app.include_router(auth.router)
app.include_router(journal.router)
app.include_router(moods.router)


@app.get("/health")
async def health_check():
    """basic health check endpoint"""
    return {"status": "ok", "service": "mood-journal-api"}
