"""
Gemini Assistant Server - FastAPI application for the assistant workflows.

Provides:
- Quiz solving with Google Search grounding
- Chat across three Gemini model tiers, with optional thinking mode
- Image analysis (one image + prompt)
- Video analysis from a title or description
"""

from contextlib import asynccontextmanager
from dotenv import load_dotenv
from fastapi import FastAPI, Query, Request
from fastapi.middleware.cors import CORSMiddleware
import os

load_dotenv()

# Import assistant modules
import sys
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from assistant.config import load_settings
from assistant.logger import RequestLogger
from assistant.providers import ProviderRouter
from assistant.screens import ChatSessionStore

from api import assistant as assistant_routes

VERSION = "1.0.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Load configuration once; refuse to start without an API key."""
    print("[Startup] Loading configuration...")
    settings = load_settings()

    app.state.settings = settings
    app.state.request_logger = RequestLogger(max_logs=settings.request_log_size)
    app.state.providers = ProviderRouter(settings)
    app.state.chat_sessions = ChatSessionStore()

    print(f"[Startup] Ready! (endpoint: {settings.gemini_base_url})")

    yield

    print("[Shutdown] Closing provider connections...")
    await app.state.providers.close_all()


app = FastAPI(
    title="Gemini Assistant Server",
    description="Quiz solving, chat, image and video analysis over Gemini",
    version=VERSION,
    lifespan=lifespan
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(assistant_routes.router)


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "service": "gemini-assistant",
        "version": VERSION
    }


@app.get("/logs")
async def get_logs(
    request: Request,
    limit: int = Query(default=100, ge=1, le=1000),
):
    """Recent model invocations, most recent first."""
    return {"logs": request.app.state.request_logger.get_logs(limit=limit)}
