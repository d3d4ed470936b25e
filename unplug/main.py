"""Main FastAPI application."""

import logging
from datetime import datetime

from fastapi import FastAPI, HTTPException

from .assistant.orchestrator import PromptOrchestrator
from .config import settings
from .groq.client import GroqClient
from .models import (
    HobbiesResponse,
    HobbyRequest,
    StreakResponse,
    UrgeResponse,
)
from .screens import HobbiesScreen, ScreenBusyError, UrgeScreen
from .streak.store import SqliteStreakStore
from .streak.tracker import StreakTracker

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.log_level),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

# Initialize FastAPI app
app = FastAPI(
    title="Unplug",
    description="Break gaming urges, find new hobbies and keep a daily streak",
    version="1.0.0",
)

# Initialize components
client = GroqClient(
    settings.groq_api_url,
    settings.groq_api_key,
    settings.groq_model,
    timeout=settings.groq_timeout,
)
orchestrator = PromptOrchestrator(client)
tracker = StreakTracker(
    SqliteStreakStore(settings.database_path), timezone=settings.streak_timezone
)
urge_screen = UrgeScreen(orchestrator, tracker)
hobbies_screen = HobbiesScreen(orchestrator)


def streak_response() -> StreakResponse:
    """Current streak with the configured goal."""
    return StreakResponse.from_state(tracker.current_state(), settings.streak_goal_days)


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "message": "Unplug",
        "version": "1.0.0",
        "endpoints": {
            "urge": "/api/urge",
            "hobbies": "/api/hobbies",
            "streak": "/api/streak",
            "status": "/status",
        },
    }


@app.get("/status")
async def status():
    """Server status endpoint."""
    return {
        "status": "running",
        "version": "1.0.0",
        "timestamp": datetime.now().isoformat(),
        "model": settings.groq_model,
        "api_key_configured": bool(settings.groq_api_key),
    }


@app.get("/api/streak", response_model=StreakResponse)
async def streak_endpoint():
    """Current streak for display."""
    return streak_response()


@app.get("/api/urge", response_model=UrgeResponse)
async def urge_state_endpoint():
    """Current state of the urge screen."""
    return UrgeResponse.from_state(urge_screen.state, streak_response())


@app.post("/api/urge", response_model=UrgeResponse)
async def urge_endpoint():
    """
    Ask for an immediate way to break a gaming urge.

    A successful answer counts toward today's streak. Failures come back as
    a "failed" screen with a short message; the streak is left alone.
    """
    logger.info("Urge break requested")

    try:
        state = await urge_screen.trigger()
    except ScreenBusyError as e:
        raise HTTPException(status_code=409, detail=str(e))

    return UrgeResponse.from_state(state, streak_response())


@app.get("/api/hobbies", response_model=HobbiesResponse)
async def hobbies_state_endpoint():
    """Current state of the hobbies screen."""
    return HobbiesResponse.from_state(hobbies_screen.state)


@app.post("/api/hobbies", response_model=HobbiesResponse)
async def hobbies_endpoint(body: HobbyRequest):
    """Suggest real-life hobbies based on what the user likes about games."""
    logger.info("Hobby suggestions requested")

    try:
        state = await hobbies_screen.trigger(body.interests)
    except ScreenBusyError as e:
        raise HTTPException(status_code=409, detail=str(e))

    return HobbiesResponse.from_state(state)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        app,
        host=settings.server_host,
        port=settings.server_port,
        log_level=settings.log_level.lower(),
    )
