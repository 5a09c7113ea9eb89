from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from alpha_agent.config import settings
from alpha_agent.dashboard.router import router as dashboard_router
from alpha_agent.exception_handlers import register_exception_handlers
from alpha_agent.logging_config import setup_logging
from alpha_agent.preferences.router import router as preferences_router
from alpha_agent.session.machine import ViewStateMachine
from alpha_agent.session.router import router as session_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging()
    app.state.machine = ViewStateMachine(min_dwell=settings.min_dwell_ms / 1000)
    yield
    await app.state.machine.aclose()


app = FastAPI(
    title="AlphaAgent",
    description="Grounded AI stock picks for an investor profile",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[origin.strip() for origin in settings.cors_origins.split(",")],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

app.include_router(preferences_router, prefix="/api/v1/preferences", tags=["preferences"])
app.include_router(session_router, prefix="/api/v1/session", tags=["session"])
app.include_router(dashboard_router, prefix="/api/v1/dashboard", tags=["dashboard"])


@app.get("/api/v1/health")
async def health():
    return {"status": "healthy"}
