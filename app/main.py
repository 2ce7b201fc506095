from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.application.event_bus import EventBus
from app.application.subscribers import register_subscribers
from app.config import get_settings
from app.infrastructure.database import SessionLocal, engine, initialize_database
from app.interfaces.api.routes import register_routes


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create missing tables on startup and release the pool on shutdown."""

    initialize_database()
    yield
    engine.dispose()


def create_app(event_bus: EventBus | None = None) -> FastAPI:
    """Build the FastAPI application and wire the domain event subscribers."""

    settings = get_settings()
    app = FastAPI(title="Kaneo API", lifespan=lifespan)

    if event_bus is None:
        event_bus = EventBus()
        register_subscribers(event_bus, SessionLocal)
    app.state.event_bus = event_bus

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list(),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_routes(app)
    return app


app = create_app()
