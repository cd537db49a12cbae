import logging
from typing import Optional
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from shared.core.config import Settings, settings as default_settings
from shared.core.database import Base, build_engine, build_session_factory
from shared.core.log_config import setup_logging
from shared.helpers.exception_handler import setup_exception_handlers
from shared.helpers.upload_helper import UploadStore

from . import models  # noqa: F401  registers tables on Base.metadata
from .router import adoptions_router, media_router, pages_router, spaces_router, stats_router
from adoption_service.seed import seed_data

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or default_settings
    setup_logging(settings.LOG_LEVEL)

    engine = build_engine(settings.DATABASE_URL)
    # Create all tables
    Base.metadata.create_all(bind=engine)
    session_factory = build_session_factory(engine)
    upload_store = UploadStore.from_settings(settings)

    if settings.SEED_SAMPLE_SPACES:
        seed_data(session_factory)

    app = FastAPI(title="Ora Blu Adoption API")
    app.state.settings = settings
    app.state.engine = engine
    app.state.session_factory = session_factory
    app.state.upload_store = upload_store

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Register exception handlers
    setup_exception_handlers(app)

    # Routers
    app.include_router(spaces_router.router)
    app.include_router(adoptions_router.router)
    app.include_router(media_router.router)
    app.include_router(stats_router.router)
    app.include_router(pages_router.router)

    app.mount(
        settings.UPLOAD_URL_PREFIX,
        StaticFiles(directory=str(upload_store.directory)),
        name="uploads",
    )

    @app.get("/api/health")
    def health():
        return {"status": "healthy"}

    logger.info(f"🚀 App ready (database: {engine.url!r}, uploads: {upload_store.directory})")
    return app
