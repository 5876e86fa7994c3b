from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app import __version__
from app.core.config import Settings, get_settings
from app.core.container import ApplicationContainer, build_container
from app.core.logging_config import configure_logging
from app.interfaces.http import create_api_router
from app.interfaces.http.errors import register_exception_handlers
from app.schemas import HealthResponse
from app.seed import seed_demo_community


@asynccontextmanager
async def lifespan(app: FastAPI):
    container: ApplicationContainer = app.state.container
    configure_logging(container.settings)
    await container.startup()
    if container.settings.community.seed_demo:
        await seed_demo_community(container)
    try:
        yield
    finally:
        await container.shutdown()


def create_app(
    settings: Optional[Settings] = None,
    container: Optional[ApplicationContainer] = None,
) -> FastAPI:
    if container is None:
        container = build_container(settings or get_settings())
    settings = container.settings

    app = FastAPI(
        title=settings.project_name,
        description="Short-form video script generation service",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.container = container

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)

    app.include_router(create_api_router(settings.api_prefix))

    @app.get("/health", response_model=HealthResponse, tags=["health"])
    async def health() -> HealthResponse:
        return HealthResponse(version=__version__)

    return app


app = create_app()
