"""Main FastAPI application entry point."""

from contextlib import asynccontextmanager

from fastapi import FastAPI

from competitions.dependencies import set_directory_store
from competitions.infrastructure import InMemoryDirectoryStore
from competitions.infrastructure.seed import seed_demo_directory
from competitions.presentation import router as competitions_router
from infrastructure.logging import configure_logging
from infrastructure.observability import DefaultStartupProbe, StartupProbe
from infrastructure.settings import get_settings
from infrastructure.version import __version__


async def build_directory_store(
    seed_demo_data: bool, probe: StartupProbe | None = None
) -> InMemoryDirectoryStore:
    """Create a fresh directory store, optionally seeded with demo data.

    Args:
        seed_demo_data: Provision the demo schools, users and competitions
        probe: Optional startup probe for observability

    Returns:
        The new InMemoryDirectoryStore
    """
    probe = probe or DefaultStartupProbe()
    store = InMemoryDirectoryStore()
    probe.directory_initialized(app_name=get_settings().app_name, version=__version__)

    if not seed_demo_data:
        probe.demo_seed_disabled()
        return store

    await seed_demo_directory(store)
    probe.demo_directory_seeded(
        tenant_count=len(await store.tenants.list_all()),
        principal_count=len(await store.principals.list_all()),
        competition_count=len(await store.competitions.list_all()),
    )
    return store


@asynccontextmanager
async def podium_lifespan(app: FastAPI):
    """Application lifespan context.

    Manages:
    - Logging configuration
    - Directory store creation (and demo seeding) on startup
    - Directory store release on shutdown
    """
    settings = get_settings()
    configure_logging(app_name=settings.app_name, debug=settings.debug)
    probe = DefaultStartupProbe()

    store = await build_directory_store(
        seed_demo_data=settings.directory.seed_demo_data,
        probe=probe,
    )
    set_directory_store(store)

    yield

    set_directory_store(None)
    probe.directory_released()


app = FastAPI(
    title="Podium API",
    description="Multi-tenant competition directory",
    version=__version__,
    lifespan=podium_lifespan,
)

app.include_router(competitions_router)


@app.get("/health")
def health():
    """Basic health check endpoint."""
    return {"status": "ok"}
