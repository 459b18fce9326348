"""FastAPI dependency providers for the Competitions bounded context.

The application owns exactly one directory store, installed at startup by
the lifespan handler and released at shutdown.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, HTTPException, Request, status

from competitions.application.observability import (
    CompetitionServiceProbe,
    DefaultCompetitionServiceProbe,
)
from competitions.application.services import (
    CompetitionDirectoryService,
    SessionService,
)
from competitions.domain.aggregates import Principal
from competitions.infrastructure import InMemoryDirectoryStore
from infrastructure.settings import DirectorySettings, get_directory_settings

_directory_store: InMemoryDirectoryStore | None = None


def set_directory_store(store: InMemoryDirectoryStore | None) -> None:
    """Install (or, with None, release) the application's directory store.

    Args:
        store: The store to serve requests from
    """
    global _directory_store
    _directory_store = store


def get_directory_store() -> InMemoryDirectoryStore:
    """Get the application's directory store.

    Returns:
        The installed InMemoryDirectoryStore

    Raises:
        RuntimeError: If the store hasn't been initialized
    """
    if _directory_store is None:
        raise RuntimeError(
            "Directory store not initialized. Ensure app startup completed successfully."
        )
    return _directory_store


def get_competition_service_probe() -> CompetitionServiceProbe:
    """Get CompetitionServiceProbe instance.

    Returns:
        DefaultCompetitionServiceProbe instance for observability
    """
    return DefaultCompetitionServiceProbe()


def get_competition_service(
    store: Annotated[InMemoryDirectoryStore, Depends(get_directory_store)],
    probe: Annotated[CompetitionServiceProbe, Depends(get_competition_service_probe)],
) -> CompetitionDirectoryService:
    """Get CompetitionDirectoryService instance.

    Args:
        store: The application's directory store
        probe: Competition service probe for observability

    Returns:
        CompetitionDirectoryService instance
    """
    return CompetitionDirectoryService(
        competition_repository=store.competitions,
        tenant_repository=store.tenants,
        principal_repository=store.principals,
        participation_ledger=store.participations,
        probe=probe,
    )


def get_session_service(
    store: Annotated[InMemoryDirectoryStore, Depends(get_directory_store)],
) -> SessionService:
    """Get SessionService instance.

    Args:
        store: The application's directory store

    Returns:
        SessionService instance
    """
    return SessionService(principal_repository=store.principals)


async def get_current_principal(
    request: Request,
    session_service: Annotated[SessionService, Depends(get_session_service)],
    settings: Annotated[DirectorySettings, Depends(get_directory_settings)],
) -> Principal:
    """Resolve the requesting principal from the login header.

    Args:
        request: The incoming request
        session_service: Session service for identifier lookup
        settings: Directory settings naming the login header

    Returns:
        The authenticated Principal

    Raises:
        HTTPException: 401 if the header is missing or matches nobody
    """
    identifier = request.headers.get(settings.login_header)
    if not identifier:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=f"Missing {settings.login_header} header",
        )

    principal = await session_service.login(identifier)
    if principal is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Unknown login identifier",
        )
    return principal
