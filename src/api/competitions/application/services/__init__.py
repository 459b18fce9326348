"""Application services for the Competitions bounded context."""

from competitions.application.services.competition_service import (
    CompetitionDirectoryService,
)
from competitions.application.services.session_service import SessionService

__all__ = [
    "CompetitionDirectoryService",
    "SessionService",
]
