"""Domain-Oriented Observability for the Competitions application layer.

Probes for application service operations following Domain-Oriented Observability patterns.
"""

from competitions.application.observability.competition_service_probe import (
    CompetitionServiceProbe,
    DefaultCompetitionServiceProbe,
)
from competitions.application.observability.session_service_probe import (
    DefaultSessionServiceProbe,
    SessionServiceProbe,
)

__all__ = [
    "CompetitionServiceProbe",
    "DefaultCompetitionServiceProbe",
    "SessionServiceProbe",
    "DefaultSessionServiceProbe",
]
