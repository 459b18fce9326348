"""Domain-Oriented Observability for Competitions infrastructure.

Probes for repository operations following Domain-Oriented Observability patterns.
"""

from competitions.infrastructure.observability.repository_probe import (
    CompetitionRepositoryProbe,
    DefaultCompetitionRepositoryProbe,
    DefaultParticipationLedgerProbe,
    ParticipationLedgerProbe,
)

__all__ = [
    "CompetitionRepositoryProbe",
    "DefaultCompetitionRepositoryProbe",
    "ParticipationLedgerProbe",
    "DefaultParticipationLedgerProbe",
]
