"""Directory store bundling the in-memory repositories."""

from __future__ import annotations

from dataclasses import dataclass, field

from competitions.infrastructure.competition_repository import (
    InMemoryCompetitionRepository,
)
from competitions.infrastructure.participation_ledger import (
    InMemoryParticipationLedger,
)
from competitions.infrastructure.principal_repository import (
    InMemoryPrincipalRepository,
)
from competitions.infrastructure.tenant_repository import InMemoryTenantRepository


@dataclass
class InMemoryDirectoryStore:
    """One explicit, isolated set of directory collections.

    Nothing here is process-global: every instance starts empty, so tests
    build a fresh store per case and the application owns exactly one for
    its lifetime.
    """

    tenants: InMemoryTenantRepository = field(default_factory=InMemoryTenantRepository)
    principals: InMemoryPrincipalRepository = field(
        default_factory=InMemoryPrincipalRepository
    )
    competitions: InMemoryCompetitionRepository = field(
        default_factory=InMemoryCompetitionRepository
    )
    participations: InMemoryParticipationLedger = field(
        default_factory=InMemoryParticipationLedger
    )
