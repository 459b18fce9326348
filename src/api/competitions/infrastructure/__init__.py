"""Infrastructure layer for the Competitions bounded context.

In-memory implementations of the repository ports. A database-backed
store can replace them without changing the application layer.
"""

from competitions.infrastructure.competition_repository import (
    InMemoryCompetitionRepository,
)
from competitions.infrastructure.directory_store import InMemoryDirectoryStore
from competitions.infrastructure.participation_ledger import (
    InMemoryParticipationLedger,
)
from competitions.infrastructure.principal_repository import (
    InMemoryPrincipalRepository,
)
from competitions.infrastructure.tenant_repository import InMemoryTenantRepository

__all__ = [
    "InMemoryCompetitionRepository",
    "InMemoryDirectoryStore",
    "InMemoryParticipationLedger",
    "InMemoryPrincipalRepository",
    "InMemoryTenantRepository",
]
