"""Domain aggregates for the Competitions context.

Aggregates are the core business objects containing state and business logic.
They enforce invariants and business rules without depending on infrastructure.
"""

from competitions.domain.aggregates.competition import Competition
from competitions.domain.aggregates.principal import Principal
from competitions.domain.aggregates.tenant import Tenant

__all__ = [
    "Competition",
    "Principal",
    "Tenant",
]
