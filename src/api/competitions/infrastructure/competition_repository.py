"""In-memory implementation of ICompetitionRepository."""

from __future__ import annotations

import asyncio
from dataclasses import replace

from competitions.domain.aggregates import Competition
from competitions.domain.value_objects import CompetitionId
from competitions.infrastructure.observability import (
    CompetitionRepositoryProbe,
    DefaultCompetitionRepositoryProbe,
)
from competitions.ports.exceptions import NotFoundError
from competitions.ports.repositories import ICompetitionRepository
from shared_kernel.authorization.types import ResourceType


class InMemoryCompetitionRepository(ICompetitionRepository):
    """Dictionary-backed competition storage.

    Dicts preserve insertion order, which gives list_all() the store's
    natural order. Aggregates are copied on the way in and out, so a
    caller's changes only land through save(). Writes are serialized under
    a lock; reads return a snapshot and run without it.
    """

    def __init__(self, probe: CompetitionRepositoryProbe | None = None) -> None:
        self._competitions: dict[CompetitionId, Competition] = {}
        self._lock = asyncio.Lock()
        self._probe = probe or DefaultCompetitionRepositoryProbe()

    async def save(self, competition: Competition) -> None:
        """Insert a new competition or replace an existing one in place."""
        async with self._lock:
            was_created = competition.id not in self._competitions
            self._competitions[competition.id] = replace(competition)

        self._probe.competition_saved(
            competition_id=competition.id.value,
            owner_tenant_id=competition.owner_tenant_id.value,
            was_created=was_created,
        )

    async def get_by_id(self, competition_id: CompetitionId) -> Competition:
        """Retrieve a competition by ID.

        Raises:
            NotFoundError: If no such competition exists
        """
        competition = self._competitions.get(competition_id)
        if competition is None:
            self._probe.competition_not_found(competition_id=competition_id.value)
            raise NotFoundError(ResourceType.COMPETITION, competition_id.value)
        return replace(competition)

    async def list_all(self) -> list[Competition]:
        """List all competitions in insertion order."""
        return [replace(c) for c in list(self._competitions.values())]
