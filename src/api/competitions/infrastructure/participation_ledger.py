"""In-memory implementation of IParticipationLedger."""

from __future__ import annotations

import asyncio
from collections import defaultdict
from datetime import UTC, datetime

from competitions.domain.value_objects import (
    CompetitionId,
    Participation,
    PrincipalId,
)
from competitions.infrastructure.observability import (
    DefaultParticipationLedgerProbe,
    ParticipationLedgerProbe,
)
from competitions.ports.repositories import IParticipationLedger


class InMemoryParticipationLedger(IParticipationLedger):
    """Participation ledger keyed by competition.

    Each competition's entries live in an insertion-ordered dict keyed by
    principal, so an entry can only exist once and join order is kept.
    Records for a competition are created lazily on its first join, and
    writes to one competition's record are serialized by that
    competition's own lock.
    """

    def __init__(self, probe: ParticipationLedgerProbe | None = None) -> None:
        self._entries: dict[CompetitionId, dict[PrincipalId, Participation]] = {}
        self._locks: defaultdict[CompetitionId, asyncio.Lock] = defaultdict(
            asyncio.Lock
        )
        self._probe = probe or DefaultParticipationLedgerProbe()

    async def record(
        self, competition_id: CompetitionId, principal_id: PrincipalId
    ) -> bool:
        """Record a join, idempotently.

        Returns:
            True if a new entry was recorded, False if it already existed
        """
        async with self._locks[competition_id]:
            entries = self._entries.setdefault(competition_id, {})
            if principal_id in entries:
                self._probe.duplicate_participation_ignored(
                    competition_id=competition_id.value,
                    principal_id=principal_id.value,
                )
                return False

            entries[principal_id] = Participation(
                competition_id=competition_id,
                principal_id=principal_id,
                joined_at=datetime.now(UTC),
            )

        self._probe.participant_recorded(
            competition_id=competition_id.value,
            principal_id=principal_id.value,
        )
        return True

    async def contains(
        self, competition_id: CompetitionId, principal_id: PrincipalId
    ) -> bool:
        return principal_id in self._entries.get(competition_id, {})

    async def list_for_competition(
        self, competition_id: CompetitionId
    ) -> list[Participation]:
        return list(self._entries.get(competition_id, {}).values())
