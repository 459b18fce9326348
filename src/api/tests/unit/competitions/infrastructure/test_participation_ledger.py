"""Unit tests for InMemoryParticipationLedger."""

import asyncio
from unittest.mock import Mock

import pytest

from competitions.domain.value_objects import CompetitionId, PrincipalId
from competitions.infrastructure import InMemoryParticipationLedger
from competitions.infrastructure.observability import ParticipationLedgerProbe
from competitions.ports.repositories import IParticipationLedger


@pytest.fixture
def mock_probe():
    return Mock(spec=ParticipationLedgerProbe)


@pytest.fixture
def ledger(mock_probe):
    return InMemoryParticipationLedger(probe=mock_probe)


class TestRecord:
    """Tests for InMemoryParticipationLedger.record()."""

    def test_implements_port(self, ledger):
        assert isinstance(ledger, IParticipationLedger)

    @pytest.mark.asyncio
    async def test_first_record_is_new(self, ledger, mock_probe):
        competition_id = CompetitionId.generate()
        principal_id = PrincipalId.generate()

        assert await ledger.record(competition_id, principal_id) is True
        assert await ledger.contains(competition_id, principal_id) is True
        mock_probe.participant_recorded.assert_called_once_with(
            competition_id=competition_id.value,
            principal_id=principal_id.value,
        )

    @pytest.mark.asyncio
    async def test_repeat_record_is_ignored(self, ledger, mock_probe):
        competition_id = CompetitionId.generate()
        principal_id = PrincipalId.generate()
        await ledger.record(competition_id, principal_id)

        assert await ledger.record(competition_id, principal_id) is False

        entries = await ledger.list_for_competition(competition_id)
        assert len(entries) == 1
        mock_probe.duplicate_participation_ignored.assert_called_once()

    @pytest.mark.asyncio
    async def test_competitions_are_independent(self, ledger):
        first = CompetitionId.generate()
        second = CompetitionId.generate()
        principal_id = PrincipalId.generate()

        await ledger.record(first, principal_id)

        assert await ledger.contains(first, principal_id) is True
        assert await ledger.contains(second, principal_id) is False
        assert await ledger.list_for_competition(second) == []

    @pytest.mark.asyncio
    async def test_concurrent_duplicate_records_store_one_entry(self, ledger):
        competition_id = CompetitionId.generate()
        principal_id = PrincipalId.generate()

        results = await asyncio.gather(
            *(ledger.record(competition_id, principal_id) for _ in range(10))
        )

        assert results.count(True) == 1
        assert len(await ledger.list_for_competition(competition_id)) == 1


class TestListForCompetition:
    """Tests for InMemoryParticipationLedger.list_for_competition()."""

    @pytest.mark.asyncio
    async def test_preserves_join_order(self, ledger):
        competition_id = CompetitionId.generate()
        principals = [PrincipalId.generate() for _ in range(4)]
        for principal_id in principals:
            await ledger.record(competition_id, principal_id)
        await ledger.record(competition_id, principals[0])

        entries = await ledger.list_for_competition(competition_id)

        assert [e.principal_id for e in entries] == principals
        assert all(e.competition_id == competition_id for e in entries)
        assert entries[0].joined_at <= entries[-1].joined_at
