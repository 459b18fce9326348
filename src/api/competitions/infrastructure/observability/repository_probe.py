"""Domain probes for Competitions repository operations.

Following Domain-Oriented Observability patterns, these probes capture
domain-significant events raised while persisting competitions and
recording participation.
"""

from __future__ import annotations

from typing import Protocol

import structlog


class CompetitionRepositoryProbe(Protocol):
    """Domain probe for competition repository operations."""

    def competition_saved(
        self, competition_id: str, owner_tenant_id: str, was_created: bool
    ) -> None:
        """Record that a competition was inserted or replaced."""
        ...

    def competition_not_found(self, competition_id: str) -> None:
        """Record that a competition lookup missed."""
        ...


class ParticipationLedgerProbe(Protocol):
    """Domain probe for participation ledger operations."""

    def participant_recorded(self, competition_id: str, principal_id: str) -> None:
        """Record that a new ledger entry was written."""
        ...

    def duplicate_participation_ignored(
        self, competition_id: str, principal_id: str
    ) -> None:
        """Record that a repeated join left the ledger unchanged."""
        ...


class DefaultCompetitionRepositoryProbe:
    """Default implementation of CompetitionRepositoryProbe using structlog."""

    def __init__(self, logger: structlog.stdlib.BoundLogger | None = None):
        self._logger = logger or structlog.get_logger()

    def competition_saved(
        self, competition_id: str, owner_tenant_id: str, was_created: bool
    ) -> None:
        """Record that a competition was inserted or replaced."""
        self._logger.info(
            "competition_saved",
            competition_id=competition_id,
            owner_tenant_id=owner_tenant_id,
            was_created=was_created,
        )

    def competition_not_found(self, competition_id: str) -> None:
        """Record that a competition lookup missed."""
        self._logger.debug(
            "competition_not_found",
            competition_id=competition_id,
        )


class DefaultParticipationLedgerProbe:
    """Default implementation of ParticipationLedgerProbe using structlog."""

    def __init__(self, logger: structlog.stdlib.BoundLogger | None = None):
        self._logger = logger or structlog.get_logger()

    def participant_recorded(self, competition_id: str, principal_id: str) -> None:
        """Record that a new ledger entry was written."""
        self._logger.info(
            "participant_recorded",
            competition_id=competition_id,
            principal_id=principal_id,
        )

    def duplicate_participation_ignored(
        self, competition_id: str, principal_id: str
    ) -> None:
        """Record that a repeated join left the ledger unchanged."""
        self._logger.debug(
            "duplicate_participation_ignored",
            competition_id=competition_id,
            principal_id=principal_id,
        )
