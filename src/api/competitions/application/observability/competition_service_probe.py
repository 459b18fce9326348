"""Protocol for competition directory service observability.

Defines the interface for domain probes that capture application-level
domain events for competition directory operations.
"""

from __future__ import annotations

from typing import Protocol

import structlog


class CompetitionServiceProbe(Protocol):
    """Domain probe for competition directory service operations."""

    def competitions_listed(self, principal_id: str, count: int) -> None:
        """Record that the visible competitions were listed."""
        ...

    def competition_retrieved(self, competition_id: str, principal_id: str) -> None:
        """Record that a competition was retrieved."""
        ...

    def competition_not_found(self, competition_id: str, principal_id: str) -> None:
        """Record that a requested competition does not exist."""
        ...

    def access_denied(
        self,
        permission: str,
        principal_id: str,
        role: str,
        competition_id: str | None,
    ) -> None:
        """Record that the access decision engine denied a request."""
        ...

    def competition_validation_failed(self, field: str, principal_id: str) -> None:
        """Record that submitted competition details were rejected."""
        ...

    def competition_created(
        self,
        competition_id: str,
        owner_tenant_id: str,
        visibility: str,
        principal_id: str,
    ) -> None:
        """Record that a competition was created."""
        ...

    def competition_updated(
        self, competition_id: str, visibility: str, principal_id: str
    ) -> None:
        """Record that a competition's details were edited."""
        ...

    def competition_joined(
        self, competition_id: str, principal_id: str, was_new: bool
    ) -> None:
        """Record that a principal joined a competition."""
        ...

    def participants_listed(
        self, competition_id: str, principal_id: str, count: int
    ) -> None:
        """Record that a competition's roster was listed."""
        ...


class DefaultCompetitionServiceProbe:
    """Default implementation of CompetitionServiceProbe using structlog."""

    def __init__(self, logger: structlog.stdlib.BoundLogger | None = None):
        self._logger = logger or structlog.get_logger()

    def competitions_listed(self, principal_id: str, count: int) -> None:
        """Record that the visible competitions were listed."""
        self._logger.debug(
            "competitions_listed",
            principal_id=principal_id,
            count=count,
        )

    def competition_retrieved(self, competition_id: str, principal_id: str) -> None:
        """Record that a competition was retrieved."""
        self._logger.debug(
            "competition_retrieved",
            competition_id=competition_id,
            principal_id=principal_id,
        )

    def competition_not_found(self, competition_id: str, principal_id: str) -> None:
        """Record that a requested competition does not exist."""
        self._logger.info(
            "competition_not_found",
            competition_id=competition_id,
            principal_id=principal_id,
        )

    def access_denied(
        self,
        permission: str,
        principal_id: str,
        role: str,
        competition_id: str | None,
    ) -> None:
        """Record that the access decision engine denied a request."""
        self._logger.warning(
            "access_denied",
            permission=permission,
            principal_id=principal_id,
            role=role,
            competition_id=competition_id,
        )

    def competition_validation_failed(self, field: str, principal_id: str) -> None:
        """Record that submitted competition details were rejected."""
        self._logger.info(
            "competition_validation_failed",
            field=field,
            principal_id=principal_id,
        )

    def competition_created(
        self,
        competition_id: str,
        owner_tenant_id: str,
        visibility: str,
        principal_id: str,
    ) -> None:
        """Record that a competition was created."""
        self._logger.info(
            "competition_created",
            competition_id=competition_id,
            owner_tenant_id=owner_tenant_id,
            visibility=visibility,
            principal_id=principal_id,
        )

    def competition_updated(
        self, competition_id: str, visibility: str, principal_id: str
    ) -> None:
        """Record that a competition's details were edited."""
        self._logger.info(
            "competition_updated",
            competition_id=competition_id,
            visibility=visibility,
            principal_id=principal_id,
        )

    def competition_joined(
        self, competition_id: str, principal_id: str, was_new: bool
    ) -> None:
        """Record that a principal joined a competition."""
        self._logger.info(
            "competition_joined",
            competition_id=competition_id,
            principal_id=principal_id,
            was_new=was_new,
        )

    def participants_listed(
        self, competition_id: str, principal_id: str, count: int
    ) -> None:
        """Record that a competition's roster was listed."""
        self._logger.debug(
            "participants_listed",
            competition_id=competition_id,
            principal_id=principal_id,
            count=count,
        )
