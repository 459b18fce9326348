"""Repository protocols (ports) for the Competitions bounded context.

The directory store is plain keyed storage with no policy of its own.
Implementations may keep everything in memory or back it with a database;
the application layer only relies on the contracts below.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from competitions.domain.aggregates import Competition, Principal, Tenant
from competitions.domain.value_objects import (
    CompetitionId,
    Participation,
    PrincipalId,
    TenantId,
)


@runtime_checkable
class ITenantRepository(Protocol):
    """Repository for the closed set of provisioned tenants."""

    async def add(self, tenant: Tenant) -> None:
        """Provision a tenant.

        Raises:
            ValueError: If a tenant with the same ID is already provisioned
        """
        ...

    async def get_by_id(self, tenant_id: TenantId) -> Tenant:
        """Retrieve a tenant by its ID.

        Raises:
            NotFoundError: If no such tenant exists
        """
        ...

    async def exists(self, tenant_id: TenantId) -> bool:
        """Check whether a tenant has been provisioned."""
        ...

    async def list_all(self) -> list[Tenant]:
        """List all tenants in provisioning order."""
        ...


@runtime_checkable
class IPrincipalRepository(Protocol):
    """Repository for principals known to the directory."""

    async def add(self, principal: Principal) -> None:
        """Register a principal.

        Raises:
            ValueError: If the ID or email is already registered
        """
        ...

    async def get_by_id(self, principal_id: PrincipalId) -> Principal:
        """Retrieve a principal by ID.

        Raises:
            NotFoundError: If no such principal exists
        """
        ...

    async def find_by_email(self, email: str) -> Principal | None:
        """Find a principal by email, ignoring case.

        Returns:
            The matching principal, or None
        """
        ...

    async def list_all(self) -> list[Principal]:
        """List all principals in registration order."""
        ...


@runtime_checkable
class ICompetitionRepository(Protocol):
    """Repository for competitions.

    Competitions must be enumerable in insertion order.
    """

    async def save(self, competition: Competition) -> None:
        """Persist a competition.

        Inserts a new competition at the end of the insertion order, or
        replaces an existing one in place.
        """
        ...

    async def get_by_id(self, competition_id: CompetitionId) -> Competition:
        """Retrieve a competition by ID.

        Raises:
            NotFoundError: If no such competition exists
        """
        ...

    async def list_all(self) -> list[Competition]:
        """List all competitions in insertion order."""
        ...


@runtime_checkable
class IParticipationLedger(Protocol):
    """Records which principals joined which competitions.

    A (competition, principal) pair is recorded at most once. Callers only
    record principals registered in the principal repository; the ledger
    itself does not check.
    """

    async def record(
        self, competition_id: CompetitionId, principal_id: PrincipalId
    ) -> bool:
        """Record a join, idempotently.

        Returns:
            True if a new entry was recorded, False if it already existed
        """
        ...

    async def contains(
        self, competition_id: CompetitionId, principal_id: PrincipalId
    ) -> bool:
        """Check whether the principal has joined the competition."""
        ...

    async def list_for_competition(
        self, competition_id: CompetitionId
    ) -> list[Participation]:
        """List a competition's entries in join order (empty if none)."""
        ...
