"""Session service for the Competitions bounded context.

Resolves login identifiers to principals. Credential checking is out of
scope: an identifier that matches a registered email is a successful login.
"""

from __future__ import annotations

from competitions.application.observability import (
    DefaultSessionServiceProbe,
    SessionServiceProbe,
)
from competitions.domain.aggregates import Principal
from competitions.ports.repositories import IPrincipalRepository


class SessionService:
    """Application service resolving login identifiers to principals."""

    def __init__(
        self,
        principal_repository: IPrincipalRepository,
        probe: SessionServiceProbe | None = None,
    ):
        """Initialize SessionService with dependencies.

        Args:
            principal_repository: Repository for principal lookup
            probe: Optional domain probe for observability
        """
        self._principal_repository = principal_repository
        self._probe = probe or DefaultSessionServiceProbe()

    async def login(self, identifier: str) -> Principal | None:
        """Resolve a login identifier (email) to a principal.

        Matching ignores case and surrounding whitespace.

        Args:
            identifier: The login identifier

        Returns:
            The matching Principal, or None if nothing matches
        """
        identifier = identifier.strip()
        if not identifier:
            self._probe.login_failed(reason="empty_identifier")
            return None

        principal = await self._principal_repository.find_by_email(identifier)
        if principal is None:
            self._probe.login_failed(reason="unknown_identifier")
            return None

        self._probe.login_succeeded(
            principal_id=principal.id.value,
            role=principal.role.value,
        )
        return principal
