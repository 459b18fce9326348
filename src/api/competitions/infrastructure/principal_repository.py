"""In-memory implementation of IPrincipalRepository."""

from __future__ import annotations

from competitions.domain.aggregates import Principal
from competitions.domain.value_objects import PrincipalId
from competitions.ports.exceptions import NotFoundError
from competitions.ports.repositories import IPrincipalRepository
from shared_kernel.authorization.types import ResourceType


def _normalize_email(email: str) -> str:
    return email.strip().casefold()


class InMemoryPrincipalRepository(IPrincipalRepository):
    """Dictionary-backed principal storage with a case-insensitive email index."""

    def __init__(self) -> None:
        self._principals: dict[PrincipalId, Principal] = {}
        self._by_email: dict[str, PrincipalId] = {}

    async def add(self, principal: Principal) -> None:
        """Register a principal.

        Raises:
            ValueError: If the ID or (case-insensitive) email is taken
        """
        email_key = _normalize_email(principal.email)
        if principal.id in self._principals:
            raise ValueError(f"Principal {principal.id} is already registered")
        if email_key in self._by_email:
            raise ValueError(f"Email {principal.email} is already registered")

        self._principals[principal.id] = principal
        self._by_email[email_key] = principal.id

    async def get_by_id(self, principal_id: PrincipalId) -> Principal:
        try:
            return self._principals[principal_id]
        except KeyError:
            raise NotFoundError(ResourceType.PRINCIPAL, principal_id.value) from None

    async def find_by_email(self, email: str) -> Principal | None:
        principal_id = self._by_email.get(_normalize_email(email))
        if principal_id is None:
            return None
        return self._principals[principal_id]

    async def list_all(self) -> list[Principal]:
        return list(self._principals.values())
