"""Principal aggregate for the Competitions context."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from competitions.domain.value_objects import PrincipalId, Role, TenantId


@dataclass(frozen=True)
class Principal:
    """Principal aggregate representing an authenticated user.

    Business rules:
    - STUDENT and SCHOOL_ADMIN principals always belong to a tenant
    - PLATFORM_ADMIN principals never belong to a tenant

    Principals are created by the session provider and stay immutable for
    the duration of any directory operation.
    """

    id: PrincipalId
    email: str
    role: Role
    tenant_id: Optional[TenantId]
    first_name: str = ""
    last_name: str = ""

    def __post_init__(self) -> None:
        """Validate the role/tenant invariant."""
        if self.role == Role.PLATFORM_ADMIN and self.tenant_id is not None:
            raise ValueError("A platform admin cannot belong to a tenant")
        if self.role != Role.PLATFORM_ADMIN and self.tenant_id is None:
            raise ValueError(f"A {self.role} principal must belong to a tenant")

    @classmethod
    def create(
        cls,
        email: str,
        role: Role,
        tenant_id: Optional[TenantId] = None,
        first_name: str = "",
        last_name: str = "",
    ) -> Principal:
        """Factory method for provisioning a new principal.

        Args:
            email: Login identifier
            role: The principal's role
            tenant_id: Home school (must be None for platform admins)
            first_name: Given name
            last_name: Family name

        Returns:
            A new Principal aggregate with a generated ID

        Raises:
            ValueError: If the role/tenant combination is invalid
        """
        return cls(
            id=PrincipalId.generate(),
            email=email,
            role=role,
            tenant_id=tenant_id,
            first_name=first_name,
            last_name=last_name,
        )

    @property
    def display_name(self) -> str:
        """Full name, falling back to the email when no name is known."""
        name = f"{self.first_name} {self.last_name}".strip()
        return name or self.email

    def __str__(self) -> str:
        """Return string representation."""
        return f"Principal({self.email})"

    def __eq__(self, other: object) -> bool:
        """Principals are equal if they have the same ID (identity-based equality)."""
        if not isinstance(other, Principal):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        """Hash based on ID for use in sets and dicts."""
        return hash(self.id)
