"""Tenant aggregate for the Competitions context."""

from __future__ import annotations

from dataclasses import dataclass

from competitions.domain.value_objects import TenantId


@dataclass(frozen=True)
class Tenant:
    """Tenant aggregate representing a school.

    Tenants are the isolation boundary for competitions and membership.
    The tenant set is provisioned up front and never changes afterwards,
    so the aggregate is immutable.
    """

    id: TenantId
    name: str
    subdomain: str

    def __post_init__(self) -> None:
        """Validate business rules after initialization."""
        if not self.name or not self.name.strip():
            raise ValueError("Tenant name must not be empty")
        if not self.subdomain or not self.subdomain.strip():
            raise ValueError("Tenant subdomain must not be empty")

    @classmethod
    def create(cls, name: str, subdomain: str) -> Tenant:
        """Factory method for provisioning a new tenant.

        Args:
            name: Display name of the school
            subdomain: Short slug identifying the school

        Returns:
            A new Tenant aggregate with a generated ID
        """
        return cls(id=TenantId.generate(), name=name, subdomain=subdomain)
