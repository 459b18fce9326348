"""In-memory implementation of ITenantRepository."""

from __future__ import annotations

from competitions.domain.aggregates import Tenant
from competitions.domain.value_objects import TenantId
from competitions.ports.exceptions import NotFoundError
from competitions.ports.repositories import ITenantRepository
from shared_kernel.authorization.types import ResourceType


class InMemoryTenantRepository(ITenantRepository):
    """Dictionary-backed tenant storage.

    Tenants are provisioned once and never modified, so reads need no
    locking.
    """

    def __init__(self) -> None:
        self._tenants: dict[TenantId, Tenant] = {}

    async def add(self, tenant: Tenant) -> None:
        if tenant.id in self._tenants:
            raise ValueError(f"Tenant {tenant.id} is already provisioned")
        self._tenants[tenant.id] = tenant

    async def get_by_id(self, tenant_id: TenantId) -> Tenant:
        try:
            return self._tenants[tenant_id]
        except KeyError:
            raise NotFoundError(ResourceType.TENANT, tenant_id.value) from None

    async def exists(self, tenant_id: TenantId) -> bool:
        return tenant_id in self._tenants

    async def list_all(self) -> list[Tenant]:
        return list(self._tenants.values())
