"""Shared fixtures for Competitions unit tests."""

from __future__ import annotations

from collections.abc import Callable
from datetime import date

import pytest

from competitions.domain.aggregates import Competition, Principal
from competitions.domain.value_objects import Role, TenantId, Visibility


@pytest.fixture
def tenant_a() -> TenantId:
    return TenantId.generate()


@pytest.fixture
def tenant_b() -> TenantId:
    return TenantId.generate()


@pytest.fixture
def tenant_c() -> TenantId:
    return TenantId.generate()


@pytest.fixture
def tenant_d() -> TenantId:
    return TenantId.generate()


@pytest.fixture
def make_principal() -> Callable[..., Principal]:
    """Factory for principals with unique emails."""
    counter = iter(range(1_000_000))

    def _make(role: Role, tenant_id: TenantId | None = None) -> Principal:
        return Principal.create(
            email=f"{role.value.lower()}-{next(counter)}@example.edu",
            role=role,
            tenant_id=tenant_id,
        )

    return _make


@pytest.fixture
def make_competition() -> Callable[..., Competition]:
    """Factory for valid competitions."""

    def _make(
        owner_tenant_id: TenantId,
        visibility: Visibility,
        accessible_tenant_ids: tuple[TenantId, ...] = (),
    ) -> Competition:
        return Competition.create(
            title="Math Challenge",
            description="Problem-solving under time pressure.",
            start_date=date(2025, 6, 1),
            end_date=date(2025, 6, 10),
            owner_tenant_id=owner_tenant_id,
            visibility=visibility,
            accessible_tenant_ids=accessible_tenant_ids,
        )

    return _make
