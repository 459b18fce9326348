"""Pydantic models for competition API requests and responses."""

from __future__ import annotations

from datetime import date

from pydantic import BaseModel, Field

from competitions.application.value_objects import CompetitionFormData
from competitions.domain import policy
from competitions.domain.aggregates import Competition, Principal
from competitions.domain.value_objects import (
    Role,
    ScheduleStatus,
    Visibility,
)


class CompetitionRequest(BaseModel):
    """Request model for creating or editing a competition.

    Business rules (non-blank text, date order, access lists) are checked
    by the domain so that every violation is reported the same way.
    """

    title: str = Field(..., description="Competition title")
    description: str = Field(..., description="Competition description")
    start_date: date = Field(..., description="First day of the competition")
    end_date: date = Field(..., description="Last day of the competition")
    visibility: Visibility = Field(..., description="PRIVATE, PUBLIC or RESTRICTED")
    accessible_tenant_ids: list[str] = Field(
        default_factory=list,
        description="Schools granted access (RESTRICTED only, ULID format)",
    )
    owner_tenant_id: str | None = Field(
        default=None,
        description="Hosting school (required for platform admins, ULID format)",
    )

    def to_form_data(self) -> CompetitionFormData:
        """Convert to the application-layer form payload.

        Tenant IDs are passed through unparsed; the service checks them
        once the caller is authorized.
        """
        return CompetitionFormData(
            title=self.title,
            description=self.description,
            start_date=self.start_date,
            end_date=self.end_date,
            visibility=self.visibility,
            accessible_tenant_ids=tuple(self.accessible_tenant_ids),
            owner_tenant_id=self.owner_tenant_id,
        )


class CompetitionResponse(BaseModel):
    """Response model for a competition, as seen by one principal."""

    id: str = Field(..., description="Competition ID (ULID format)")
    title: str = Field(..., description="Competition title")
    description: str = Field(..., description="Competition description")
    start_date: date = Field(..., description="First day of the competition")
    end_date: date = Field(..., description="Last day of the competition")
    owner_tenant_id: str = Field(..., description="Hosting school ID")
    visibility: Visibility = Field(..., description="Disclosure policy")
    accessible_tenant_ids: list[str] = Field(
        default_factory=list, description="Schools granted access (sorted)"
    )
    is_own_school: bool = Field(
        ..., description="Hosted by the requesting principal's school"
    )
    via_restriction: bool = Field(
        ..., description="Visible to the principal through the access list"
    )
    can_edit: bool = Field(..., description="The principal may edit it")
    can_join: bool = Field(..., description="The principal may join it")
    schedule_status: ScheduleStatus = Field(..., description="Schedule status today")
    days_remaining: int = Field(..., description="Days until the end date")

    @classmethod
    def from_domain(
        cls, competition: Competition, principal: Principal, today: date
    ) -> CompetitionResponse:
        """Convert a Competition aggregate to an API response.

        Args:
            competition: Competition domain aggregate
            principal: The principal the response is rendered for
            today: Reference day for schedule fields

        Returns:
            CompetitionResponse
        """
        return cls(
            id=competition.id.value,
            title=competition.title,
            description=competition.description,
            start_date=competition.start_date,
            end_date=competition.end_date,
            owner_tenant_id=competition.owner_tenant_id.value,
            visibility=competition.visibility,
            accessible_tenant_ids=sorted(
                t.value for t in competition.accessible_tenant_ids
            ),
            is_own_school=policy.is_own_tenant_competition(principal, competition),
            via_restriction=policy.is_accessible_via_restriction(
                principal, competition
            ),
            can_edit=policy.can_edit(principal, competition),
            can_join=policy.can_join(principal, competition),
            schedule_status=competition.schedule_status(today),
            days_remaining=competition.days_remaining(today),
        )


class MembershipResponse(BaseModel):
    """Response model for a principal's participation in a competition."""

    competition_id: str = Field(..., description="Competition ID (ULID format)")
    has_joined: bool = Field(..., description="Whether the principal has joined")


class PrincipalResponse(BaseModel):
    """Response model for a principal."""

    id: str = Field(..., description="Principal ID (ULID format)")
    email: str = Field(..., description="Login email")
    display_name: str = Field(..., description="Full name")
    role: Role = Field(..., description="Principal role")
    tenant_id: str | None = Field(
        default=None, description="Home school (absent for platform admins)"
    )

    @classmethod
    def from_domain(cls, principal: Principal) -> PrincipalResponse:
        """Convert a Principal aggregate to an API response.

        Args:
            principal: Principal domain aggregate

        Returns:
            PrincipalResponse
        """
        return cls(
            id=principal.id.value,
            email=principal.email,
            display_name=principal.display_name,
            role=principal.role,
            tenant_id=principal.tenant_id.value if principal.tenant_id else None,
        )
