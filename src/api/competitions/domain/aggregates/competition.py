"""Competition aggregate for the Competitions context."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import date

from competitions.domain.exceptions import CompetitionValidationError
from competitions.domain.value_objects import (
    CompetitionId,
    ScheduleStatus,
    TenantId,
    Visibility,
)


@dataclass
class Competition:
    """Competition aggregate hosted by a single school.

    Business rules:
    - Title and description are required (non-blank)
    - end_date must be strictly after start_date
    - RESTRICTED competitions name at least one accessible tenant
    - PRIVATE and PUBLIC competitions name no accessible tenants
    - owner_tenant_id never changes after creation

    Editable details are changed only through revise(), which re-applies
    the same rules.
    """

    id: CompetitionId
    title: str
    description: str
    start_date: date
    end_date: date
    owner_tenant_id: TenantId
    visibility: Visibility
    accessible_tenant_ids: frozenset[TenantId] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        """Validate business rules after initialization."""
        self.accessible_tenant_ids = frozenset(self.accessible_tenant_ids)
        self.validate_details(
            title=self.title,
            description=self.description,
            start_date=self.start_date,
            end_date=self.end_date,
            visibility=self.visibility,
            accessible_tenant_ids=self.accessible_tenant_ids,
        )

    @staticmethod
    def validate_details(
        title: str,
        description: str,
        start_date: date,
        end_date: date,
        visibility: Visibility,
        accessible_tenant_ids: Iterable[TenantId],
    ) -> None:
        """Check the editable details against the competition rules.

        Fields are checked in declaration order, so the first offending
        field is the one reported.

        Raises:
            CompetitionValidationError: Naming the first offending field
        """
        if not title or not title.strip():
            raise CompetitionValidationError("title", "Title is required")
        if not description or not description.strip():
            raise CompetitionValidationError("description", "Description is required")
        if end_date <= start_date:
            raise CompetitionValidationError(
                "end_date", "End date must be after the start date"
            )

        has_access_list = bool(frozenset(accessible_tenant_ids))
        if visibility == Visibility.RESTRICTED and not has_access_list:
            raise CompetitionValidationError(
                "accessible_tenant_ids",
                "Restricted competitions must name at least one school",
            )
        if visibility != Visibility.RESTRICTED and has_access_list:
            raise CompetitionValidationError(
                "accessible_tenant_ids",
                f"{visibility} competitions cannot name accessible schools",
            )

    @classmethod
    def create(
        cls,
        title: str,
        description: str,
        start_date: date,
        end_date: date,
        owner_tenant_id: TenantId,
        visibility: Visibility,
        accessible_tenant_ids: Iterable[TenantId] = (),
    ) -> Competition:
        """Factory method for creating a new competition.

        Args:
            title: Competition title
            description: Competition description
            start_date: First day of the competition
            end_date: Last day of the competition (after start_date)
            owner_tenant_id: The hosting school
            visibility: Disclosure policy
            accessible_tenant_ids: Schools granted access when RESTRICTED

        Returns:
            A new Competition aggregate with a generated ID

        Raises:
            CompetitionValidationError: If any rule is violated
        """
        return cls(
            id=CompetitionId.generate(),
            title=title,
            description=description,
            start_date=start_date,
            end_date=end_date,
            owner_tenant_id=owner_tenant_id,
            visibility=visibility,
            accessible_tenant_ids=frozenset(accessible_tenant_ids),
        )

    def revise(
        self,
        title: str,
        description: str,
        start_date: date,
        end_date: date,
        visibility: Visibility,
        accessible_tenant_ids: Iterable[TenantId] = (),
    ) -> None:
        """Replace the editable details of this competition.

        The aggregate is left untouched when validation fails.

        Raises:
            CompetitionValidationError: If any rule is violated
        """
        accessible = frozenset(accessible_tenant_ids)
        self.validate_details(
            title=title,
            description=description,
            start_date=start_date,
            end_date=end_date,
            visibility=visibility,
            accessible_tenant_ids=accessible,
        )
        self.title = title
        self.description = description
        self.start_date = start_date
        self.end_date = end_date
        self.visibility = visibility
        self.accessible_tenant_ids = accessible

    def grants_access_to(self, tenant_id: TenantId | None) -> bool:
        """Check whether a tenant is on this competition's access list.

        Only meaningful for RESTRICTED competitions; always False otherwise.
        """
        if self.visibility != Visibility.RESTRICTED or tenant_id is None:
            return False
        return tenant_id in self.accessible_tenant_ids

    def days_remaining(self, today: date) -> int:
        """Days from ``today`` until the end date (negative once ended)."""
        return (self.end_date - today).days

    def schedule_status(self, today: date) -> ScheduleStatus:
        """Classify the competition relative to ``today``."""
        remaining = self.days_remaining(today)
        if remaining < 0:
            return ScheduleStatus.ENDED
        if remaining == 0:
            return ScheduleStatus.LAST_DAY
        if today < self.start_date:
            return ScheduleStatus.UPCOMING
        return ScheduleStatus.ONGOING
