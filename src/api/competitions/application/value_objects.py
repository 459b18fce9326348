"""Application-layer value objects for the Competitions bounded context."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from competitions.domain.value_objects import Visibility


@dataclass(frozen=True)
class CompetitionFormData:
    """Caller-supplied details for creating or editing a competition.

    This is an application-layer concept because it is the raw request
    payload, not yet validated against the competition rules. Tenant IDs
    stay unparsed strings until the service has authorized the caller.

    Attributes:
        title: Competition title
        description: Competition description
        start_date: First day of the competition
        end_date: Last day of the competition
        visibility: Disclosure policy
        accessible_tenant_ids: Schools granted access when RESTRICTED
            (ULID strings)
        owner_tenant_id: Hosting school (ULID string). Required when a
            platform admin creates a competition; ignored for school admins
            and on edits.
    """

    title: str
    description: str
    start_date: date
    end_date: date
    visibility: Visibility
    accessible_tenant_ids: tuple[str, ...] = ()
    owner_tenant_id: Optional[str] = None
