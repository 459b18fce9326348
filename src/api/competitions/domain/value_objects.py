"""Value objects for the Competitions domain.

Value objects are immutable descriptors that provide type safety and
domain semantics for identifiers and domain concepts.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum

from ulid import ULID


@dataclass(frozen=True)
class TenantId:
    """Identifier for a Tenant (school).

    Uses ULID for sortability and distribution-friendly generation.
    """

    value: str

    def __str__(self) -> str:
        """Return string representation."""
        return self.value

    @classmethod
    def generate(cls) -> TenantId:
        """Generate a new TenantId using ULID."""
        return cls(value=str(ULID()))

    @classmethod
    def from_string(cls, value: str) -> TenantId:
        """Create TenantId from string value.

        Args:
            value: ULID string

        Returns:
            TenantId instance

        Raises:
            ValueError: If value is not a valid ULID
        """
        try:
            ULID.from_str(value)
        except ValueError as e:
            raise ValueError(f"Invalid TenantId: {value}") from e

        return cls(value=value)


@dataclass(frozen=True)
class PrincipalId:
    """Identifier for a Principal (user).

    Uses ULID for sortability and distribution-friendly generation.
    """

    value: str

    def __str__(self) -> str:
        """Return string representation."""
        return self.value

    @classmethod
    def generate(cls) -> PrincipalId:
        """Generate a new PrincipalId using ULID."""
        return cls(value=str(ULID()))

    @classmethod
    def from_string(cls, value: str) -> PrincipalId:
        """Create PrincipalId from string value.

        Args:
            value: ULID string

        Returns:
            PrincipalId instance

        Raises:
            ValueError: If value is not a valid ULID
        """
        try:
            ULID.from_str(value)
        except ValueError as e:
            raise ValueError(f"Invalid PrincipalId: {value}") from e

        return cls(value=value)


@dataclass(frozen=True)
class CompetitionId:
    """Identifier for a Competition.

    ULIDs are generated without coordination, so concurrent creations can
    never be assigned the same identifier.
    """

    value: str

    def __str__(self) -> str:
        """Return string representation."""
        return self.value

    @classmethod
    def generate(cls) -> CompetitionId:
        """Generate a new CompetitionId using ULID."""
        return cls(value=str(ULID()))

    @classmethod
    def from_string(cls, value: str) -> CompetitionId:
        """Create CompetitionId from string value.

        Args:
            value: ULID string

        Returns:
            CompetitionId instance

        Raises:
            ValueError: If value is not a valid ULID
        """
        try:
            ULID.from_str(value)
        except ValueError as e:
            raise ValueError(f"Invalid CompetitionId: {value}") from e

        return cls(value=value)


class Role(StrEnum):
    """Closed set of principal roles.

    Only PLATFORM_ADMIN principals live outside any tenant.
    """

    STUDENT = "STUDENT"
    SCHOOL_ADMIN = "SCHOOL_ADMIN"
    PLATFORM_ADMIN = "PLATFORM_ADMIN"


class Visibility(StrEnum):
    """Cross-tenant disclosure policy of a competition."""

    PRIVATE = "PRIVATE"
    PUBLIC = "PUBLIC"
    RESTRICTED = "RESTRICTED"


class ScheduleStatus(StrEnum):
    """Where a competition sits relative to a given calendar day."""

    UPCOMING = "UPCOMING"
    ONGOING = "ONGOING"
    LAST_DAY = "LAST_DAY"
    ENDED = "ENDED"


@dataclass(frozen=True)
class Participation:
    """A principal's entry in a competition's participation ledger.

    Attributes:
        competition_id: The competition joined
        principal_id: The principal who joined
        joined_at: When the first successful join was recorded (UTC)
    """

    competition_id: CompetitionId
    principal_id: PrincipalId
    joined_at: datetime
