"""Competition directory service for the Competitions bounded context.

Handles listing, retrieval, creation, editing and joining of competitions,
consulting the access decision engine before returning or mutating data.
"""

from __future__ import annotations

from collections.abc import Iterable

from competitions.application.observability import (
    CompetitionServiceProbe,
    DefaultCompetitionServiceProbe,
)
from competitions.application.value_objects import CompetitionFormData
from competitions.domain import policy
from competitions.domain.aggregates import Competition, Principal
from competitions.domain.exceptions import CompetitionValidationError
from competitions.domain.value_objects import CompetitionId, Role, TenantId
from competitions.ports.exceptions import ForbiddenError, NotFoundError
from competitions.ports.repositories import (
    ICompetitionRepository,
    IParticipationLedger,
    IPrincipalRepository,
    ITenantRepository,
)
from shared_kernel.authorization.types import (
    Permission,
    ResourceType,
    format_resource,
)


def _parse_tenant_id(field: str, value: str) -> TenantId:
    try:
        return TenantId.from_string(value)
    except ValueError as e:
        raise CompetitionValidationError(field, str(e)) from e


class CompetitionDirectoryService:
    """Application service for the competition directory.

    This service is the only error boundary of the directory: the access
    decision engine returns plain booleans, and this service turns denials
    into ForbiddenError, missing ids into NotFoundError and rejected
    details into CompetitionValidationError. It also owns the
    participation ledger.
    """

    def __init__(
        self,
        competition_repository: ICompetitionRepository,
        tenant_repository: ITenantRepository,
        principal_repository: IPrincipalRepository,
        participation_ledger: IParticipationLedger,
        probe: CompetitionServiceProbe | None = None,
    ):
        """Initialize CompetitionDirectoryService with dependencies.

        Args:
            competition_repository: Repository for competition persistence
            tenant_repository: Repository of provisioned tenants (for
                validating owner and accessible tenant ids)
            principal_repository: Repository for resolving participants
            participation_ledger: Ledger of who joined which competition
            probe: Optional domain probe for observability
        """
        self._competition_repository = competition_repository
        self._tenant_repository = tenant_repository
        self._principal_repository = principal_repository
        self._participation_ledger = participation_ledger
        self._probe = probe or DefaultCompetitionServiceProbe()

    async def list_visible(self, principal: Principal) -> list[Competition]:
        """List every competition the principal may view.

        Args:
            principal: The requesting principal

        Returns:
            Visible competitions in the store's insertion order (possibly empty)
        """
        competitions = await self._competition_repository.list_all()
        visible = [c for c in competitions if policy.can_view(principal, c)]

        self._probe.competitions_listed(
            principal_id=principal.id.value,
            count=len(visible),
        )
        return visible

    async def get(
        self, competition_id: CompetitionId, principal: Principal
    ) -> Competition:
        """Retrieve a competition by ID with VIEW permission check.

        Args:
            competition_id: The competition to retrieve
            principal: The requesting principal

        Returns:
            The Competition aggregate

        Raises:
            NotFoundError: If the competition does not exist
            ForbiddenError: If the principal may not view it
        """
        competition = await self._load(competition_id, principal)
        self._authorize(principal, Permission.VIEW, competition)

        self._probe.competition_retrieved(
            competition_id=competition_id.value,
            principal_id=principal.id.value,
        )
        return competition

    async def create(
        self, form: CompetitionFormData, principal: Principal
    ) -> Competition:
        """Create a new competition.

        School admins always create competitions for their own school; any
        owner tenant in the form is ignored for them. Platform admins have
        no school and must name the owner tenant explicitly.

        Args:
            form: Submitted competition details
            principal: The creating principal

        Returns:
            The stored Competition aggregate

        Raises:
            ForbiddenError: If the principal may not create competitions
            CompetitionValidationError: If the details are invalid or the
                owner tenant is missing or unknown
        """
        self._authorize(principal, Permission.CREATE)

        try:
            accessible_tenant_ids = await self._validate_form(form)
            owner_tenant_id = await self._resolve_owner_tenant(form, principal)
            competition = Competition.create(
                title=form.title,
                description=form.description,
                start_date=form.start_date,
                end_date=form.end_date,
                owner_tenant_id=owner_tenant_id,
                visibility=form.visibility,
                accessible_tenant_ids=accessible_tenant_ids,
            )
        except CompetitionValidationError as e:
            self._probe.competition_validation_failed(
                field=e.field,
                principal_id=principal.id.value,
            )
            raise

        await self._competition_repository.save(competition)

        self._probe.competition_created(
            competition_id=competition.id.value,
            owner_tenant_id=competition.owner_tenant_id.value,
            visibility=competition.visibility.value,
            principal_id=principal.id.value,
        )
        return competition

    async def update(
        self,
        competition_id: CompetitionId,
        form: CompetitionFormData,
        principal: Principal,
    ) -> Competition:
        """Edit a competition's details.

        Uses the same edit permission as the engine's can_edit. The owner
        tenant never changes, so form.owner_tenant_id is ignored.

        Args:
            competition_id: The competition to edit
            form: Replacement details
            principal: The editing principal

        Returns:
            The updated Competition aggregate

        Raises:
            NotFoundError: If the competition does not exist
            ForbiddenError: If the principal may not edit it
            CompetitionValidationError: If the new details are invalid
        """
        competition = await self._load(competition_id, principal)
        self._authorize(principal, Permission.EDIT, competition)

        try:
            accessible_tenant_ids = await self._validate_form(form)
            competition.revise(
                title=form.title,
                description=form.description,
                start_date=form.start_date,
                end_date=form.end_date,
                visibility=form.visibility,
                accessible_tenant_ids=accessible_tenant_ids,
            )
        except CompetitionValidationError as e:
            self._probe.competition_validation_failed(
                field=e.field,
                principal_id=principal.id.value,
            )
            raise

        await self._competition_repository.save(competition)

        self._probe.competition_updated(
            competition_id=competition.id.value,
            visibility=competition.visibility.value,
            principal_id=principal.id.value,
        )
        return competition

    async def join(self, competition_id: CompetitionId, principal: Principal) -> None:
        """Add the principal to a competition's participation set.

        Joining is idempotent: joining again is a successful no-op.

        Args:
            competition_id: The competition to join
            principal: The joining principal

        Raises:
            NotFoundError: If the competition does not exist, or the
                principal is not registered in the directory
            ForbiddenError: If the principal may not join it
        """
        competition = await self._load(competition_id, principal)
        self._authorize(principal, Permission.JOIN, competition)

        # The ledger only references registered principals.
        await self._principal_repository.get_by_id(principal.id)

        was_new = await self._participation_ledger.record(
            competition_id, principal.id
        )
        self._probe.competition_joined(
            competition_id=competition_id.value,
            principal_id=principal.id.value,
            was_new=was_new,
        )

    async def has_joined(
        self, competition_id: CompetitionId, principal: Principal
    ) -> bool:
        """Check whether the principal has joined the competition.

        Never raises: unknown competitions or principals simply report False.
        """
        return await self._participation_ledger.contains(competition_id, principal.id)

    async def list_participants(
        self, competition_id: CompetitionId, principal: Principal
    ) -> list[Principal]:
        """List the principals who joined a competition, in join order.

        Only the competition's editors may see the roster. Returns exactly
        the recorded join set, which may be empty.

        Args:
            competition_id: The competition whose roster to list
            principal: The requesting principal

        Returns:
            Joined principals in join order

        Raises:
            NotFoundError: If the competition does not exist
            ForbiddenError: If the principal may not edit the competition
        """
        competition = await self._load(competition_id, principal)
        self._authorize(principal, Permission.EDIT, competition)

        participations = await self._participation_ledger.list_for_competition(
            competition_id
        )
        participants = [
            await self._principal_repository.get_by_id(p.principal_id)
            for p in participations
        ]

        self._probe.participants_listed(
            competition_id=competition_id.value,
            principal_id=principal.id.value,
            count=len(participants),
        )
        return participants

    async def _load(
        self, competition_id: CompetitionId, principal: Principal
    ) -> Competition:
        """Fetch a competition, recording misses before re-raising."""
        try:
            return await self._competition_repository.get_by_id(competition_id)
        except NotFoundError:
            self._probe.competition_not_found(
                competition_id=competition_id.value,
                principal_id=principal.id.value,
            )
            raise

    def _authorize(
        self,
        principal: Principal,
        permission: Permission,
        competition: Competition | None = None,
    ) -> None:
        """Raise ForbiddenError unless the engine permits the action."""
        if policy.is_permitted(principal, permission, competition):
            return

        competition_id = competition.id.value if competition else None
        self._probe.access_denied(
            permission=permission.value,
            principal_id=principal.id.value,
            role=principal.role.value,
            competition_id=competition_id,
        )
        raise ForbiddenError(
            permission=permission.value,
            principal_id=principal.id.value,
            resource=(
                format_resource(ResourceType.COMPETITION, competition_id)
                if competition_id
                else None
            ),
        )

    async def _validate_form(self, form: CompetitionFormData) -> frozenset[TenantId]:
        """Apply the competition rules and check referenced tenants exist.

        Malformed tenant IDs are reported before the other rules run.

        Returns:
            The parsed accessible tenant IDs

        Raises:
            CompetitionValidationError: Naming the first offending field
        """
        accessible_tenant_ids = frozenset(
            _parse_tenant_id("accessible_tenant_ids", value)
            for value in form.accessible_tenant_ids
        )
        Competition.validate_details(
            title=form.title,
            description=form.description,
            start_date=form.start_date,
            end_date=form.end_date,
            visibility=form.visibility,
            accessible_tenant_ids=accessible_tenant_ids,
        )
        unknown = await self._unknown_tenants(accessible_tenant_ids)
        if unknown:
            raise CompetitionValidationError(
                "accessible_tenant_ids",
                f"Unknown schools: {', '.join(sorted(t.value for t in unknown))}",
            )
        return accessible_tenant_ids

    async def _resolve_owner_tenant(
        self, form: CompetitionFormData, principal: Principal
    ) -> TenantId:
        """Determine the hosting school for a new competition.

        Raises:
            CompetitionValidationError: If a platform admin omits the owner
                tenant or names one that is not provisioned
        """
        match principal.role:
            case Role.SCHOOL_ADMIN:
                # Never caller-supplied for school admins.
                assert principal.tenant_id is not None
                return principal.tenant_id
            case Role.PLATFORM_ADMIN:
                if form.owner_tenant_id is None:
                    raise CompetitionValidationError(
                        "owner_tenant_id",
                        "Platform admins must choose the hosting school",
                    )
                owner_tenant_id = _parse_tenant_id(
                    "owner_tenant_id", form.owner_tenant_id
                )
                if not await self._tenant_repository.exists(owner_tenant_id):
                    raise CompetitionValidationError(
                        "owner_tenant_id",
                        f"Unknown school: {owner_tenant_id.value}",
                    )
                return owner_tenant_id
            case Role.STUDENT:
                # Unreachable: create() authorizes before resolving the owner.
                raise ForbiddenError(
                    permission=Permission.CREATE.value,
                    principal_id=principal.id.value,
                )

    async def _unknown_tenants(
        self, tenant_ids: Iterable[TenantId]
    ) -> list[TenantId]:
        return [
            tenant_id
            for tenant_id in tenant_ids
            if not await self._tenant_repository.exists(tenant_id)
        ]
