"""Access decision engine for competitions.

Pure, side-effect-free decisions over (principal, competition) pairs. The
functions here only look at the principal's role and tenant and at the
competition's owner, visibility and access list; they never touch a store
and never raise for well-formed principals. They hold no state, so they can
be called concurrently from any number of tasks or threads.

Visibility rules, first match wins:

1. Platform admins see everything.
2. PUBLIC competitions are visible to everyone.
3. Within the owning school, admins see every competition while students
   see everything except PRIVATE competitions.
4. RESTRICTED competitions are visible to every principal of a school on
   the access list.
5. Everything else is hidden.
"""

from __future__ import annotations

from competitions.domain.aggregates import Competition, Principal
from competitions.domain.value_objects import Role, Visibility
from shared_kernel.authorization.types import Permission


def can_view(principal: Principal, competition: Competition) -> bool:
    """Decide whether a principal may see a competition."""
    if principal.role == Role.PLATFORM_ADMIN:
        return True

    if competition.visibility == Visibility.PUBLIC:
        return True

    if competition.owner_tenant_id == principal.tenant_id:
        match principal.role:
            case Role.SCHOOL_ADMIN:
                return True
            case Role.STUDENT:
                return competition.visibility != Visibility.PRIVATE
            case Role.PLATFORM_ADMIN:
                # Unreachable: handled by rule 1.
                return True

    return competition.grants_access_to(principal.tenant_id)


def can_edit(principal: Principal, competition: Competition) -> bool:
    """Decide whether a principal may edit a competition.

    Platform admins edit anything; school admins edit their own school's
    competitions; students never edit.
    """
    match principal.role:
        case Role.PLATFORM_ADMIN:
            return True
        case Role.SCHOOL_ADMIN:
            return principal.tenant_id == competition.owner_tenant_id
        case Role.STUDENT:
            return False


def can_create(principal: Principal) -> bool:
    """Decide whether a principal may create competitions at all."""
    match principal.role:
        case Role.SCHOOL_ADMIN | Role.PLATFORM_ADMIN:
            return True
        case Role.STUDENT:
            return False


def can_join(principal: Principal, competition: Competition) -> bool:
    """Decide whether a principal may join a competition.

    Only students join, and only competitions they can see.
    """
    return principal.role == Role.STUDENT and can_view(principal, competition)


def is_permitted(
    principal: Principal,
    permission: Permission,
    competition: Competition | None = None,
) -> bool:
    """Evaluate a permission by name.

    CREATE ignores ``competition``. Every other permission is denied when
    no competition is given.
    """
    if permission == Permission.CREATE:
        return can_create(principal)
    if competition is None:
        return False

    match permission:
        case Permission.VIEW:
            return can_view(principal, competition)
        case Permission.EDIT:
            return can_edit(principal, competition)
        case Permission.JOIN:
            return can_join(principal, competition)
    return False


def is_own_tenant_competition(principal: Principal, competition: Competition) -> bool:
    """Check whether the competition is hosted by the principal's school."""
    return (
        principal.tenant_id is not None
        and principal.tenant_id == competition.owner_tenant_id
    )


def is_accessible_via_restriction(
    principal: Principal, competition: Competition
) -> bool:
    """Check whether the principal sees the competition through its access list.

    True only for RESTRICTED competitions hosted by another school that
    lists the principal's school.
    """
    return not is_own_tenant_competition(
        principal, competition
    ) and competition.grants_access_to(principal.tenant_id)
