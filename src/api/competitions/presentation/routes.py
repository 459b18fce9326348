"""HTTP routes for the competition directory."""

from __future__ import annotations

from datetime import date
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from competitions.application.services import CompetitionDirectoryService
from competitions.dependencies import get_competition_service, get_current_principal
from competitions.domain.aggregates import Principal
from competitions.domain.exceptions import CompetitionValidationError
from competitions.domain.value_objects import CompetitionId
from competitions.ports.exceptions import ForbiddenError, NotFoundError
from competitions.presentation.models import (
    CompetitionRequest,
    CompetitionResponse,
    MembershipResponse,
    PrincipalResponse,
)

router = APIRouter(
    prefix="/competitions",
    tags=["competitions"],
)


def get_today() -> date:
    """Reference day for schedule fields."""
    return date.today()


def _parse_competition_id(competition_id: str) -> CompetitionId:
    try:
        return CompetitionId.from_string(competition_id)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Invalid competition ID format: {e}",
        ) from e


def _not_found(e: NotFoundError) -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


def _forbidden() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_403_FORBIDDEN,
        detail="You do not have permission to perform this action",
    )


def _invalid(e: CompetitionValidationError) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        detail={"field": e.field, "message": e.message},
    )


@router.get("")
async def list_competitions(
    principal: Annotated[Principal, Depends(get_current_principal)],
    service: Annotated[CompetitionDirectoryService, Depends(get_competition_service)],
    today: Annotated[date, Depends(get_today)],
) -> list[CompetitionResponse]:
    """List the competitions visible to the current principal.

    Returns:
        Visible competitions in creation order
    """
    competitions = await service.list_visible(principal)
    return [CompetitionResponse.from_domain(c, principal, today) for c in competitions]


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_competition(
    request: CompetitionRequest,
    principal: Annotated[Principal, Depends(get_current_principal)],
    service: Annotated[CompetitionDirectoryService, Depends(get_competition_service)],
    today: Annotated[date, Depends(get_today)],
) -> CompetitionResponse:
    """Create a competition.

    Raises:
        HTTPException: 403 if the principal may not create competitions
        HTTPException: 422 naming the offending field if the details are invalid
    """
    try:
        competition = await service.create(request.to_form_data(), principal)
    except ForbiddenError as e:
        raise _forbidden() from e
    except CompetitionValidationError as e:
        raise _invalid(e) from e

    return CompetitionResponse.from_domain(competition, principal, today)


@router.get("/{competition_id}")
async def get_competition(
    competition_id: str,
    principal: Annotated[Principal, Depends(get_current_principal)],
    service: Annotated[CompetitionDirectoryService, Depends(get_competition_service)],
    today: Annotated[date, Depends(get_today)],
) -> CompetitionResponse:
    """Get a competition by ID.

    Raises:
        HTTPException: 400 if the ID is malformed
        HTTPException: 403 if the principal may not view it
        HTTPException: 404 if it does not exist
    """
    competition_id_obj = _parse_competition_id(competition_id)
    try:
        competition = await service.get(competition_id_obj, principal)
    except NotFoundError as e:
        raise _not_found(e) from e
    except ForbiddenError as e:
        raise _forbidden() from e

    return CompetitionResponse.from_domain(competition, principal, today)


@router.put("/{competition_id}")
async def update_competition(
    competition_id: str,
    request: CompetitionRequest,
    principal: Annotated[Principal, Depends(get_current_principal)],
    service: Annotated[CompetitionDirectoryService, Depends(get_competition_service)],
    today: Annotated[date, Depends(get_today)],
) -> CompetitionResponse:
    """Edit a competition's details.

    Raises:
        HTTPException: 400 if the ID is malformed
        HTTPException: 403 if the principal may not edit it
        HTTPException: 404 if it does not exist
        HTTPException: 422 naming the offending field if the details are invalid
    """
    competition_id_obj = _parse_competition_id(competition_id)
    try:
        competition = await service.update(
            competition_id_obj, request.to_form_data(), principal
        )
    except NotFoundError as e:
        raise _not_found(e) from e
    except ForbiddenError as e:
        raise _forbidden() from e
    except CompetitionValidationError as e:
        raise _invalid(e) from e

    return CompetitionResponse.from_domain(competition, principal, today)


@router.post(
    "/{competition_id}/participants",
    status_code=status.HTTP_204_NO_CONTENT,
    response_model=None,
)
async def join_competition(
    competition_id: str,
    principal: Annotated[Principal, Depends(get_current_principal)],
    service: Annotated[CompetitionDirectoryService, Depends(get_competition_service)],
) -> None:
    """Join a competition as the current principal.

    Joining twice succeeds without adding a second entry.

    Raises:
        HTTPException: 400 if the ID is malformed
        HTTPException: 403 if the principal may not join it
        HTTPException: 404 if it does not exist, or the principal is not
            registered in the directory
    """
    competition_id_obj = _parse_competition_id(competition_id)
    try:
        await service.join(competition_id_obj, principal)
    except NotFoundError as e:
        raise _not_found(e) from e
    except ForbiddenError as e:
        raise _forbidden() from e


@router.get("/{competition_id}/participants")
async def list_participants(
    competition_id: str,
    principal: Annotated[Principal, Depends(get_current_principal)],
    service: Annotated[CompetitionDirectoryService, Depends(get_competition_service)],
) -> list[PrincipalResponse]:
    """List a competition's participants in join order.

    Raises:
        HTTPException: 400 if the ID is malformed
        HTTPException: 403 if the principal may not edit the competition
        HTTPException: 404 if it does not exist
    """
    competition_id_obj = _parse_competition_id(competition_id)
    try:
        participants = await service.list_participants(competition_id_obj, principal)
    except NotFoundError as e:
        raise _not_found(e) from e
    except ForbiddenError as e:
        raise _forbidden() from e

    return [PrincipalResponse.from_domain(p) for p in participants]


@router.get("/{competition_id}/membership")
async def get_membership(
    competition_id: str,
    principal: Annotated[Principal, Depends(get_current_principal)],
    service: Annotated[CompetitionDirectoryService, Depends(get_competition_service)],
) -> MembershipResponse:
    """Report whether the current principal has joined a competition.

    Raises:
        HTTPException: 400 if the ID is malformed
    """
    competition_id_obj = _parse_competition_id(competition_id)
    has_joined = await service.has_joined(competition_id_obj, principal)
    return MembershipResponse(
        competition_id=competition_id_obj.value,
        has_joined=has_joined,
    )
