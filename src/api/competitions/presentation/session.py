"""HTTP routes for the current session."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends

from competitions.dependencies import get_current_principal
from competitions.domain.aggregates import Principal
from competitions.presentation.models import PrincipalResponse

router = APIRouter(
    prefix="/session",
    tags=["session"],
)


@router.get("")
async def get_session(
    principal: Annotated[Principal, Depends(get_current_principal)],
) -> PrincipalResponse:
    """Return the principal the login header resolves to.

    Raises:
        HTTPException: 401 if the header is missing or matches nobody
    """
    return PrincipalResponse.from_domain(principal)
