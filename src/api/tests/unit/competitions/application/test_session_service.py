"""Unit tests for SessionService."""

from unittest.mock import Mock

import pytest

from competitions.application.observability import SessionServiceProbe
from competitions.application.services import SessionService
from competitions.domain.aggregates import Principal
from competitions.domain.value_objects import Role, TenantId
from competitions.infrastructure import InMemoryPrincipalRepository


@pytest.fixture
def mock_probe():
    return Mock(spec=SessionServiceProbe)


@pytest.fixture
def principal_repository():
    return InMemoryPrincipalRepository()


@pytest.fixture
def session_service(principal_repository, mock_probe):
    return SessionService(principal_repository=principal_repository, probe=mock_probe)


class TestLogin:
    """Tests for SessionService.login()."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "identifier",
        [
            "Lisa.Simpson@springfield.edu",
            "lisa.simpson@springfield.edu",
            "  LISA.SIMPSON@SPRINGFIELD.EDU ",
        ],
    )
    async def test_matches_email_ignoring_case_and_whitespace(
        self, identifier, session_service, principal_repository, mock_probe
    ):
        student = Principal.create(
            email="Lisa.Simpson@springfield.edu",
            role=Role.STUDENT,
            tenant_id=TenantId.generate(),
        )
        await principal_repository.add(student)

        result = await session_service.login(identifier)

        assert result == student
        mock_probe.login_succeeded.assert_called_once_with(
            principal_id=student.id.value,
            role="STUDENT",
        )

    @pytest.mark.asyncio
    async def test_unknown_identifier_returns_none(self, session_service, mock_probe):
        assert await session_service.login("nobody@example.edu") is None

        mock_probe.login_failed.assert_called_once_with(reason="unknown_identifier")

    @pytest.mark.asyncio
    @pytest.mark.parametrize("identifier", ["", "   "])
    async def test_blank_identifier_returns_none(
        self, identifier, session_service, mock_probe
    ):
        assert await session_service.login(identifier) is None

        mock_probe.login_failed.assert_called_once_with(reason="empty_identifier")
