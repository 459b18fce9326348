"""Unit tests for the competition directory and session service probes."""

from unittest.mock import MagicMock

from competitions.application.observability import (
    DefaultCompetitionServiceProbe,
    DefaultSessionServiceProbe,
)


class TestDefaultCompetitionServiceProbeInit:
    """Tests for DefaultCompetitionServiceProbe initialization."""

    def test_creates_with_default_logger(self):
        probe = DefaultCompetitionServiceProbe()

        assert probe._logger is not None

    def test_creates_with_custom_logger(self):
        mock_logger = MagicMock()

        probe = DefaultCompetitionServiceProbe(logger=mock_logger)

        assert probe._logger is mock_logger


class TestDefaultCompetitionServiceProbeEvents:
    """Tests for the events DefaultCompetitionServiceProbe emits."""

    def test_access_denied_logs_warning(self):
        mock_logger = MagicMock()
        probe = DefaultCompetitionServiceProbe(logger=mock_logger)

        probe.access_denied(
            permission="edit",
            principal_id="principal-1",
            role="STUDENT",
            competition_id="competition-1",
        )

        mock_logger.warning.assert_called_once_with(
            "access_denied",
            permission="edit",
            principal_id="principal-1",
            role="STUDENT",
            competition_id="competition-1",
        )

    def test_competition_created_logs_info(self):
        mock_logger = MagicMock()
        probe = DefaultCompetitionServiceProbe(logger=mock_logger)

        probe.competition_created(
            competition_id="competition-1",
            owner_tenant_id="tenant-1",
            visibility="PUBLIC",
            principal_id="principal-1",
        )

        mock_logger.info.assert_called_once_with(
            "competition_created",
            competition_id="competition-1",
            owner_tenant_id="tenant-1",
            visibility="PUBLIC",
            principal_id="principal-1",
        )

    def test_competition_joined_reports_whether_entry_was_new(self):
        mock_logger = MagicMock()
        probe = DefaultCompetitionServiceProbe(logger=mock_logger)

        probe.competition_joined(
            competition_id="competition-1",
            principal_id="principal-1",
            was_new=False,
        )

        call_kwargs = mock_logger.info.call_args.kwargs
        assert mock_logger.info.call_args.args == ("competition_joined",)
        assert call_kwargs["was_new"] is False

    def test_validation_failure_names_field(self):
        mock_logger = MagicMock()
        probe = DefaultCompetitionServiceProbe(logger=mock_logger)

        probe.competition_validation_failed(field="end_date", principal_id="p-1")

        mock_logger.info.assert_called_once_with(
            "competition_validation_failed",
            field="end_date",
            principal_id="p-1",
        )

    def test_listing_logs_debug(self):
        mock_logger = MagicMock()
        probe = DefaultCompetitionServiceProbe(logger=mock_logger)

        probe.competitions_listed(principal_id="p-1", count=3)

        mock_logger.debug.assert_called_once_with(
            "competitions_listed",
            principal_id="p-1",
            count=3,
        )


class TestDefaultSessionServiceProbe:
    """Tests for DefaultSessionServiceProbe."""

    def test_login_succeeded_logs_info(self):
        mock_logger = MagicMock()
        probe = DefaultSessionServiceProbe(logger=mock_logger)

        probe.login_succeeded(principal_id="p-1", role="SCHOOL_ADMIN")

        mock_logger.info.assert_called_once_with(
            "login_succeeded",
            principal_id="p-1",
            role="SCHOOL_ADMIN",
        )

    def test_login_failed_logs_warning(self):
        mock_logger = MagicMock()
        probe = DefaultSessionServiceProbe(logger=mock_logger)

        probe.login_failed(reason="unknown_identifier")

        mock_logger.warning.assert_called_once_with(
            "login_failed", reason="unknown_identifier"
        )
