"""Unit tests for domain probes.

Tests that domain probes correctly capture domain events
following the Domain Oriented Observability pattern.
"""

from unittest.mock import MagicMock

import structlog

from competitions.infrastructure.observability import (
    DefaultCompetitionRepositoryProbe,
    DefaultParticipationLedgerProbe,
)
from infrastructure.observability import DefaultStartupProbe


class TestStartupProbe:
    """Tests for StartupProbe protocol and implementation."""

    def test_default_probe_creates_with_default_logger(self):
        """Default probe should work without explicit logger."""
        probe = DefaultStartupProbe()
        assert probe._logger is not None

    def test_default_probe_accepts_custom_logger(self):
        """Default probe should accept a custom logger."""
        mock_logger = MagicMock(spec=structlog.stdlib.BoundLogger)
        probe = DefaultStartupProbe(logger=mock_logger)
        assert probe._logger is mock_logger

    def test_demo_directory_seeded_logs_counts(self):
        mock_logger = MagicMock(spec=structlog.stdlib.BoundLogger)
        probe = DefaultStartupProbe(logger=mock_logger)

        probe.demo_directory_seeded(
            tenant_count=3, principal_count=7, competition_count=5
        )

        mock_logger.info.assert_called_once_with(
            "demo_directory_seeded",
            tenant_count=3,
            principal_count=7,
            competition_count=5,
        )

    def test_directory_released_logs_info(self):
        mock_logger = MagicMock(spec=structlog.stdlib.BoundLogger)
        probe = DefaultStartupProbe(logger=mock_logger)

        probe.directory_released()

        mock_logger.info.assert_called_once_with("directory_released")


class TestCompetitionRepositoryProbe:
    """Tests for CompetitionRepositoryProbe implementation."""

    def test_competition_saved_logs_info(self):
        mock_logger = MagicMock(spec=structlog.stdlib.BoundLogger)
        probe = DefaultCompetitionRepositoryProbe(logger=mock_logger)

        probe.competition_saved(
            competition_id="c-1", owner_tenant_id="t-1", was_created=True
        )

        mock_logger.info.assert_called_once_with(
            "competition_saved",
            competition_id="c-1",
            owner_tenant_id="t-1",
            was_created=True,
        )

    def test_competition_not_found_logs_debug(self):
        mock_logger = MagicMock(spec=structlog.stdlib.BoundLogger)
        probe = DefaultCompetitionRepositoryProbe(logger=mock_logger)

        probe.competition_not_found(competition_id="c-1")

        mock_logger.debug.assert_called_once_with(
            "competition_not_found", competition_id="c-1"
        )


class TestParticipationLedgerProbe:
    """Tests for ParticipationLedgerProbe implementation."""

    def test_participant_recorded_logs_info(self):
        mock_logger = MagicMock(spec=structlog.stdlib.BoundLogger)
        probe = DefaultParticipationLedgerProbe(logger=mock_logger)

        probe.participant_recorded(competition_id="c-1", principal_id="p-1")

        mock_logger.info.assert_called_once_with(
            "participant_recorded", competition_id="c-1", principal_id="p-1"
        )

    def test_duplicate_participation_logs_debug(self):
        mock_logger = MagicMock(spec=structlog.stdlib.BoundLogger)
        probe = DefaultParticipationLedgerProbe(logger=mock_logger)

        probe.duplicate_participation_ignored(competition_id="c-1", principal_id="p-1")

        mock_logger.debug.assert_called_once_with(
            "duplicate_participation_ignored",
            competition_id="c-1",
            principal_id="p-1",
        )
