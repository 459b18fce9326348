"""Domain probe for application startup and lifecycle events.

Following Domain-Oriented Observability patterns, this probe captures
domain-significant events during application initialization and shutdown.
"""

from __future__ import annotations

from typing import Protocol

import structlog


class StartupProbe(Protocol):
    """Domain probe for application startup operations."""

    def directory_initialized(self, app_name: str, version: str) -> None:
        """Record that a fresh directory store was created."""
        ...

    def demo_directory_seeded(
        self, tenant_count: int, principal_count: int, competition_count: int
    ) -> None:
        """Record that the demo schools, users and competitions were provisioned."""
        ...

    def demo_seed_disabled(self) -> None:
        """Record that demo seeding is disabled by configuration."""
        ...

    def directory_released(self) -> None:
        """Record that the directory store was released at shutdown."""
        ...


class DefaultStartupProbe:
    """Default implementation of StartupProbe using structlog."""

    def __init__(self, logger: structlog.stdlib.BoundLogger | None = None):
        self._logger = logger or structlog.get_logger()

    def directory_initialized(self, app_name: str, version: str) -> None:
        """Record that a fresh directory store was created."""
        self._logger.info(
            "directory_initialized",
            app_name=app_name,
            version=version,
        )

    def demo_directory_seeded(
        self, tenant_count: int, principal_count: int, competition_count: int
    ) -> None:
        """Record that the demo schools, users and competitions were provisioned."""
        self._logger.info(
            "demo_directory_seeded",
            tenant_count=tenant_count,
            principal_count=principal_count,
            competition_count=competition_count,
        )

    def demo_seed_disabled(self) -> None:
        """Record that demo seeding is disabled by configuration."""
        self._logger.info("demo_seed_disabled")

    def directory_released(self) -> None:
        """Record that the directory store was released at shutdown."""
        self._logger.info("directory_released")
