"""Protocol for session service observability.

Defines the interface for domain probes that capture login lookups.
"""

from __future__ import annotations

from typing import Protocol

import structlog


class SessionServiceProbe(Protocol):
    """Domain probe for session service operations."""

    def login_succeeded(self, principal_id: str, role: str) -> None:
        """Record that a login identifier resolved to a principal."""
        ...

    def login_failed(self, reason: str) -> None:
        """Record that a login identifier did not resolve."""
        ...


class DefaultSessionServiceProbe:
    """Default implementation of SessionServiceProbe using structlog.

    The raw identifier is never logged.
    """

    def __init__(self, logger: structlog.stdlib.BoundLogger | None = None):
        self._logger = logger or structlog.get_logger()

    def login_succeeded(self, principal_id: str, role: str) -> None:
        """Record that a login identifier resolved to a principal."""
        self._logger.info(
            "login_succeeded",
            principal_id=principal_id,
            role=role,
        )

    def login_failed(self, reason: str) -> None:
        """Record that a login identifier did not resolve."""
        self._logger.warning("login_failed", reason=reason)
