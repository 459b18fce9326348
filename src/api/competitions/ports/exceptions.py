"""Exceptions raised across the Competitions ports.

These represent caller-facing failures of directory operations. They are
never transient, so nothing retries them.
"""

from __future__ import annotations

from shared_kernel.authorization.types import ResourceType, format_subject


class DirectoryError(Exception):
    """Base class for directory lookup and authorization failures."""

    pass


class NotFoundError(DirectoryError):
    """Raised when a referenced entity does not exist in the store.

    Attributes:
        entity: Kind of entity looked up (e.g. ResourceType.COMPETITION)
        entity_id: The identifier that was not found
    """

    def __init__(self, entity: str, entity_id: str) -> None:
        super().__init__(f"{entity.capitalize()} {entity_id} not found")
        self.entity = entity
        self.entity_id = entity_id


class ForbiddenError(DirectoryError):
    """Raised when the entity exists but the principal may not act on it.

    Kept distinct from NotFoundError so callers can tell "doesn't exist"
    apart from "not permitted". The presentation layer should map this to
    HTTP 403 without exposing more than the message.

    Attributes:
        permission: The permission that was denied
        principal_id: The principal that was denied
        resource: Formatted resource identifier, or None for CREATE
    """

    def __init__(
        self,
        permission: str,
        principal_id: str,
        resource: str | None = None,
    ) -> None:
        target = f" on {resource}" if resource else ""
        subject = format_subject(ResourceType.PRINCIPAL, principal_id)
        super().__init__(f"{subject} may not {permission}{target}")
        self.permission = permission
        self.principal_id = principal_id
        self.resource = resource
