"""Authorization type definitions.

Defines the resource types and permissions the access decision engine
evaluates. These enums ensure type safety and prevent hardcoded strings
across the codebase.
"""

from enum import StrEnum


class ResourceType(StrEnum):
    """Resource types that appear in authorization decisions and log fields."""

    TENANT = "tenant"
    PRINCIPAL = "principal"
    COMPETITION = "competition"


class Permission(StrEnum):
    """Actions a principal may be permitted to perform on a competition.

    CREATE is evaluated without a target competition; the others always
    name one.
    """

    VIEW = "view"
    EDIT = "edit"
    CREATE = "create"
    JOIN = "join"


def format_resource(resource_type: ResourceType, resource_id: str) -> str:
    """Format a resource identifier for logging and error messages.

    Args:
        resource_type: The type of resource
        resource_id: The unique identifier for the resource

    Returns:
        Formatted resource string (e.g., "competition:01J...")

    Example:
        >>> format_resource(ResourceType.COMPETITION, "abc123")
        'competition:abc123'
    """
    return f"{resource_type}:{resource_id}"


def format_subject(subject_type: ResourceType, subject_id: str) -> str:
    """Format a subject identifier for logging and error messages.

    Args:
        subject_type: The type of subject (usually PRINCIPAL)
        subject_id: The unique identifier for the subject

    Returns:
        Formatted subject string (e.g., "principal:01J...")

    Example:
        >>> format_subject(ResourceType.PRINCIPAL, "alice")
        'principal:alice'
    """
    return f"{subject_type}:{subject_id}"
