"""Authorization primitives for tenant-aware access control.

This module provides shared authorization types used across bounded
contexts when describing access decisions.
"""

from shared_kernel.authorization.types import (
    Permission,
    ResourceType,
    format_resource,
    format_subject,
)

__all__ = [
    "ResourceType",
    "Permission",
    "format_resource",
    "format_subject",
]
