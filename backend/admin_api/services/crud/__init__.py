"""
Lifecycle helpers shared by the entity services.
"""

from admin_api.services.crud.dependency_guard import (
    DependencyGuard,
    DependencyProbe,
    check_dependents,
)
from admin_api.services.crud.soft_delete import SoftDeleteLifecycle, entity_key

__all__ = [
    "DependencyGuard",
    "DependencyProbe",
    "check_dependents",
    "SoftDeleteLifecycle",
    "entity_key",
]
