"""
Utilities module: Exceptions, validators, schemas.
"""

from shared.utils.exceptions import (
    NotFoundError,
    ValidationError,
    ConflictError,
    DependencyBlockedError,
    InfrastructureError,
)
from shared.utils.validators import (
    escape_like_pattern,
    normalize_code,
    validate_code_length,
)

__all__ = [
    # exceptions
    "NotFoundError",
    "ValidationError",
    "ConflictError",
    "DependencyBlockedError",
    "InfrastructureError",
    # validators
    "escape_like_pattern",
    "normalize_code",
    "validate_code_length",
]
