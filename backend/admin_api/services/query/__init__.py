"""
Query building blocks: predicate composition and pagination.
"""

from admin_api.services.query.predicates import (
    Predicate,
    compose,
    active_only,
    contains,
    equals,
    equals_upper,
    in_range,
    day_range,
)
from admin_api.services.query.pagination import Page, paged_find, validate_page_args

__all__ = [
    "Predicate",
    "compose",
    "active_only",
    "contains",
    "equals",
    "equals_upper",
    "in_range",
    "day_range",
    "Page",
    "paged_find",
    "validate_page_args",
]
