"""
Predicate combinator for dynamic filtering.

A filter is a SQLAlchemy boolean clause. Services build one from a base
condition (usually "not deleted") plus a list of optional terms; every
helper below returns None when its input is absent, and compose() skips
those instead of compiling always-true conditions.

Usage:
    from admin_api.services.query.predicates import compose, active_only, contains, equals

    predicate = compose(
        active_only(Country),
        contains(Country.name, name_contains),
        equals(Country.continent, continent),
    )
"""

from __future__ import annotations

from datetime import date, datetime, time, timedelta, timezone
from typing import Any

from sqlalchemy import and_, func, true
from sqlalchemy.sql.elements import ColumnElement

from shared.utils.validators import escape_like_pattern

Predicate = ColumnElement[bool]


def compose(base: Predicate | None, *terms: Predicate | None) -> Predicate:
    """
    AND the base condition with every present term, left to right.

    With no base and no terms the result is a plain TRUE clause.
    """
    parts = [clause for clause in (base, *terms) if clause is not None]
    if not parts:
        return true()
    if len(parts) == 1:
        return parts[0]
    return and_(*parts)


# =============================================================================
# Terms
# =============================================================================


def active_only(model: Any, include_deleted: bool = False) -> Predicate | None:
    """Base condition excluding soft-deleted rows, unless include_deleted."""
    if include_deleted:
        return None
    return model.is_deleted.is_(False)


def contains(column: Any, text: str | None) -> Predicate | None:
    """
    Case-insensitive containment. Both sides are upper-cased and the
    user text is matched literally (LIKE wildcards escaped).
    """
    if text is None:
        return None
    needle = text.strip()
    if not needle:
        return None
    pattern = f"%{escape_like_pattern(needle.upper())}%"
    return func.upper(column).like(pattern, escape="\\")


def equals(column: Any, value: Any) -> Predicate | None:
    """Exact match; skipped when value is None or an empty string."""
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    return column == value


def equals_upper(column: Any, value: str | None) -> Predicate | None:
    """Equality after upper-casing both sides."""
    if value is None or not value.strip():
        return None
    return func.upper(column) == value.strip().upper()


def in_range(column: Any, low: Any = None, high: Any = None) -> Predicate | None:
    """
    Inclusive range. A single bound gives a one-sided comparison.
    Conflicting bounds (low > high) are not an error; they match nothing.
    """
    if low is None and high is None:
        return None
    if high is None:
        return column >= low
    if low is None:
        return column <= high
    return and_(column >= low, column <= high)


def day_range(column: Any, start: date | None = None, end: date | None = None) -> Predicate | None:
    """
    Whole-day inclusive range over a timestamp column:
    start 00:00 UTC up to, but excluding, 00:00 UTC of the day after end.
    """
    if start is None and end is None:
        return None
    terms = []
    if start is not None:
        terms.append(column >= start_of_day(start))
    if end is not None:
        terms.append(column < start_of_day(end) + timedelta(days=1))
    return compose(None, *terms)


def start_of_day(day: date | datetime) -> datetime:
    """Midnight UTC of the given day."""
    if isinstance(day, datetime):
        day = day.date()
    return datetime.combine(day, time.min, tzinfo=timezone.utc)
