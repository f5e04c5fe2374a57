"""
Infrastructure module: Database sessions and request correlation.

Provides:
- Database sessions and transactions (db.py)
- Correlation IDs for request-scoped logging (correlation.py)
"""

from shared.infrastructure.db import (
    engine,
    SessionLocal,
    get_db,
    safe_commit,
)

__all__ = [
    "engine",
    "SessionLocal",
    "get_db",
    "safe_commit",
]
