"""
Shared module for cross-cutting concerns of the admin backend.

STRUCTURE:
- shared.infrastructure: Database and request correlation
  - db.py: SQLAlchemy sessions, safe_commit()
  - correlation.py: X-Request-ID middleware and logging filter

- shared.config: Configuration
  - settings.py: Environment config (Pydantic)
  - logging.py: Structured logging
  - constants.py: LifecycleState, UserType, Limits

- shared.utils: Utilities
  - exceptions.py: HTTP exceptions with auto-logging
  - validators.py: Code normalization, LIKE escaping
  - schemas.py: Shared Pydantic schemas

IMPORT EXAMPLES:
    from shared.infrastructure.db import get_db, safe_commit
    from shared.config.settings import settings
    from shared.config.constants import LifecycleState, UserType
    from shared.utils.exceptions import NotFoundError, DependencyBlockedError
"""
