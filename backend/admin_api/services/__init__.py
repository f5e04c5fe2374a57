"""
Application services.

- query: predicate composition and pagination
- crud: soft delete lifecycle and dependency guard
- analytics: pricing analytics aggregator
- domain: one service per administered entity
"""
