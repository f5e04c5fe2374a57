"""
Airline administration backend.

- models: SQLAlchemy entities with soft delete
- repositories: data access per entity
- services: query engine, lifecycle, analytics and entity services
- routers: thin FastAPI endpoints under /api/admin
"""
