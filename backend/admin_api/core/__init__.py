"""
Application wiring: lifespan, CORS and exception handlers.
"""

from admin_api.core.cors import configure_cors
from admin_api.core.errors import register_exception_handlers
from admin_api.core.lifespan import lifespan

__all__ = ["configure_cors", "register_exception_handlers", "lifespan"]
