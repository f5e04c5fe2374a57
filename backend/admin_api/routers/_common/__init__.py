"""
Shared router helpers.
"""

from admin_api.routers._common.pagination import PageParams, get_page_params

__all__ = ["PageParams", "get_page_params"]
