"""
Standardized page parameters for admin listings.

Usage:
    from admin_api.routers._common.pagination import PageParams, get_page_params

    @router.get("/countries/page")
    def paginate_countries(params: PageParams = Depends(get_page_params), ...):
        return service.paginate(params.page, params.page_size)

Values are passed through unclamped; the pagination engine rejects
anything below 1 with a 400.
"""

from dataclasses import dataclass

from fastapi import Query

from shared.config.settings import settings


@dataclass
class PageParams:
    """1-based page number and page size."""

    page: int
    page_size: int


def get_page_params(
    page: int = Query(default=1, description="1-based page number"),
    page_size: int = Query(
        default=settings.default_page_size,
        description="Items per page",
    ),
) -> PageParams:
    """FastAPI dependency for page parameters."""
    return PageParams(page=page, page_size=page_size)
