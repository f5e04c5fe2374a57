"""
User administration endpoints.

Authentication and role management are handled outside this API.
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from shared.config.constants import UserType
from shared.infrastructure.db import get_db
from shared.utils.schemas import PageOutput
from admin_api.routers._common import PageParams, get_page_params
from admin_api.schemas import UserFilter, UserProfile, UserSummaryOutput
from admin_api.services.domain import UserManagementService


router = APIRouter(prefix="/users", tags=["admin-users"])


def _get_service(db: Session) -> UserManagementService:
    return UserManagementService(db)


@router.get("", response_model=PageOutput[UserSummaryOutput])
def search_users(
    include_deleted: bool = False,
    user_type: UserType | None = None,
    name_contains: str | None = None,
    email_contains: str | None = None,
    params: PageParams = Depends(get_page_params),
    db: Session = Depends(get_db),
) -> PageOutput[UserSummaryOutput]:
    filters = UserFilter(
        include_deleted=include_deleted,
        user_type=user_type,
        name_contains=name_contains,
        email_contains=email_contains,
    )
    return _get_service(db).search(filters, params.page, params.page_size)


@router.get("/{user_id}", response_model=UserProfile)
def get_user_detail(user_id: str, db: Session = Depends(get_db)) -> UserProfile:
    """Full profile, shaped by the user's type (see the `kind` field)."""
    return _get_service(db).get_user_detail(user_id)


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
def deactivate_user(user_id: str, db: Session = Depends(get_db)) -> None:
    """Soft delete a user. Super admins cannot be deactivated."""
    _get_service(db).deactivate(user_id)


@router.post("/{user_id}/reactivate", status_code=status.HTTP_204_NO_CONTENT)
def reactivate_user(user_id: str, db: Session = Depends(get_db)) -> None:
    _get_service(db).reactivate(user_id)
