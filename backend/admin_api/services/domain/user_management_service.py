"""
User Management Service.

Search, profile detail and account deactivation for admin screens.
Identity concerns (passwords, tokens, role assignment) live elsewhere.

get_user_detail() returns one member of the UserProfile tagged union;
the shape is picked by a single dispatch over UserType.
"""

from __future__ import annotations

from sqlalchemy import literal
from sqlalchemy.orm import Session

from shared.config.constants import UserType
from shared.config.logging import get_logger, mask_email
from shared.utils.exceptions import NotFoundError, ValidationError
from shared.utils.schemas import PageOutput

from admin_api.models import AppUser
from admin_api.repositories import UserRepository
from admin_api.schemas import (
    AdminProfile,
    AttendantProfile,
    PassengerProfile,
    PilotProfile,
    SuperAdminProfile,
    SupervisorProfile,
    UserFilter,
    UserProfile,
    UserSummaryOutput,
)
from admin_api.services.base_service import LifecycleService
from admin_api.services.query.predicates import active_only, compose, contains, equals

logger = get_logger(__name__)

USER_ORDERING = (AppUser.last_name, AppUser.first_name, AppUser.user_id)


class UserManagementService(LifecycleService[AppUser, UserSummaryOutput]):
    """
    Service for administering user accounts.

    Business rules:
    - SUPER_ADMIN accounts cannot be deactivated
    - Deactivation is a soft delete; there are no dependency probes
    """

    def __init__(self, db: Session):
        super().__init__(
            db=db,
            repo=UserRepository(db),
            output_schema=UserSummaryOutput,
            entity_name="User",
        )

    @property
    def users(self) -> UserRepository:
        return self._repo  # type: ignore[return-value]

    def normalize_key(self, key: str) -> str:
        return (key or "").strip()

    # =========================================================================
    # Query Methods
    # =========================================================================

    def search(
        self,
        filters: UserFilter,
        page: int,
        page_size: int,
    ) -> PageOutput[UserSummaryOutput]:
        """Ordered by last name, first name, then user id."""
        full_name = AppUser.first_name + literal(" ") + AppUser.last_name
        predicate = compose(
            active_only(AppUser, filters.include_deleted),
            equals(AppUser.user_type, filters.user_type),
            contains(full_name, filters.name_contains),
            contains(AppUser.email, filters.email_contains),
        )
        return self._paginate(predicate, USER_ORDERING, page, page_size)

    def get_user_detail(self, user_id: str) -> UserProfile:
        """
        Full profile for an active user, shaped by its user type.

        Raises:
            NotFoundError: If there is no active user with this id
            ValidationError: If the user type has no profile shape
        """
        key = self.normalize_key(user_id)
        user = self.users.get_with_profiles(key)
        if user is None:
            raise NotFoundError("User", key, active_only=True)
        return build_profile(user)

    # =========================================================================
    # Command Methods
    # =========================================================================

    def deactivate(self, user_id: str) -> None:
        """
        Raises:
            NotFoundError: If there is no active user with this id
            ValidationError: If the user is a SUPER_ADMIN
        """
        key = self.normalize_key(user_id)
        user = self.get_active_entity(key)
        if user.user_type == UserType.SUPER_ADMIN:
            raise ValidationError("Super admin accounts cannot be deactivated.", user_id=key)

        logger.info("Deactivating user", user_id=key, email=mask_email(user.email))
        self._lifecycle.delete(user)

    def delete(self, user_id: str) -> None:
        self.deactivate(user_id)


def _base_fields(user: AppUser) -> dict:
    return {
        "user_id": user.user_id,
        "email": user.email,
        "first_name": user.first_name,
        "last_name": user.last_name,
        "full_name": user.full_name,
        "user_type": user.user_type,
        "date_created": user.date_created,
        "last_login": user.last_login,
    }


def _employee_fields(user: AppUser) -> dict:
    employee = user.employee
    if employee is None:
        return {}
    return {
        "employee_id": employee.employee_id,
        "employee_number": employee.employee_number,
        "hire_date": employee.hire_date,
    }


def build_profile(user: AppUser) -> UserProfile:
    """
    Dispatch on user_type to the matching profile shape.
    Unknown types raise ValidationError instead of falling through.
    """
    fields = _base_fields(user)
    user_type = user.user_type

    if user_type == UserType.SUPER_ADMIN:
        return SuperAdminProfile(**fields, **_employee_fields(user))
    elif user_type == UserType.ADMIN:
        department = user.employee.department if user.employee else None
        return AdminProfile(**fields, **_employee_fields(user), department=department)
    elif user_type == UserType.SUPERVISOR:
        managed_area = user.employee.managed_area if user.employee else None
        return SupervisorProfile(**fields, **_employee_fields(user), managed_area=managed_area)
    elif user_type == UserType.PILOT:
        pilot = user.pilot
        return PilotProfile(
            **fields,
            **_employee_fields(user),
            license_number=pilot.license_number if pilot else None,
            total_flight_hours=pilot.total_flight_hours if pilot else None,
            crew_base_airport_id=pilot.crew_base_airport_id if pilot else None,
        )
    elif user_type == UserType.ATTENDANT:
        attendant = user.attendant
        languages = []
        if attendant and attendant.languages:
            languages = [lang.strip() for lang in attendant.languages.split(",") if lang.strip()]
        return AttendantProfile(
            **fields,
            **_employee_fields(user),
            languages=languages,
            crew_base_airport_id=attendant.crew_base_airport_id if attendant else None,
        )
    elif user_type == UserType.USER:
        passenger = user.passenger
        return PassengerProfile(
            **fields,
            kris_flyer_tier=passenger.kris_flyer_tier if passenger else None,
        )

    raise ValidationError(f"Unsupported user type: {user_type}", user_id=user.user_id)
