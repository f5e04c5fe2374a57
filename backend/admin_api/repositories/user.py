"""
User repository.
"""

from __future__ import annotations

from sqlalchemy.orm import Session, selectinload

from admin_api.models import AppUser
from admin_api.repositories.base import BaseRepository


class UserRepository(BaseRepository[AppUser]):
    def __init__(self, session: Session):
        super().__init__(AppUser, session)

    def get_with_profiles(self, user_id: str) -> AppUser | None:
        """Active user with every profile relationship loaded."""
        return self.get_active_by_key(
            user_id,
            options=[
                selectinload(AppUser.employee),
                selectinload(AppUser.pilot),
                selectinload(AppUser.attendant),
                selectinload(AppUser.passenger),
            ],
        )
