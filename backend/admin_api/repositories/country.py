"""
Country repository.
"""

from __future__ import annotations

from sqlalchemy import func
from sqlalchemy.orm import Session

from admin_api.models import Airport, Country
from admin_api.repositories.base import BaseRepository


class CountryRepository(BaseRepository[Country]):
    def __init__(self, session: Session):
        super().__init__(Country, session)

    def get_active_by_name(self, name: str) -> Country | None:
        matches = self.find_active(func.upper(Country.name) == name.strip().upper(), [Country.name])
        return matches[0] if matches else None

    def exists_by_name(self, name: str, *, exclude_iso: str | None = None) -> bool:
        predicate = func.upper(Country.name) == name.strip().upper()
        if exclude_iso is not None:
            predicate = predicate & (Country.iso_code != exclude_iso)
        return self.any(predicate)

    def active_airports(self, iso_code: str) -> list[Airport]:
        return BaseRepository(Airport, self.session).find_active(
            Airport.country_id == iso_code,
            [Airport.name],
        )
