"""
Airline and airport repositories.
"""

from __future__ import annotations

from sqlalchemy import func
from sqlalchemy.orm import Session, selectinload

from admin_api.models import Aircraft, Airline, Airport
from admin_api.repositories.base import BaseRepository


class AirportRepository(BaseRepository[Airport]):
    def __init__(self, session: Session):
        super().__init__(Airport, session)


class AirlineRepository(BaseRepository[Airline]):
    def __init__(self, session: Session):
        super().__init__(Airline, session)

    def exists_by_name(self, name: str, *, exclude_iata: str | None = None) -> bool:
        """Case-insensitive name check across all airlines, deleted included."""
        predicate = func.upper(Airline.name) == name.strip().upper()
        if exclude_iata is not None:
            predicate = predicate & (Airline.iata_code != exclude_iata)
        return self.any(predicate)

    def get_active_with_base_airport(self, iata_code: str) -> Airline | None:
        return self.get_active_by_key(iata_code, options=[selectinload(Airline.base_airport)])

    def active_fleet(self, iata_code: str) -> list[Aircraft]:
        """Active aircraft registered to the airline, by tail number."""
        return BaseRepository(Aircraft, self.session).find_active(
            Aircraft.airline_id == iata_code,
            [Aircraft.tail_number],
        )
