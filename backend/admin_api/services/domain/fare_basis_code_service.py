"""
Fare Basis Code Service.
"""

from __future__ import annotations

from sqlalchemy.orm import Session

from shared.config.constants import Limits
from shared.config.logging import get_logger
from shared.utils.exceptions import DuplicateEntityError
from shared.utils.schemas import PageOutput
from shared.utils.validators import require_text, validate_fare_code, validate_max_length

from admin_api.models import Booking, FareBasisCode, PriceOfferLog
from admin_api.repositories import FareBasisCodeRepository
from admin_api.schemas import FareBasisCodeCreate, FareBasisCodeOutput, FareBasisCodeUpdate
from admin_api.services.base_service import LifecycleService
from admin_api.services.crud.dependency_guard import DependencyProbe
from admin_api.services.query.predicates import active_only, compose, contains

logger = get_logger(__name__)

FARE_BASIS_CODE_PROBES = (
    DependencyProbe("active bookings", Booking, "fare_basis_code_id"),
    DependencyProbe("price offer logs", PriceOfferLog, "fare_id"),
)


class FareBasisCodeService(LifecycleService[FareBasisCode, FareBasisCodeOutput]):
    """
    Service for fare basis codes.

    Codes are stored upper-case and never reused. Deletion is blocked while
    active bookings or non-deleted price offer logs reference the code.
    """

    def __init__(self, db: Session):
        super().__init__(
            db=db,
            repo=FareBasisCodeRepository(db),
            output_schema=FareBasisCodeOutput,
            entity_name="Fare basis code",
            probes=FARE_BASIS_CODE_PROBES,
        )

    def normalize_key(self, key: str) -> str:
        return validate_fare_code(key, Limits.MAX_FARE_CODE_LENGTH)

    def get_by_code(self, code: str) -> FareBasisCodeOutput:
        return self.to_output(self.get_active_entity(self.normalize_key(code)))

    def list_active(self) -> list[FareBasisCodeOutput]:
        return self.list_outputs(self._repo.find_active(None, [FareBasisCode.code]))

    def list_including_deleted(self) -> list[FareBasisCodeOutput]:
        return self.list_outputs(self._repo.find_all_including_deleted(None, [FareBasisCode.code]))

    def paginate(
        self,
        page: int,
        page_size: int,
        description_contains: str | None = None,
    ) -> PageOutput[FareBasisCodeOutput]:
        predicate = compose(
            active_only(FareBasisCode),
            contains(FareBasisCode.description, description_contains),
        )
        return self._paginate(predicate, [FareBasisCode.code], page, page_size)

    def create(self, data: FareBasisCodeCreate) -> FareBasisCodeOutput:
        code = self.normalize_key(data.code)
        description = require_text(data.description, "Description is required.")
        validate_max_length(description, Limits.MAX_DESCRIPTION_LENGTH, "Description")
        rules = require_text(data.rules, "Fare rules are required.")

        logger.info("Creating fare basis code", code=code)

        if self._repo.exists_by_key(code):
            raise DuplicateEntityError("Fare basis code", "code", code)

        fare = FareBasisCode(code=code, description=description, rules=rules)
        self._repo.add(fare)
        self.commit("creating the fare basis code", code=code)
        self._repo.refresh(fare)
        return self.to_output(fare)

    def update(self, code: str, data: FareBasisCodeUpdate) -> FareBasisCodeOutput:
        key = self.normalize_key(code)
        fare = self.get_active_entity(key)

        changes: dict[str, str] = {}
        if data.description is not None:
            description = require_text(data.description, "Description is required.")
            changes["description"] = validate_max_length(
                description, Limits.MAX_DESCRIPTION_LENGTH, "Description"
            )
        if data.rules is not None:
            changes["rules"] = require_text(data.rules, "Fare rules are required.")

        changed = {k: v for k, v in changes.items() if getattr(fare, k) != v}
        if not changed:
            return self.to_output(fare)

        for field_name, value in changed.items():
            setattr(fare, field_name, value)
        self._repo.update(fare)

        self.commit("updating the fare basis code", code=key)
        self._repo.refresh(fare)
        logger.info("Fare basis code updated", code=key, fields=sorted(changed))
        return self.to_output(fare)
