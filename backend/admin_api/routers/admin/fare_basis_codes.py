"""
Fare basis code endpoints.
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from shared.infrastructure.db import get_db
from shared.utils.schemas import DependencyReport, PageOutput
from admin_api.routers._common import PageParams, get_page_params
from admin_api.schemas import FareBasisCodeCreate, FareBasisCodeOutput, FareBasisCodeUpdate
from admin_api.services.domain import FareBasisCodeService


router = APIRouter(prefix="/fare-basis-codes", tags=["admin-fare-basis-codes"])


def _get_service(db: Session) -> FareBasisCodeService:
    return FareBasisCodeService(db)


@router.get("", response_model=list[FareBasisCodeOutput])
def list_fare_basis_codes(db: Session = Depends(get_db)) -> list[FareBasisCodeOutput]:
    return _get_service(db).list_active()


@router.get("/all", response_model=list[FareBasisCodeOutput])
def list_all_fare_basis_codes(db: Session = Depends(get_db)) -> list[FareBasisCodeOutput]:
    return _get_service(db).list_including_deleted()


@router.get("/page", response_model=PageOutput[FareBasisCodeOutput])
def paginate_fare_basis_codes(
    description_contains: str | None = None,
    params: PageParams = Depends(get_page_params),
    db: Session = Depends(get_db),
) -> PageOutput[FareBasisCodeOutput]:
    return _get_service(db).paginate(
        params.page, params.page_size, description_contains=description_contains
    )


@router.get("/{code}", response_model=FareBasisCodeOutput)
def get_fare_basis_code(code: str, db: Session = Depends(get_db)) -> FareBasisCodeOutput:
    return _get_service(db).get_by_code(code)


@router.get("/{code}/dependents", response_model=DependencyReport)
def check_fare_basis_code_dependents(code: str, db: Session = Depends(get_db)) -> DependencyReport:
    return _get_service(db).check_dependents(code)


@router.post("", response_model=FareBasisCodeOutput, status_code=status.HTTP_201_CREATED)
def create_fare_basis_code(
    body: FareBasisCodeCreate,
    db: Session = Depends(get_db),
) -> FareBasisCodeOutput:
    return _get_service(db).create(body)


@router.patch("/{code}", response_model=FareBasisCodeOutput)
def update_fare_basis_code(
    code: str,
    body: FareBasisCodeUpdate,
    db: Session = Depends(get_db),
) -> FareBasisCodeOutput:
    return _get_service(db).update(code, body)


@router.delete("/{code}", status_code=status.HTTP_204_NO_CONTENT)
def delete_fare_basis_code(code: str, db: Session = Depends(get_db)) -> None:
    _get_service(db).delete(code)


@router.post("/{code}/reactivate", status_code=status.HTTP_204_NO_CONTENT)
def reactivate_fare_basis_code(code: str, db: Session = Depends(get_db)) -> None:
    _get_service(db).reactivate(code)
