"""
Airline management endpoints.

Thin router that delegates to AirlineService.
"""

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from shared.infrastructure.db import get_db
from shared.utils.schemas import DependencyReport, PageOutput
from admin_api.routers._common import PageParams, get_page_params
from admin_api.schemas import AirlineCreate, AirlineOutput, AirlineUpdate, AirlineWithFleetOutput
from admin_api.services.domain import AirlineService


router = APIRouter(tags=["admin-airlines"])


def _get_service(db: Session) -> AirlineService:
    """Get AirlineService instance."""
    return AirlineService(db)


@router.get("/airlines", response_model=list[AirlineOutput])
def list_airlines(db: Session = Depends(get_db)) -> list[AirlineOutput]:
    """List active airlines ordered by name."""
    return _get_service(db).list_active()


@router.get("/airlines/all", response_model=list[AirlineOutput])
def list_all_airlines(db: Session = Depends(get_db)) -> list[AirlineOutput]:
    """List every airline, deleted ones included."""
    return _get_service(db).list_including_deleted()


@router.get("/airlines/page", response_model=PageOutput[AirlineOutput])
def paginate_airlines(
    region: str | None = None,
    params: PageParams = Depends(get_page_params),
    db: Session = Depends(get_db),
) -> PageOutput[AirlineOutput]:
    return _get_service(db).paginate(params.page, params.page_size, region=region)


@router.get("/airlines/search", response_model=list[AirlineOutput])
def search_airlines(
    name: str = Query(default=""),
    db: Session = Depends(get_db),
) -> list[AirlineOutput]:
    """Case-insensitive partial match on airline name."""
    return _get_service(db).find_by_name(name)


@router.get("/airlines/by-base-airport/{airport_iata}", response_model=list[AirlineOutput])
def list_airlines_by_base_airport(
    airport_iata: str,
    db: Session = Depends(get_db),
) -> list[AirlineOutput]:
    return _get_service(db).list_by_base_airport(airport_iata)


@router.get("/airlines/by-region/{region}", response_model=list[AirlineOutput])
def list_airlines_by_region(region: str, db: Session = Depends(get_db)) -> list[AirlineOutput]:
    return _get_service(db).list_by_operating_region(region)


@router.get("/airlines/{iata_code}", response_model=AirlineOutput)
def get_airline(iata_code: str, db: Session = Depends(get_db)) -> AirlineOutput:
    return _get_service(db).get_by_iata(iata_code)


@router.get("/airlines/{iata_code}/fleet", response_model=AirlineWithFleetOutput)
def get_airline_fleet(iata_code: str, db: Session = Depends(get_db)) -> AirlineWithFleetOutput:
    """Airline with its active aircraft."""
    return _get_service(db).get_with_fleet(iata_code)


@router.get("/airlines/{iata_code}/dependents", response_model=DependencyReport)
def check_airline_dependents(iata_code: str, db: Session = Depends(get_db)) -> DependencyReport:
    """Report which dependents would block deletion, without deleting."""
    return _get_service(db).check_dependents(iata_code)


@router.post("/airlines", response_model=AirlineOutput, status_code=status.HTTP_201_CREATED)
def create_airline(body: AirlineCreate, db: Session = Depends(get_db)) -> AirlineOutput:
    return _get_service(db).create(body)


@router.patch("/airlines/{iata_code}", response_model=AirlineOutput)
def update_airline(
    iata_code: str,
    body: AirlineUpdate,
    db: Session = Depends(get_db),
) -> AirlineOutput:
    return _get_service(db).update(iata_code, body)


@router.delete("/airlines/{iata_code}", status_code=status.HTTP_204_NO_CONTENT)
def delete_airline(iata_code: str, db: Session = Depends(get_db)) -> None:
    """Soft delete an airline. Refused while it has active dependents."""
    _get_service(db).delete(iata_code)


@router.post("/airlines/{iata_code}/reactivate", status_code=status.HTTP_204_NO_CONTENT)
def reactivate_airline(iata_code: str, db: Session = Depends(get_db)) -> None:
    _get_service(db).reactivate(iata_code)
