"""
Country management endpoints.
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from shared.infrastructure.db import get_db
from shared.utils.schemas import DependencyReport, PageOutput
from admin_api.routers._common import PageParams, get_page_params
from admin_api.schemas import CountryCreate, CountryOutput, CountryUpdate, CountryWithAirportsOutput
from admin_api.services.domain import CountryService


router = APIRouter(tags=["admin-countries"])


def _get_service(db: Session) -> CountryService:
    return CountryService(db)


@router.get("/countries", response_model=list[CountryOutput])
def list_countries(db: Session = Depends(get_db)) -> list[CountryOutput]:
    return _get_service(db).list_active()


@router.get("/countries/all", response_model=list[CountryOutput])
def list_all_countries(db: Session = Depends(get_db)) -> list[CountryOutput]:
    return _get_service(db).list_including_deleted()


@router.get("/countries/page", response_model=PageOutput[CountryOutput])
def paginate_countries(
    name_contains: str | None = None,
    continent: str | None = None,
    params: PageParams = Depends(get_page_params),
    db: Session = Depends(get_db),
) -> PageOutput[CountryOutput]:
    return _get_service(db).paginate(
        params.page,
        params.page_size,
        name_contains=name_contains,
        continent=continent,
    )


@router.get("/countries/by-name/{name}", response_model=CountryOutput)
def get_country_by_name(name: str, db: Session = Depends(get_db)) -> CountryOutput:
    return _get_service(db).get_by_name(name)


@router.get("/countries/by-continent/{continent}", response_model=list[CountryOutput])
def list_countries_by_continent(continent: str, db: Session = Depends(get_db)) -> list[CountryOutput]:
    return _get_service(db).list_by_continent(continent)


@router.get("/countries/{iso_code}", response_model=CountryOutput)
def get_country(iso_code: str, db: Session = Depends(get_db)) -> CountryOutput:
    return _get_service(db).get_by_iso(iso_code)


@router.get("/countries/{iso_code}/airports", response_model=CountryWithAirportsOutput)
def get_country_airports(iso_code: str, db: Session = Depends(get_db)) -> CountryWithAirportsOutput:
    """Country with its active airports."""
    return _get_service(db).get_with_airports(iso_code)


@router.get("/countries/{iso_code}/dependents", response_model=DependencyReport)
def check_country_dependents(iso_code: str, db: Session = Depends(get_db)) -> DependencyReport:
    return _get_service(db).check_dependents(iso_code)


@router.post("/countries", response_model=CountryOutput, status_code=status.HTTP_201_CREATED)
def create_country(body: CountryCreate, db: Session = Depends(get_db)) -> CountryOutput:
    return _get_service(db).create(body)


@router.patch("/countries/{iso_code}", response_model=CountryOutput)
def update_country(
    iso_code: str,
    body: CountryUpdate,
    db: Session = Depends(get_db),
) -> CountryOutput:
    return _get_service(db).update(iso_code, body)


@router.delete("/countries/{iso_code}", status_code=status.HTTP_204_NO_CONTENT)
def delete_country(iso_code: str, db: Session = Depends(get_db)) -> None:
    _get_service(db).delete(iso_code)


@router.post("/countries/{iso_code}/reactivate", status_code=status.HTTP_204_NO_CONTENT)
def reactivate_country(iso_code: str, db: Session = Depends(get_db)) -> None:
    _get_service(db).reactivate(iso_code)
