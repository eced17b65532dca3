from datetime import datetime, timezone
from fastapi import APIRouter, Depends, Query, Request, Response
from sqlalchemy.orm import Session

from .config import environment_report
from .database import get_db
from .errors import NotFound, ValidationError
from .refresh import RefreshStrategy, refresh_countries
from .reports import build_status, render_summary_image
from .repository import CountryRepository
from .schemas import Country, RefreshSummary, Status

router = APIRouter()


def get_repository(db: Session = Depends(get_db)) -> CountryRepository:
    return CountryRepository(db)


def get_settings(request: Request):
    return request.app.state.settings


def _require_name(name: str) -> str:
    name = name.strip()
    if not name:
        raise ValidationError("Country name is required")
    return name


@router.get("/")
def home():
    return {
        "message": "Country Currency API is running!",
        "status": "OK",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "environment": environment_report(),
    }


@router.post("/countries/refresh", status_code=201, response_model=RefreshSummary)
def refresh(
    strategy: str | None = Query(None, description="full_replace or upsert; defaults to the configured strategy"),
    repository: CountryRepository = Depends(get_repository),
    settings=Depends(get_settings),
):
    if strategy is not None:
        try:
            strategy = RefreshStrategy(strategy.lower())
        except ValueError:
            raise ValidationError({"strategy": f"must be one of {', '.join(s.value for s in RefreshStrategy)}"})

    result = refresh_countries(repository, settings, strategy=strategy)
    return {
        "message": f"Successfully refreshed {result.successful} countries",
        "total_processed": result.total_processed,
        "successful": result.successful,
        "total_countries": repository.count_all(),
        "last_refreshed_at": result.last_refreshed_at,
    }


@router.get("/countries", response_model=list[Country])
def get_countries(
    region: str | None = Query(None, description="Filter by region, e.g. Africa"),
    currency: str | None = Query(None, description="Filter by currency code, e.g. NGN"),
    sort: str | None = Query(None, description="name_asc (default), name_desc, gdp_desc, gdp_asc, population_desc, population_asc"),
    repository: CountryRepository = Depends(get_repository),
):
    return repository.select_filtered(region=region, currency_code=currency, sort=sort)


@router.get("/countries/image")
def get_summary_image(repository: CountryRepository = Depends(get_repository)):
    svg = render_summary_image(repository.count_all(), repository.top_by_gdp())
    return Response(content=svg, media_type="image/svg+xml")


@router.get("/countries/{name}", response_model=Country)
def get_country(name: str, repository: CountryRepository = Depends(get_repository)):
    country = repository.find_by_name(_require_name(name))
    if country is None:
        raise NotFound()
    return country


@router.delete("/countries/{name}", status_code=204)
def delete_country(name: str, repository: CountryRepository = Depends(get_repository)):
    if not repository.delete_by_name(_require_name(name)):
        raise NotFound()
    return Response(status_code=204)


@router.get("/status", response_model=Status)
def get_status(repository: CountryRepository = Depends(get_repository)):
    return build_status(repository)
