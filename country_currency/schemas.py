from datetime import datetime, timezone
from typing import Annotated
from pydantic import AfterValidator, BaseModel, ConfigDict


def _as_utc(value: datetime) -> datetime:
    # the database hands timestamps back without an offset; they are stored in UTC
    return value.replace(tzinfo=timezone.utc) if value.tzinfo is None else value


UTCDateTime = Annotated[datetime, AfterValidator(_as_utc)]


class Country(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    capital: str | None = None
    region: str | None = None
    population: int
    currency_code: str | None = None
    exchange_rate: float | None = None
    estimated_gdp: float | None = None
    flag_url: str | None = None
    last_refreshed_at: UTCDateTime | None = None


class Status(BaseModel):
    total_countries: int
    last_refreshed_at: UTCDateTime | None = None


class RefreshSummary(BaseModel):
    message: str
    total_processed: int
    successful: int
    total_countries: int
    last_refreshed_at: UTCDateTime
