from datetime import datetime, timezone
from sqlalchemy import func, or_
from sqlalchemy.orm import Session

from .models import Country

DEFAULT_SORT = "name_asc"


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _sort_columns(sort: str | None):
    gdp = Country.estimated_gdp
    orderings = {
        "name_asc": (Country.name.asc(),),
        "name_desc": (Country.name.desc(),),
        # rows without a GDP figure always come last
        "gdp_desc": (gdp.is_(None), gdp.desc(), Country.name.asc()),
        "gdp_asc": (gdp.is_(None), gdp.asc(), Country.name.asc()),
        "population_desc": (Country.population.desc(), Country.name.asc()),
        "population_asc": (Country.population.asc(), Country.name.asc()),
    }
    key = sort.lower() if sort else DEFAULT_SORT
    return orderings.get(key, orderings[DEFAULT_SORT])


class CountryRepository:
    """Row-level access to the countries table.

    Every write commits on its own; a failed write is rolled back before the
    error propagates so the session stays usable for the next record.
    """

    def __init__(self, db: Session):
        self.db = db

    def _commit(self):
        try:
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

    def _by_name(self, name: str):
        # SQLite lower() only folds ASCII, so exact matches are checked too
        return self.db.query(Country).filter(or_(Country.name == name, func.lower(Country.name) == name.lower()))

    def delete_all(self) -> int:
        deleted = self.db.query(Country).delete(synchronize_session=False)
        self._commit()
        return deleted

    def insert(self, record: dict) -> Country:
        country = Country(**record)
        if country.last_refreshed_at is None:
            country.last_refreshed_at = utcnow()
        self.db.add(country)
        self._commit()
        return country

    def find_by_name(self, name: str) -> Country | None:
        return self._by_name(name).first()

    def update(self, name: str, record: dict) -> Country | None:
        country = self.find_by_name(name)
        if country is None:
            return None
        for k, v in record.items():
            setattr(country, k, v)
        if "last_refreshed_at" not in record:
            country.last_refreshed_at = utcnow()
        self._commit()
        return country

    def delete_by_name(self, name: str) -> bool:
        deleted = self._by_name(name).delete(synchronize_session=False)
        self._commit()
        return deleted > 0

    def select_filtered(self, region: str | None = None, currency_code: str | None = None, sort: str | None = None):
        query = self.db.query(Country)
        if region:
            query = query.filter(func.lower(Country.region) == region.lower())
        if currency_code:
            query = query.filter(func.lower(Country.currency_code) == currency_code.lower())
        return query.order_by(*_sort_columns(sort)).all()

    def top_by_gdp(self, limit: int = 5):
        return self.db.query(Country)\
                      .filter(Country.estimated_gdp.isnot(None))\
                      .order_by(Country.estimated_gdp.desc())\
                      .limit(limit)\
                      .all()

    def count_all(self) -> int:
        return self.db.query(Country).count()

    def max_last_refreshed_at(self) -> datetime | None:
        return self.db.query(func.max(Country.last_refreshed_at)).scalar()
