from dataclasses import dataclass
from datetime import datetime
from enum import Enum
import logging
import random

from .fetchers import fetch_countries, fetch_exchange_rates
from .mapper import map_country
from .repository import utcnow

logger = logging.getLogger(__name__)


class RefreshStrategy(str, Enum):
    FULL_REPLACE = "full_replace"
    UPSERT = "upsert"


@dataclass
class RefreshResult:
    total_processed: int
    successful: int
    last_refreshed_at: datetime


def _store(repository, record: dict, strategy: RefreshStrategy):
    if strategy is RefreshStrategy.UPSERT and repository.update(record["name"], record) is not None:
        return
    repository.insert(record)


def refresh_countries(repository, settings, strategy: RefreshStrategy | None = None, rng=random) -> RefreshResult:
    """Fetch both upstream providers, map the first `settings.refresh_limit`
    countries and persist them with the chosen strategy.

    Both fetches complete before anything is written, so an upstream failure
    leaves the table untouched. A failure on one record is logged and the
    record skipped.
    """
    strategy = RefreshStrategy(strategy or settings.refresh_strategy)
    logger.info("Starting %s refresh", strategy.value)

    countries = fetch_countries(settings)
    rates = fetch_exchange_rates(settings)
    batch = countries[:settings.refresh_limit]
    logger.info("Processing %d of %d countries", len(batch), len(countries))

    if strategy is RefreshStrategy.FULL_REPLACE:
        deleted = repository.delete_all()
        logger.info("Cleared %d stored countries", deleted)

    successful = 0
    for country in batch:
        try:
            record = map_country(country, rates, rng=rng)
            record["last_refreshed_at"] = utcnow()
            _store(repository, record, strategy)
        except Exception:
            name = country.get("name") if isinstance(country, dict) else country
            logger.exception("Failed to process %s", name)
            continue
        successful += 1

    result = RefreshResult(
        total_processed=len(batch),
        successful=successful,
        last_refreshed_at=utcnow(),
    )
    logger.info("Refresh finished: %d/%d countries stored", result.successful, result.total_processed)
    return result
