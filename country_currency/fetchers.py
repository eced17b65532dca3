import httpx
import logging

from .errors import UpstreamUnavailable

logger = logging.getLogger(__name__)

COUNTRIES_PROVIDER = "Countries"
EXCHANGE_PROVIDER = "Exchange"


def fetch_json(url: str, provider: str, timeout: float):
    """Single GET against an upstream provider. No retries."""
    try:
        response = httpx.get(url, timeout=timeout)
        response.raise_for_status()
        return response.json()
    except httpx.HTTPError as e:
        logger.warning("%s API request failed: %s", provider, e)
        raise UpstreamUnavailable(provider) from e
    except ValueError as e:
        logger.warning("%s API returned an undecodable body: %s", provider, e)
        raise UpstreamUnavailable(provider) from e


def fetch_countries(settings) -> list:
    logger.info("Fetching countries from %s", settings.countries_url)
    countries = fetch_json(settings.countries_url, COUNTRIES_PROVIDER, settings.http_timeout)
    if not isinstance(countries, list):
        logger.warning("Countries API returned %s instead of a list", type(countries).__name__)
        raise UpstreamUnavailable(COUNTRIES_PROVIDER)
    return countries


def fetch_exchange_rates(settings) -> dict:
    logger.info("Fetching exchange rates from %s", settings.exchange_rates_url)
    payload = fetch_json(settings.exchange_rates_url, EXCHANGE_PROVIDER, settings.http_timeout)
    rates = payload.get("rates") if isinstance(payload, dict) else None
    if not isinstance(rates, dict):
        logger.warning("Exchange API payload has no rates table")
        raise UpstreamUnavailable(EXCHANGE_PROVIDER)
    return rates
