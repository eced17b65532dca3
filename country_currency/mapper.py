import random

UNKNOWN_NAME = "Unknown"
MULTIPLIER_MIN = 1000
MULTIPLIER_MAX = 2000


def draw_multiplier(rng=random) -> float:
    """Uniform draw in [MULTIPLIER_MIN, MULTIPLIER_MAX).

    A fresh value is drawn for every record on every refresh, so stored GDP
    figures are not reproducible between refreshes.
    """
    return MULTIPLIER_MIN + rng.random() * (MULTIPLIER_MAX - MULTIPLIER_MIN)


def _name(country: dict) -> str:
    name = country.get("name")
    if isinstance(name, dict):
        name = name.get("common")
    return name if isinstance(name, str) and name.strip() else UNKNOWN_NAME


def _capital(country: dict):
    capital = country.get("capital")
    if isinstance(capital, list):
        return capital[0] if capital else None
    return capital or None


def _population(country: dict) -> int:
    try:
        population = int(country.get("population") or 0)
    except (TypeError, ValueError):
        return 0
    return max(population, 0)


def _currency_code(country: dict):
    currencies = country.get("currencies")
    if isinstance(currencies, dict):
        codes = list(currencies.keys())
        return codes[0] if codes else None
    # v2 payloads carry a list of {"code": ...} entries
    if isinstance(currencies, list) and currencies and isinstance(currencies[0], dict):
        return currencies[0].get("code")
    return None


def _flag_url(country: dict):
    flags = country.get("flags")
    if isinstance(flags, dict):
        return flags.get("png") or flags.get("svg")
    return country.get("flag")


def _exchange_rate(currency_code, rates: dict):
    if not currency_code:
        return None
    try:
        rate = float(rates.get(currency_code))
    except (TypeError, ValueError):
        return None
    return rate if rate > 0 else None


def map_country(country: dict, rates: dict, rng=random) -> dict:
    """Normalize one upstream country payload against the exchange-rate table.

    Missing nested fields become None (or 0 for population); this never raises
    on a partially populated payload.
    """
    currency_code = _currency_code(country)
    exchange_rate = _exchange_rate(currency_code, rates)
    population = _population(country)

    if exchange_rate is None or country.get("population") is None:
        estimated_gdp = None
    else:
        estimated_gdp = population * draw_multiplier(rng) / exchange_rate

    return {
        "name": _name(country),
        "capital": _capital(country),
        "region": country.get("region") or None,
        "population": population,
        "currency_code": currency_code,
        "exchange_rate": exchange_rate,
        "estimated_gdp": estimated_gdp,
        "flag_url": _flag_url(country),
    }
