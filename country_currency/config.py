from pydantic import BaseModel, Field
from dotenv import load_dotenv
import logging
import os

from .refresh import RefreshStrategy


COUNTRIES_URL = "https://restcountries.com/v3.1/all?fields=name,capital,region,population,flags,currencies"
EXCHANGE_RATES_URL = "https://open.er-api.com/v6/latest/USD"
LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"


class Settings(BaseModel):
    database_url: str
    pool_size: int = 10
    pool_timeout: int = 60
    countries_url: str = COUNTRIES_URL
    exchange_rates_url: str = EXCHANGE_RATES_URL
    http_timeout: float = 30.0
    refresh_limit: int = Field(50, ge=0)
    refresh_strategy: RefreshStrategy = RefreshStrategy.FULL_REPLACE
    log_level: str = "INFO"

    @classmethod
    def from_env(cls):
        load_dotenv()

        database_url = os.getenv("DATABASE_URL")
        if not database_url:
            MYSQL_USERNAME = os.getenv("MYSQL_USERNAME")
            MYSQL_HOST = os.getenv("MYSQL_HOST")
            MYSQL_PORT = os.getenv("MYSQL_PORT", "3306")
            MYSQL_PASSWORD = os.getenv("MYSQL_PASSWORD")
            MYSQL_DATABASE = os.getenv("MYSQL_DATABASE", "railway")
            database_url = f"mysql+pymysql://{MYSQL_USERNAME}:{MYSQL_PASSWORD}@{MYSQL_HOST}:{MYSQL_PORT}/{MYSQL_DATABASE}"

        return cls(
            database_url=database_url,
            pool_size=int(os.getenv("DB_POOL_SIZE", "10")),
            pool_timeout=int(os.getenv("DB_POOL_TIMEOUT", "60")),
            countries_url=os.getenv("COUNTRIES_URL", COUNTRIES_URL),
            exchange_rates_url=os.getenv("EXCHANGE_RATES_URL", EXCHANGE_RATES_URL),
            http_timeout=float(os.getenv("HTTP_TIMEOUT", "30")),
            refresh_limit=int(os.getenv("REFRESH_LIMIT", "50")),
            refresh_strategy=os.getenv("REFRESH_STRATEGY", RefreshStrategy.FULL_REPLACE.value),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
        )


def environment_report() -> dict:
    """Which database variables are present, without exposing their values."""
    names = {
        "DATABASE_URL": "DATABASE_URL",
        "DB_HOST": "MYSQL_HOST",
        "DB_PORT": "MYSQL_PORT",
        "DB_USER": "MYSQL_USERNAME",
        "DB_NAME": "MYSQL_DATABASE",
        "DB_PASSWORD": "MYSQL_PASSWORD",
    }
    return {label: "Set" if os.getenv(var) else "Missing" for label, var in names.items()}


def configure_logging(level: str = "INFO"):
    logging.basicConfig(level=getattr(logging, level.upper(), logging.INFO), format=LOG_FORMAT)
