from .database import Base
from sqlalchemy import BigInteger, Column, DateTime, Float, Integer, String


class Country(Base):
    __tablename__ = "countries"
    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False, unique=True)
    capital = Column(String(255))
    region = Column(String(255), index=True)
    population = Column(BigInteger, nullable=False, default=0)
    currency_code = Column(String(10), index=True)
    exchange_rate = Column(Float)
    estimated_gdp = Column(Float)
    flag_url = Column(String(500))
    last_refreshed_at = Column(DateTime(timezone=True), nullable=True)

    def __repr__(self):
        return f"<Country {self.name}>"
