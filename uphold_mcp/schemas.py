from typing import TypedDict

from pydantic import BaseModel, Field


# Records returned by the Uphold API. They are passed through untouched, so
# these only describe the payloads; nothing validates against them.

class Ticker(TypedDict):
    ask: str
    bid: str
    currency: str
    pair: str

class Asset(TypedDict):
    code: str
    name: str
    status: str
    type: str

class Country(TypedDict):
    code: str
    currency: str
    name: str


# Tool parameters

class TickerByCurrencyParams(BaseModel):
    currency: str = Field(
        description="The currency code to get rates for (e.g., 'USD', 'BTC', 'ETH', 'EUR')"
    )

class TickerPairParams(BaseModel):
    pair: str = Field(
        description="The currency pair to get the rate for (e.g., 'BTCUSD', 'ETHUSD', 'BTCEUR')"
    )
