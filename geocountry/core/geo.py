from __future__ import annotations

from dataclasses import dataclass

import httpx
import structlog
from structlog.typing import FilteringBoundLogger

from geocountry.core.http import build_client

GEO_COUNTRY_URL = "https://get.geojs.io/v1/ip/country"

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class CountryLookup:
    """
    Outcome of one country lookup.

    country is always a string: the normalized code, or "" when the
    lookup failed. error carries the failure detail.
    """

    country: str
    raw: str | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def normalize_country(raw: str) -> str:
    return raw.strip().lower()


async def _fetch_country_text(client: httpx.AsyncClient) -> str:
    # status is not checked: whatever text comes back is the answer
    response = await client.get(GEO_COUNTRY_URL)
    return response.text


async def lookup_country(
    *,
    client: httpx.AsyncClient | None = None,
    log: FilteringBoundLogger | None = None,
) -> CountryLookup:
    log = log or logger

    try:
        if client is None:
            async with build_client() as own_client:
                raw = await _fetch_country_text(own_client)
        else:
            raw = await _fetch_country_text(client)

        log.info("geo.country.fetched", raw=raw)
        country = normalize_country(raw)
        log.info("geo.country.normalized", country=country)
    except Exception as exc:
        log.error("geo.country.failed", error=repr(exc))
        return CountryLookup(country="", error=repr(exc))

    return CountryLookup(country=country, raw=raw)


async def detect_country(
    *,
    client: httpx.AsyncClient | None = None,
    log: FilteringBoundLogger | None = None,
) -> str:
    """Detected country code, or "" if it could not be determined. Never raises."""
    result = await lookup_country(client=client, log=log)
    return result.country
