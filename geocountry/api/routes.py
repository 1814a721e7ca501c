from __future__ import annotations

import httpx
from fastapi import APIRouter, Depends

from geocountry.api.deps import get_http_client
from geocountry.api.v1.schemas import CountryOut
from geocountry.core.geo import lookup_country, normalize_country

router = APIRouter(tags=["country"])


@router.get("/country", response_model=CountryOut)
async def get_country(
    fallback: str = "",
    client: httpx.AsyncClient | None = Depends(get_http_client),
):
    """
    Country of the machine running this service.

    Never fails on lookup errors: an undetermined country falls back to
    the caller's `fallback` (empty by default) with detected=false.
    """
    result = await lookup_country(client=client)

    if result.country:
        return CountryOut(country=result.country, detected=True)

    return CountryOut(country=normalize_country(fallback), detected=False)
