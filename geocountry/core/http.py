import httpx

from geocountry.core.config import settings


def get_proxy() -> str | None:
    return settings.OUTBOUND_PROXY


def build_client(transport: httpx.AsyncBaseTransport | None = None) -> httpx.AsyncClient:
    """
    Outbound client for one-shot lookups.

    No timeout: the call runs until the server answers or the connection fails.
    A transport, when given, replaces the network (and the proxy).
    """
    if transport is not None:
        return httpx.AsyncClient(
            transport=transport,
            timeout=None,
            follow_redirects=True,
        )

    return httpx.AsyncClient(
        proxy=get_proxy(),
        timeout=None,
        follow_redirects=True,
    )
