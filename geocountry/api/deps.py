import httpx


def get_http_client() -> httpx.AsyncClient | None:
    # None: the detector builds, owns and closes its own client, so a bad
    # proxy setting surfaces as an undetected country instead of a 500
    return None
