import os


def _flag(value: str | None) -> bool:
    return (value or "").strip().lower() in {"1", "true", "yes", "on"}


class Settings:
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    LOG_JSON = _flag(os.getenv("LOG_JSON"))

    # e.g. http://proxy.internal:3128
    OUTBOUND_PROXY = os.getenv("OUTBOUND_PROXY") or None


settings = Settings()
