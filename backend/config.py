import os
from pydantic_settings import BaseSettings


def _parse_cors_origins() -> list[str] | None:
    """Comma-separated CORS_ORIGINS, or None to keep the defaults."""
    raw = os.environ.get("CORS_ORIGINS", "")
    return [o.strip() for o in raw.split(",") if o.strip()] or None


class Settings(BaseSettings):
    cors_origins: list[str] = [
        "http://localhost:5173",
        "http://localhost:3000",
    ]
    debug: bool = False
    log_level: str = "INFO"

    # Analysis settings
    max_description_length: int = 10000
    random_seed: int | None = None  # fixed seed makes confidence jitter reproducible
    simulate_posting_pattern: bool = False  # if False, posting pattern score is a neutral 50

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


_cors_override = _parse_cors_origins()
settings = Settings(**{"cors_origins": _cors_override} if _cors_override else {})
