"""
Configuration helpers for the mini-apis backend.

Settings are read once from the environment (data paths, reset password hash,
CORS origins, logging) so that routers/services do not fetch os.environ
directly.
"""

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
import os

# sha256("<admin password>") in base64, inherited from the first deployment.
DEFAULT_QUOTES_RESET_HASH = "dX2+ujAOKQmKLSaOE7DXKRcz832YgaJupwXe0Q5Sqnw="

DEFAULTS_DIR = Path(__file__).resolve().parents[1] / "defaults"


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    app_env: str
    data_dir: Path
    quotes_file: Path
    quotes_default_file: Path
    planner_file: Path
    planner_default_file: Path
    quotes_reset_hash: str
    cors_origins: tuple[str, ...]
    log_level: str
    port: int


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    def _int(value: str, default: int = 0) -> int:
        try:
            return int(value)
        except (TypeError, ValueError):
            return default

    def _path(value: str | None, default: Path) -> Path:
        value = (value or "").strip()
        return Path(value) if value else default

    data_dir = _path(os.getenv("DATA_DIR"), Path("data"))
    origins = tuple(
        origin.strip() for origin in os.getenv("CORS_ORIGINS", "*").split(",") if origin.strip()
    )
    return Settings(
        app_env=(os.getenv("APP_ENV") or "dev").lower(),
        data_dir=data_dir,
        quotes_file=_path(os.getenv("QUOTES_FILE"), data_dir / "quotes.json"),
        quotes_default_file=DEFAULTS_DIR / "quotes-default.json",
        planner_file=_path(os.getenv("PLANNER_FILE"), data_dir / "planner.json"),
        planner_default_file=DEFAULTS_DIR / "planner-default.json",
        quotes_reset_hash=os.getenv("QUOTES_RESET_HASH", DEFAULT_QUOTES_RESET_HASH).strip(),
        cors_origins=origins or ("*",),
        log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
        port=_int(os.getenv("PORT", "5678"), 5678),
    )
