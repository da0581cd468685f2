import os
from dataclasses import dataclass
from typing import Optional

LOG_LEVELS = ("critical", "error", "warning", "info", "debug")


@dataclass(frozen=True)
class Settings:
    """Runtime settings for the play server, read from OTHELLO_* variables."""
    host: str = "0.0.0.0"
    port: int = 8000
    log_level: str = "info"
    human_black: bool = True
    ai_seed: Optional[int] = None


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    value = raw.strip().lower()
    if value in ("1", "true", "yes", "on"):
        return True
    if value in ("0", "false", "no", "off"):
        return False
    raise ValueError(f"{name} must be a boolean, got {raw!r}")


def _env_int(name: str, default: Optional[int]) -> Optional[int]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


def load_settings() -> Settings:
    log_level = os.getenv("OTHELLO_LOG_LEVEL", "info").strip().lower()
    if log_level not in LOG_LEVELS:
        raise ValueError(f"OTHELLO_LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}")

    port = _env_int("OTHELLO_PORT", 8000)
    if not 0 < port < 65536:
        raise ValueError(f"OTHELLO_PORT out of range: {port}")

    return Settings(
        host=os.getenv("OTHELLO_HOST", "0.0.0.0"),
        port=port,
        log_level=log_level,
        human_black=_env_bool("OTHELLO_HUMAN_BLACK", True),
        ai_seed=_env_int("OTHELLO_AI_SEED", None),
    )
