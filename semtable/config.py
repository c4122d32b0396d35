from __future__ import annotations

import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict

from .data.slots import BREAK_SLOT
from .errors import ConfigurationError
from .models.subject import DEFAULT_COHORT, DEFAULT_SESSIONS_PER_WEEK


@dataclass
class Settings:
    break_slot: str = BREAK_SLOT
    default_cohort: str = DEFAULT_COHORT
    default_sessions_per_week: int = DEFAULT_SESSIONS_PER_WEEK
    max_suggestions: int = 5
    fallback_classroom: str | None = None
    log_file: str = "semtable.log"


def _project_root() -> Path:
    # semtable/config.py -> project root is parents[1]
    return Path(__file__).resolve().parents[1]


def load_settings(path: Path | str | None = None) -> Settings:
    """Load settings from configs/settings.toml if present, else defaults.

    Keys may sit at the top level or under [scheduler]:
      - break_slot, default_cohort, default_sessions_per_week,
        max_suggestions, fallback_classroom, log_file
    """
    base = Settings()
    cfg = _project_root() / "configs" / "settings.toml" if path is None else Path(path)
    if not cfg.exists():
        return base
    try:
        data: Dict[str, Any] = tomllib.loads(cfg.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as exc:
        raise ConfigurationError(f"Invalid settings file {cfg}: {exc}") from exc
    s = data.get("scheduler") if isinstance(data.get("scheduler"), dict) else data

    def get_int(name: str, default: int) -> int:
        try:
            return int(s.get(name, default))
        except (TypeError, ValueError):
            return default

    def get_str(name: str, default: str | None) -> str | None:
        v = s.get(name, default)
        return str(v) if v not in (None, "") else default

    return Settings(
        break_slot=get_str("break_slot", base.break_slot),
        default_cohort=get_str("default_cohort", base.default_cohort),
        default_sessions_per_week=get_int("default_sessions_per_week", base.default_sessions_per_week),
        max_suggestions=get_int("max_suggestions", base.max_suggestions),
        fallback_classroom=get_str("fallback_classroom", base.fallback_classroom),
        log_file=get_str("log_file", base.log_file),
    )
