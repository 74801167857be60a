"""
mapping_engine/config.py

Environment-driven configuration for the field mapping engine.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Iterable

from mapping_engine.mappers.field_matcher import MatchingThresholds
from mapping_engine.mappers.similarity import DISPLAY_NAME_SCORE, MATCH_FLOOR, SYNONYM_SCORE

PROJECT_ROOT = Path(__file__).resolve().parents[1]
ENV_FILENAMES: tuple[str, ...] = (".env", ".env.local")
_TRUTHY = frozenset({"1", "true", "yes", "on"})


def parse_env_lines(lines: Iterable[str]) -> dict[str, str]:
    """
    Parse `KEY=VALUE` lines, skipping blanks, comments and lines without `=`.

    Surrounding quotes are dropped from values; a later key wins.
    """

    parsed: dict[str, str] = {}
    for raw_line in lines:
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        key, sep, value = line.partition("=")
        key = key.strip()
        if not sep or not key:
            continue
        parsed[key] = value.strip().strip('"').strip("'")
    return parsed


def load_env_files(
    root: Path = PROJECT_ROOT,
    filenames: Iterable[str] = ENV_FILENAMES,
) -> dict[str, str]:
    """
    Export values from the env files under `root` that the process does not
    already define. Returns what was exported.
    """

    exported: dict[str, str] = {}
    for filename in filenames:
        env_path = root / filename
        if not env_path.is_file():
            continue
        for key, value in parse_env_lines(env_path.read_text(encoding="utf-8").splitlines()).items():
            if key in os.environ:
                continue
            os.environ[key] = value
            exported[key] = value
    return exported


@lru_cache(maxsize=1)
def _load_env_once() -> None:
    load_env_files()


def _env_value(name: str) -> str | None:
    """
    Stripped environment value, or None when unset or blank.
    """

    _load_env_once()
    value = (os.getenv(name) or "").strip()
    return value or None


def _get_bool_env(name: str, default: bool) -> bool:
    value = _env_value(name)
    return default if value is None else value.lower() in _TRUTHY


def _get_float_env(name: str, default: float) -> float:
    value = _env_value(name)
    if value is None:
        return default
    try:
        return float(value)
    except ValueError:
        return default


def _get_str_env(name: str, default: str) -> str:
    return _env_value(name) or default


def _clamp_unit(value: float) -> float:
    return max(0.0, min(1.0, value))


@dataclass(frozen=True)
class MappingSettings:
    """
    Runtime settings for mapping sessions.
    """

    thresholds: MatchingThresholds = MatchingThresholds()
    log_decisions: bool = True


@dataclass(frozen=True)
class LoggingSettings:
    """
    Root logging settings for the API process.
    """

    level: str = "INFO"


@lru_cache(maxsize=1)
def get_mapping_settings() -> MappingSettings:
    """
    Return cached mapping settings from environment variables.
    """

    return MappingSettings(
        thresholds=MatchingThresholds(
            match_floor=_clamp_unit(_get_float_env("MAPPING_MATCH_FLOOR", MATCH_FLOOR)),
            display_name_score=_clamp_unit(
                _get_float_env("MAPPING_DISPLAY_NAME_SCORE", DISPLAY_NAME_SCORE)
            ),
            synonym_score=_clamp_unit(_get_float_env("MAPPING_SYNONYM_SCORE", SYNONYM_SCORE)),
        ),
        log_decisions=_get_bool_env("MAPPING_LOG_DECISIONS", True),
    )


@lru_cache(maxsize=1)
def get_logging_settings() -> LoggingSettings:
    """
    Return cached logging settings.
    """

    return LoggingSettings(level=_get_str_env("LOG_LEVEL", "INFO").upper())
