from __future__ import annotations

from collections.abc import Iterator

import pytest

from mapping_engine.config import get_logging_settings, get_mapping_settings, load_env_files, parse_env_lines
from mapping_engine.mappers.field_matcher import MatchingThresholds


@pytest.fixture(autouse=True)
def _clear_settings_cache() -> Iterator[None]:
    get_mapping_settings.cache_clear()
    get_logging_settings.cache_clear()
    yield
    get_mapping_settings.cache_clear()
    get_logging_settings.cache_clear()


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("MAPPING_MATCH_FLOOR", "MAPPING_DISPLAY_NAME_SCORE", "MAPPING_SYNONYM_SCORE", "MAPPING_LOG_DECISIONS"):
        monkeypatch.delenv(name, raising=False)

    settings = get_mapping_settings()

    assert settings.thresholds == MatchingThresholds()
    assert settings.log_decisions is True


def test_env_overrides_are_clamped(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MAPPING_MATCH_FLOOR", "0.85")
    monkeypatch.setenv("MAPPING_SYNONYM_SCORE", "1.7")
    monkeypatch.setenv("MAPPING_LOG_DECISIONS", "off")

    settings = get_mapping_settings()

    assert settings.thresholds.match_floor == pytest.approx(0.85)
    assert settings.thresholds.synonym_score == 1.0
    assert settings.log_decisions is False


def test_invalid_numbers_fall_back_to_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MAPPING_MATCH_FLOOR", "seventy")

    assert get_mapping_settings().thresholds.match_floor == pytest.approx(0.7)


def test_log_level(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", " debug ")

    assert get_logging_settings().level == "DEBUG"


def test_parse_env_lines() -> None:
    lines = [
        "# comment",
        "",
        "MAPPING_MATCH_FLOOR = 0.8",
        'LOG_LEVEL="warning"',
        "NO_SEPARATOR",
        "=orphan",
        "MAPPING_MATCH_FLOOR=0.75",
    ]

    assert parse_env_lines(lines) == {"MAPPING_MATCH_FLOOR": "0.75", "LOG_LEVEL": "warning"}


def test_load_env_files_does_not_override_process_env(tmp_path, monkeypatch: pytest.MonkeyPatch) -> None:
    (tmp_path / ".env").write_text("MAPPING_SYNONYM_SCORE=0.85\nLOG_LEVEL=ERROR\n", encoding="utf-8")
    (tmp_path / ".env.local").write_text("MAPPING_LOG_DECISIONS=false\n", encoding="utf-8")
    monkeypatch.setenv("LOG_LEVEL", "INFO")
    for name in ("MAPPING_SYNONYM_SCORE", "MAPPING_LOG_DECISIONS"):
        # setenv first so the teardown also removes what the loader exports
        monkeypatch.setenv(name, "unset")
        monkeypatch.delenv(name)

    exported = load_env_files(tmp_path)

    assert exported == {"MAPPING_SYNONYM_SCORE": "0.85", "MAPPING_LOG_DECISIONS": "false"}
    assert get_mapping_settings().thresholds.synonym_score == pytest.approx(0.85)
    assert get_mapping_settings().log_decisions is False
    assert get_logging_settings().level == "INFO"


def test_missing_env_files_export_nothing(tmp_path) -> None:
    assert load_env_files(tmp_path) == {}
