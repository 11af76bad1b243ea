import logging

import pytest
from pydantic import ValidationError

from refcrypto.config import Settings, configure_logging, load_settings


def test_defaults(monkeypatch):
    for var in (
        "REFCRYPTO_LOG_LEVEL",
        "REFCRYPTO_PARALLEL_WORKERS",
        "REFCRYPTO_PARALLEL_MIN_BLOCKS",
        "REFCRYPTO_CACHE_KEY_SCHEDULE",
        "REFCRYPTO_KEY_SCHEDULE_CACHE_SIZE",
        "REFCRYPTO_GLOBAL_SEED",
    ):
        monkeypatch.delenv(var, raising=False)
    s = load_settings()
    assert s.log_level == "WARNING"
    assert s.parallel_workers == 1
    assert s.parallel_min_blocks == 64
    assert s.cache_key_schedule is True
    assert s.key_schedule_cache_size == 256
    assert s.global_seed == 1337


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("REFCRYPTO_LOG_LEVEL", "debug")
    monkeypatch.setenv("REFCRYPTO_PARALLEL_WORKERS", "8")
    monkeypatch.setenv("REFCRYPTO_CACHE_KEY_SCHEDULE", "no")
    monkeypatch.setenv("REFCRYPTO_GLOBAL_SEED", "42")
    s = load_settings()
    assert s.log_level == "DEBUG"
    assert s.parallel_workers == 8
    assert s.cache_key_schedule is False
    assert s.global_seed == 42


def test_settings_are_cached(monkeypatch):
    first = load_settings()
    monkeypatch.setenv("REFCRYPTO_GLOBAL_SEED", "99")
    assert load_settings() is first
    load_settings.cache_clear()
    assert load_settings().global_seed == 99


@pytest.mark.parametrize(
    "kwargs",
    [
        {"log_level": "LOUD"},
        {"parallel_workers": -1},
        {"parallel_workers": 65},
        {"parallel_min_blocks": 0},
        {"key_schedule_cache_size": 0},
    ],
)
def test_invalid_settings(kwargs):
    with pytest.raises(ValidationError):
        Settings(**kwargs)


def test_configure_logging_uses_level(monkeypatch):
    calls = {}
    monkeypatch.setattr(logging, "basicConfig", lambda **kw: calls.update(kw))
    monkeypatch.setenv("REFCRYPTO_LOG_LEVEL", "INFO")
    configure_logging()
    assert calls["level"] == "INFO"
    configure_logging("debug")
    assert calls["level"] == "DEBUG"
