import pytest

from prizepicks_ingest.settings import Settings


def test_settings_load_with_proxy_key(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ZYTE_API_KEY", "test-key")

    settings = Settings(_env_file=None)

    assert settings.zyte_api_key == "test-key"
    assert settings.api_url == "https://api.prizepicks.com/projections"
    assert settings.timeout_s == 60.0
    assert settings.per_page == 10000
    assert settings.state_code == "CA"
    assert settings.connect_attempts == 2
    assert settings.proxy_url() == "http://test-key:@api.zyte.com:8011"


def test_settings_allows_missing_key(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("ZYTE_API_KEY", raising=False)
    monkeypatch.delenv("PP_INGEST_ZYTE_API_KEY", raising=False)

    settings = Settings(_env_file=None)
    assert settings.zyte_api_key == ""


def test_settings_prefixed_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("ZYTE_API_KEY", raising=False)
    monkeypatch.setenv("PP_INGEST_ZYTE_API_KEY", "prefixed-key")
    monkeypatch.setenv("PP_INGEST_STATE_CODE", "NY")
    monkeypatch.setenv("PP_INGEST_SINGLE_STAT", "false")

    settings = Settings(_env_file=None)

    assert settings.zyte_api_key == "prefixed-key"
    assert settings.projection_params() == {
        "per_page": 10000,
        "state_code": "NY",
        "single_stat": "false",
        "game_mode": "pickem",
    }
