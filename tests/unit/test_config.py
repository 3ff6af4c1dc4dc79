import pytest
from pydantic import ValidationError

from restaurant_core.config import Settings, get_settings


class TestSettings:
    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("RESTAURANT_LOG_LEVEL", raising=False)
        monkeypatch.delenv("RESTAURANT_LOG_FORMAT", raising=False)

        settings = Settings()

        assert settings.log_level == "INFO"
        assert settings.log_format == "console"

    def test_reads_prefixed_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("RESTAURANT_LOG_LEVEL", "debug")
        monkeypatch.setenv("RESTAURANT_LOG_FORMAT", "json")

        settings = Settings()

        assert settings.log_level == "DEBUG"
        assert settings.log_format == "json"

    def test_rejects_unknown_level(self) -> None:
        with pytest.raises(ValidationError):
            Settings(log_level="LOUD")

    def test_rejects_unknown_format(self) -> None:
        with pytest.raises(ValidationError):
            Settings(log_format="xml")  # type: ignore[arg-type]

    def test_get_settings_is_cached(self) -> None:
        assert get_settings() is get_settings()
