import logging

from structlog.testing import capture_logs

from restaurant_core.config import Settings
from restaurant_core.logging_config import (
    EXERCISE_LOGGER_NAME,
    configure_logging,
    get_logger,
    log_error,
)


class TestLogError:
    def test_emits_structured_error_event(self) -> None:
        with capture_logs() as logs:
            log_error(5, "Order ID rejected", {"raw": "", "issue": "bad format"})

        assert logs == [
            {
                "event": "Order ID rejected",
                "exercise": 5,
                "details": {"raw": "", "issue": "bad format"},
                "log_level": "error",
            }
        ]

    def test_details_are_optional(self) -> None:
        with capture_logs() as logs:
            log_error(6, "Hours logic broken")

        assert logs[0]["details"] is None

    def test_returns_none(self) -> None:
        with capture_logs():
            assert log_error(2, "Quantity rejected", {}) is None


class TestConfigureLogging:
    def test_sets_root_level_from_settings(self) -> None:
        configure_logging(Settings(log_level="WARNING"))

        assert logging.getLogger().level == logging.WARNING

    def test_loggers_filter_below_configured_level(self) -> None:
        configure_logging(Settings(log_level="ERROR"))

        assert not logging.getLogger(EXERCISE_LOGGER_NAME).isEnabledFor(logging.INFO)
        assert logging.getLogger(EXERCISE_LOGGER_NAME).isEnabledFor(logging.ERROR)

    def test_get_logger_returns_usable_logger(self) -> None:
        with capture_logs() as logs:
            get_logger("restaurant_core.test").info("hello", table=1)

        assert logs == [{"event": "hello", "table": 1, "log_level": "info"}]
