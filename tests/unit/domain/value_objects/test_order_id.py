from datetime import UTC, datetime, timedelta, timezone

import pytest

from restaurant_core.domain.exceptions import InvalidFormatError
from restaurant_core.domain.value_objects import OrderId, create_order_id, generate_order_id
from restaurant_core.domain.value_objects.order_id import ORDER_ID_PATTERN
from restaurant_core.infrastructure import FixedTimeProvider


class TestCreateOrderId:
    @pytest.mark.parametrize("raw", ["ORD-12345", "ORD-00000", "ORD-1234567890123"])
    def test_accepts_valid_ids(self, raw: str) -> None:
        order_id = create_order_id(raw)

        assert isinstance(order_id, OrderId)
        assert order_id.value == raw

    @pytest.mark.parametrize(
        "raw",
        [
            "",
            "12345",
            "not-a-number",
            "ORD-1234",
            "ORD-",
            "ord-12345",
            "ORD12345",
            "ORD-12345a",
            " ORD-12345",
            "ORD-12345 ",
            "ORD-12345\n",
            "XORD-12345",
            "ORD-123-45",
            "ORD-\u0661\u0662\u0663\u0664\u0665",
            "ORD-\u0967\u0968\u0969\u096a\u096b",
            "ORD-\uff11\uff12\uff13\uff14\uff15",
        ],
    )
    def test_rejects_invalid_ids(self, raw: str) -> None:
        with pytest.raises(InvalidFormatError):
            create_order_id(raw)

    def test_rejects_non_string(self) -> None:
        with pytest.raises(InvalidFormatError):
            create_order_id(12345)  # type: ignore[arg-type]

    def test_error_carries_raw_value(self) -> None:
        with pytest.raises(InvalidFormatError) as exc_info:
            create_order_id("12345")

        assert exc_info.value.value == "12345"
        assert exc_info.value.kind == "invalid_format"


class TestGenerateOrderId:
    def test_generated_id_matches_format(self) -> None:
        order_id = generate_order_id()

        assert ORDER_ID_PATTERN.fullmatch(order_id.value)

    def test_generated_id_round_trips_through_parser(self) -> None:
        order_id = generate_order_id()

        assert create_order_id(order_id.value) == order_id

    def test_generated_id_embeds_millisecond_timestamp(
        self, time_provider: FixedTimeProvider, fixed_time: datetime
    ) -> None:
        millis = int(fixed_time.timestamp() * 1000)

        order_id = OrderId.generate(time_provider.now())

        assert order_id.value.startswith(f"ORD-{millis}")
        assert len(order_id.value) == len(f"ORD-{millis}") + 5

    def test_generated_ids_are_unlikely_to_collide(self) -> None:
        now = datetime(2024, 1, 15, 12, 0, 0, tzinfo=UTC)

        ids = {generate_order_id(now) for _ in range(20)}

        assert len(ids) > 1

    def test_epoch_timestamp_still_matches_format(self) -> None:
        order_id = generate_order_id(datetime(1970, 1, 1, tzinfo=UTC))

        assert ORDER_ID_PATTERN.fullmatch(order_id.value)

    def test_rejects_naive_datetime(self) -> None:
        with pytest.raises(ValueError, match="tzinfo=UTC"):
            generate_order_id(datetime(2024, 1, 15, 12, 0, 0))

    def test_rejects_non_utc_offset(self) -> None:
        plus_six = timezone(timedelta(hours=6))

        with pytest.raises(ValueError, match="tzinfo=UTC"):
            OrderId.generate(datetime(2024, 1, 15, 18, 0, 0, tzinfo=plus_six))


class TestOrderIdValueSemantics:
    def test_order_id_is_frozen(self) -> None:
        order_id = create_order_id("ORD-12345")

        with pytest.raises(AttributeError):
            order_id.value = "anything"  # type: ignore[misc]

    def test_equal_ids_are_equal_and_hash_equal(self) -> None:
        a = create_order_id("ORD-12345")
        b = create_order_id("ORD-12345")

        assert a == b
        assert hash(a) == hash(b)

    def test_str_returns_raw_value(self) -> None:
        assert str(create_order_id("ORD-12345")) == "ORD-12345"
