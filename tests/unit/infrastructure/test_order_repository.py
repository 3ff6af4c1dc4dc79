"""Tests for InMemoryOrderRepository.

Tests cover:
- OrderRepository interface implementation
- Uniqueness enforcement on register()
- Isolation between repository instances
"""

import pytest

from restaurant_core.application.ports import OrderRepository
from restaurant_core.domain.exceptions import DuplicateIdError
from restaurant_core.domain.value_objects import create_order_id, generate_order_id
from restaurant_core.infrastructure import FixedTimeProvider, InMemoryOrderRepository


class TestRegister:
    def test_implements_order_repository_interface(
        self, order_repository: InMemoryOrderRepository
    ) -> None:
        assert isinstance(order_repository, OrderRepository)

    def test_registers_new_id(self, order_repository: InMemoryOrderRepository) -> None:
        order_id = create_order_id("ORD-10001")

        order_repository.register(order_id)

        assert order_repository.contains(order_id)
        assert len(order_repository) == 1

    def test_rejects_duplicate_id(self, order_repository: InMemoryOrderRepository) -> None:
        order_repository.register(create_order_id("ORD-10001"))

        with pytest.raises(DuplicateIdError) as exc_info:
            order_repository.register(create_order_id("ORD-10001"))

        assert exc_info.value.value == "ORD-10001"
        assert len(order_repository) == 1

    def test_distinct_ids_both_register(self, order_repository: InMemoryOrderRepository) -> None:
        order_repository.register(create_order_id("ORD-10001"))
        order_repository.register(create_order_id("ORD-10002"))

        assert len(order_repository) == 2

    def test_generated_ids_register(
        self, order_repository: InMemoryOrderRepository, time_provider: FixedTimeProvider
    ) -> None:
        order_id = generate_order_id(time_provider.now())

        order_repository.register(order_id)

        assert order_repository.contains(order_id)


class TestContains:
    def test_unknown_id_is_not_contained(self, order_repository: InMemoryOrderRepository) -> None:
        assert order_repository.contains(create_order_id("ORD-99999")) is False

    def test_empty_repository_has_zero_length(
        self, order_repository: InMemoryOrderRepository
    ) -> None:
        assert len(order_repository) == 0


class TestIsolation:
    def test_instances_do_not_share_state(self) -> None:
        first = InMemoryOrderRepository()
        second = InMemoryOrderRepository()
        order_id = create_order_id("ORD-10001")

        first.register(order_id)
        second.register(order_id)

        assert first.contains(order_id)
        assert second.contains(order_id)
