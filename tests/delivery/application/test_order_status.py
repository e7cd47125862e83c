"""Application tests for order status progression."""

import pytest
from delivery.basket.items import AddDishToBasket
from delivery.errors import InvalidStatusTransition, OrderNotFound
from delivery.order.order import Order, OrderStatus
from delivery.order.placement import CreateOrder
from delivery.order.progression import AdvanceOrderStatus
from protean import current_domain


@pytest.fixture()
def order_id(margherita, delivery_time):
    current_domain.process(AddDishToBasket(user_id="user-001", dish_id=margherita), asynchronous=False)
    return current_domain.process(
        CreateOrder(user_id="user-001", delivery_time=delivery_time, address="12 Baker Street"),
        asynchronous=False,
    )


def _advance(order_id):
    return current_domain.process(AdvanceOrderStatus(order_id=order_id), asynchronous=False)


class TestAdvanceOrderStatus:
    def test_in_process_order_becomes_delivered(self, order_id):
        status = _advance(order_id)

        assert status == OrderStatus.DELIVERED.value
        order = current_domain.repository_for(Order).get(order_id)
        assert order.status == OrderStatus.DELIVERED.value

    def test_second_advance_fails(self, order_id):
        _advance(order_id)

        with pytest.raises(InvalidStatusTransition):
            _advance(order_id)

    def test_failed_advance_keeps_status(self, order_id):
        _advance(order_id)
        with pytest.raises(InvalidStatusTransition):
            _advance(order_id)

        order = current_domain.repository_for(Order).get(order_id)
        assert order.status == OrderStatus.DELIVERED.value

    def test_unknown_order_fails(self):
        with pytest.raises(OrderNotFound):
            _advance("no-such-order")
