"""Integration tests for the OrderSummary projection."""

from delivery.basket.items import AddDishToBasket
from delivery.order.placement import CreateOrder
from delivery.order.progression import AdvanceOrderStatus
from delivery.projections.order_summary import OrderSummary
from protean import current_domain


def _place(dish_ids, delivery_time, user_id="user-001"):
    for dish_id in dish_ids:
        current_domain.process(AddDishToBasket(user_id=user_id, dish_id=dish_id), asynchronous=False)
    return current_domain.process(
        CreateOrder(user_id=user_id, delivery_time=delivery_time, address="12 Baker Street"),
        asynchronous=False,
    )


class TestOrderSummaryProjection:
    def test_placed_order_gets_a_summary(self, margherita, tom_yum, delivery_time):
        order_id = _place([margherita, margherita, tom_yum], delivery_time)

        summary = current_domain.repository_for(OrderSummary).get(order_id)
        assert summary.user_id == "user-001"
        assert summary.status == "InProcess"
        assert summary.price == 24.25
        assert summary.line_count == 2

    def test_delivery_updates_the_summary(self, margherita, delivery_time):
        order_id = _place([margherita], delivery_time)

        current_domain.process(AdvanceOrderStatus(order_id=order_id), asynchronous=False)

        summary = current_domain.repository_for(OrderSummary).get(order_id)
        assert summary.status == "Delivered"
