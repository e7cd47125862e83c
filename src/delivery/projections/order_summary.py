"""Order summary: one row per order for the user's order history."""

import json

from protean.core.projector import on
from protean.fields import DateTime, Float, Identifier, Integer, String
from protean.utils.globals import current_domain

from delivery.domain import delivery
from delivery.order.events import OrderDelivered, OrderPlaced
from delivery.order.order import Order, OrderStatus


@delivery.projection
class OrderSummary:
    order_id = Identifier(identifier=True, required=True)
    user_id = Identifier(required=True)
    delivery_time = DateTime(required=True)
    order_time = DateTime(required=True)
    status = String(required=True)
    price = Float(required=True)
    line_count = Integer(default=0)


@delivery.projector(projector_for=OrderSummary, aggregates=[Order])
class OrderSummaryProjector:
    @on(OrderPlaced)
    def on_order_placed(self, event):
        lines = json.loads(event.lines) if isinstance(event.lines, str) else []
        current_domain.repository_for(OrderSummary).add(
            OrderSummary(
                order_id=event.order_id,
                user_id=event.user_id,
                delivery_time=event.delivery_time,
                order_time=event.order_time,
                status=OrderStatus.IN_PROCESS.value,
                price=event.price,
                line_count=len(lines),
            )
        )

    @on(OrderDelivered)
    def on_order_delivered(self, event):
        repo = current_domain.repository_for(OrderSummary)
        summary = repo.get(event.order_id)
        summary.status = OrderStatus.DELIVERED.value
        repo.add(summary)
