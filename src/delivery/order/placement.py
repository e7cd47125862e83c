"""Order placement: converts the user's basket into an order in one unit of work."""

import structlog
from protean import handle
from protean.exceptions import ObjectNotFoundError
from protean.fields import DateTime, Identifier, String
from protean.utils.globals import current_domain

from delivery.basket.basket import Basket
from delivery.domain import delivery
from delivery.errors import EmptyBasket
from delivery.order.order import Order, check_delivery_time

logger = structlog.get_logger(__name__)


@delivery.command(part_of="Order")
class CreateOrder:
    user_id = Identifier(required=True)
    delivery_time = DateTime(required=True)
    address = String(required=True, max_length=500)


@delivery.command_handler(part_of=Order)
class CreateOrderHandler:
    @handle(CreateOrder)
    def create_order(self, command):
        check_delivery_time(command.delivery_time)

        basket_repo = current_domain.repository_for(Basket)
        try:
            basket = basket_repo.get(command.user_id)
        except ObjectNotFoundError as exc:
            raise EmptyBasket() from exc
        if basket.is_empty:
            raise EmptyBasket()

        order = Order.place(
            user_id=command.user_id,
            delivery_time=command.delivery_time,
            address=command.address,
            basket_lines=[line.snapshot() for line in basket.lines],
        )
        basket.clear_into(order.id)

        current_domain.repository_for(Order).add(order)
        basket_repo.add(basket)

        logger.info(
            "Order placed",
            order_id=str(order.id),
            user_id=str(command.user_id),
            line_count=len(order.lines),
            price=order.price,
        )
        return str(order.id)
