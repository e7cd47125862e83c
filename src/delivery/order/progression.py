"""Order status progression: InProcess to Delivered."""

import structlog
from protean import handle
from protean.exceptions import ObjectNotFoundError
from protean.fields import Identifier
from protean.utils.globals import current_domain

from delivery.domain import delivery
from delivery.errors import OrderNotFound
from delivery.order.order import Order

logger = structlog.get_logger(__name__)


@delivery.command(part_of="Order")
class AdvanceOrderStatus:
    """Move an order to its next status.

    Not restricted to the order's owner: any caller that can reach this
    operation may advance any order.
    """

    order_id = Identifier(required=True)


@delivery.command_handler(part_of=Order)
class AdvanceOrderStatusHandler:
    @handle(AdvanceOrderStatus)
    def advance_status(self, command):
        repo = current_domain.repository_for(Order)
        try:
            order = repo.get(command.order_id)
        except ObjectNotFoundError as exc:
            raise OrderNotFound(command.order_id) from exc

        order.mark_delivered()
        repo.add(order)

        logger.info("Order delivered", order_id=str(order.id), user_id=str(order.user_id))
        return order.status
