"""Order reads scoped to the calling user."""

from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from delivery.errors import NoOrdersFound, OrderNotFound
from delivery.order.order import Order
from delivery.projections.order_summary import OrderSummary
from delivery.utils.queries import fetch_all


def get_order(user_id, order_id) -> Order:
    """The order with its lines, if ``user_id`` owns it.

    Someone else's order is reported exactly like a missing one.
    """
    try:
        order = current_domain.repository_for(Order).get(order_id)
    except ObjectNotFoundError as exc:
        raise OrderNotFound(order_id) from exc

    if str(order.user_id) != str(user_id):
        raise OrderNotFound(order_id)
    return order


def list_orders(user_id) -> list[OrderSummary]:
    """Summaries of every order of ``user_id``, oldest first.

    Having no orders at all is reported as ``NoOrdersFound`` rather than an
    empty list.
    """
    repo = current_domain.repository_for(OrderSummary)
    queryset = repo._dao.query.filter(user_id=str(user_id)).order_by("order_time")
    summaries = list(fetch_all(queryset))
    if not summaries:
        raise NoOrdersFound()
    return summaries
