"""BDD tests for placing orders and advancing their status."""

from delivery.order.order import Order
from delivery.order.progression import AdvanceOrderStatus
from protean import current_domain
from pytest_bdd import parsers, scenarios, then, when

scenarios("features/ordering.feature")


def _advance(order_id):
    current_domain.process(AdvanceOrderStatus(order_id=order_id), asynchronous=False)


# ---------------------------------------------------------------------------
# When steps
# ---------------------------------------------------------------------------
@when(parsers.cfparse('user "{user}" orders for delivery in {minutes:d} minutes'))
def orders(attempt, place_order, user, minutes):
    attempt(place_order, user, minutes)


@when("the order is advanced")
def order_advanced(attempt, placed):
    attempt(_advance, placed[-1])


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then(parsers.cfparse('the order is "{status}" with a total of {total:g}'))
def order_state(placed, status, total):
    order = current_domain.repository_for(Order).get(placed[-1])
    assert order.status == status
    assert order.price == total
