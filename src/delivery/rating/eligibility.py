"""Purchase eligibility for rating a dish.

A user may rate a dish when any of their orders, in any status, has a line
with the dish's name.
"""

from protean.utils.globals import current_domain

from delivery.catalogue.menu import get_dish
from delivery.order.order import Order


def purchased_lines(user_id, dish_name):
    """(order, line) pairs of ``user_id``'s order lines named ``dish_name``, oldest order first."""
    orders = current_domain.repository_for(Order).placed_by(user_id)
    return [(order, line) for order in orders for line in order.lines_named(dish_name)]


def check_eligibility(user_id, dish_id) -> bool:
    dish = get_dish(dish_id)
    return bool(purchased_lines(user_id, dish.name))
