"""Shared BDD fixtures and step definitions for the Delivery domain."""

from datetime import UTC, datetime, timedelta

import pytest
from delivery.basket.items import AddDishToBasket, get_basket
from delivery.catalogue.menu import ListDish, get_dish
from delivery.order.placement import CreateOrder
from protean import current_domain
from protean.exceptions import ProteanException
from pytest_bdd import given, parsers, then


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------
@pytest.fixture()
def menu():
    """Dish ids by name."""
    return {}


@pytest.fixture()
def error():
    """Container for the error raised by the last When step."""
    return {"exc": None}


@pytest.fixture()
def placed():
    """Order ids in the order they were placed."""
    return []


@pytest.fixture()
def attempt(error):
    """Run a When action, capturing the domain error it raises."""

    def _attempt(fn, *args):
        error["exc"] = None
        try:
            return fn(*args)
        except ProteanException as exc:
            error["exc"] = exc
            return None

    return _attempt


@pytest.fixture()
def add_to_basket(menu):
    def _add(user, dish_name):
        current_domain.process(AddDishToBasket(user_id=user, dish_id=menu[dish_name]), asynchronous=False)

    return _add


@pytest.fixture()
def place_order(placed):
    def _place(user, minutes):
        order_id = current_domain.process(
            CreateOrder(
                user_id=user,
                delivery_time=datetime.now(UTC) + timedelta(minutes=minutes),
                address="12 Baker Street",
            ),
            asynchronous=False,
        )
        placed.append(order_id)
        return order_id

    return _place


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given(parsers.cfparse('the menu lists "{name}" at {price:g}'))
def menu_lists(menu, name, price):
    menu[name] = current_domain.process(
        ListDish(name=name, price=price, category="Pizza"),
        asynchronous=False,
    )


@given(parsers.cfparse('user "{user}" has added "{name}" {times:d} times'))
def has_added(add_to_basket, user, name, times):
    for _ in range(times):
        add_to_basket(user, name)


@given(parsers.cfparse('user "{user}" has ordered "{name}"'))
def has_ordered(add_to_basket, place_order, user, name):
    add_to_basket(user, name)
    place_order(user, 120)


@given(parsers.cfparse('user "{user}" has ordered for delivery in {minutes:d} minutes'))
def has_ordered_for(place_order, user, minutes):
    place_order(user, minutes)


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then(parsers.cfparse('the request fails with "{error_name}"'))
def request_fails(error, error_name):
    assert error["exc"] is not None, f"Expected {error_name} but nothing was raised"
    assert type(error["exc"]).__name__ == error_name


@then(parsers.cfparse('the basket of user "{user}" has {count:d} line'))
@then(parsers.cfparse('the basket of user "{user}" has {count:d} lines'))
def basket_has_lines(user, count):
    assert len(get_basket(user)) == count


@then(parsers.cfparse('the rating of "{name}" is {rating:g}'))
def dish_rating_is(menu, name, rating):
    assert get_dish(menu[name]).rating == rating
