"""Tests for the Basket aggregate: merging, decrementing and removing lines."""

import pytest
from delivery.basket.basket import Basket
from delivery.basket.events import (
    BasketCleared,
    BasketLineDecremented,
    BasketLineRemoved,
    DishAddedToBasket,
)
from delivery.catalogue.dish import Dish
from delivery.errors import BasketLineNotFound


def _dish(name="Margherita", price=8.5, category="Pizza", **kwargs):
    return Dish(name=name, price=price, category=category, **kwargs)


def _basket_with(dish, units=1):
    basket = Basket.open_for("user-001")
    for _ in range(units):
        basket.add_dish(dish)
    basket._events.clear()
    return basket


class TestAddDish:
    def test_first_add_creates_line_with_one_unit(self):
        dish = _dish(image="margherita.jpg")
        basket = Basket.open_for("user-001")
        basket.add_dish(dish)

        assert len(basket.lines) == 1
        line = basket.lines[0]
        assert line.name == "Margherita"
        assert line.quantity == 1
        assert line.price == 8.5
        assert line.total_price == 8.5
        assert line.image == "margherita.jpg"

    def test_repeat_add_increments_the_same_line(self):
        dish = _dish()
        basket = Basket.open_for("user-001")
        basket.add_dish(dish)
        basket.add_dish(dish)

        assert len(basket.lines) == 1
        assert basket.lines[0].quantity == 2
        assert basket.lines[0].total_price == 17.0

    def test_dishes_with_the_same_name_share_a_line(self):
        basket = Basket.open_for("user-001")
        basket.add_dish(_dish(price=8.5))
        basket.add_dish(_dish(price=9.0))

        assert len(basket.lines) == 1
        line = basket.lines[0]
        assert line.quantity == 2
        # Unit price stays the one copied when the line was created
        assert line.price == 8.5
        assert line.total_price == 17.0

    def test_different_dishes_get_separate_lines(self):
        basket = Basket.open_for("user-001")
        basket.add_dish(_dish())
        basket.add_dish(_dish(name="Tom Yum", price=7.25, category="Soup"))

        assert len(basket.lines) == 2
        assert basket.total_price == 15.75

    def test_raises_dish_added_event(self):
        dish = _dish()
        basket = Basket.open_for("user-001")
        basket.add_dish(dish)
        basket.add_dish(dish)

        assert len(basket._events) == 2
        event = basket._events[-1]
        assert isinstance(event, DishAddedToBasket)
        assert event.name == "Margherita"
        assert event.quantity == 2
        assert event.total_price == 17.0


class TestDecrementDish:
    def test_decrement_reduces_quantity_by_one(self):
        dish = _dish()
        basket = _basket_with(dish, units=3)
        basket.decrement_dish(dish)

        line = basket.line_named("Margherita")
        assert line.quantity == 2
        assert line.total_price == 17.0

    def test_decrement_raises_event(self):
        dish = _dish()
        basket = _basket_with(dish, units=2)
        basket.decrement_dish(dish)

        assert len(basket._events) == 1
        assert isinstance(basket._events[0], BasketLineDecremented)
        assert basket._events[0].quantity == 1

    def test_decrement_of_single_unit_removes_line(self):
        dish = _dish()
        basket = _basket_with(dish, units=1)
        basket.decrement_dish(dish)

        assert basket.is_empty
        assert isinstance(basket._events[0], BasketLineRemoved)

    def test_decrement_without_line_fails(self):
        basket = _basket_with(_dish(), units=1)

        with pytest.raises(BasketLineNotFound):
            basket.decrement_dish(_dish(name="Tiramisu", price=5.5, category="Dessert"))


class TestRemoveDish:
    def test_remove_drops_line_whatever_its_quantity(self):
        dish = _dish()
        basket = _basket_with(dish, units=4)
        basket.remove_dish(dish)

        assert basket.line_named("Margherita") is None
        assert isinstance(basket._events[0], BasketLineRemoved)

    def test_remove_leaves_other_lines(self):
        dish = _dish()
        basket = _basket_with(dish, units=1)
        basket.add_dish(_dish(name="Lemonade", price=3.0, category="Drink"))
        basket.remove_dish(dish)

        assert [line.name for line in basket.lines] == ["Lemonade"]

    def test_remove_without_line_fails(self):
        basket = Basket.open_for("user-001")

        with pytest.raises(BasketLineNotFound):
            basket.remove_dish(_dish())


class TestClearInto:
    def test_clear_empties_basket(self):
        basket = _basket_with(_dish(), units=2)
        basket.add_dish(_dish(name="Lemonade", price=3.0, category="Drink"))
        basket._events.clear()

        basket.clear_into("order-001")

        assert basket.is_empty
        assert basket.total_price == 0
        event = basket._events[0]
        assert isinstance(event, BasketCleared)
        assert event.order_id == "order-001"
        assert event.line_count == 2
