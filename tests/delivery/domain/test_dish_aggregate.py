"""Tests for the Dish aggregate."""

import pytest
from delivery.catalogue.dish import UNRATED, Dish
from delivery.catalogue.events import DishAggregateRatingUpdated, DishListed
from protean.exceptions import ValidationError


class TestListOnMenu:
    def test_new_dish_is_unrated(self):
        dish = Dish.list_on_menu(name="Pad Thai", price=11.5, category="Wok")
        assert dish.rating == UNRATED

    def test_raises_dish_listed_event(self):
        dish = Dish.list_on_menu(name="Pad Thai", price=11.5, category="Wok", vegetarian=False)
        event = dish._events[0]
        assert isinstance(event, DishListed)
        assert event.name == "Pad Thai"
        assert event.category == "Wok"

    def test_price_must_be_positive(self):
        with pytest.raises(ValidationError):
            Dish.list_on_menu(name="Free Lunch", price=0, category="Soup")

    def test_unknown_category_is_rejected(self):
        with pytest.raises(ValidationError):
            Dish.list_on_menu(name="Burger", price=9.0, category="Grill")


class TestUpdateRating:
    def test_update_rating_sets_value_and_raises_event(self):
        dish = Dish.list_on_menu(name="Pad Thai", price=11.5, category="Wok")
        dish._events.clear()

        dish.update_rating(7.5)

        assert dish.rating == 7.5
        event = dish._events[0]
        assert isinstance(event, DishAggregateRatingUpdated)
        assert event.previous_rating == UNRATED
        assert event.rating == 7.5

    def test_negative_rating_is_rejected(self):
        dish = Dish.list_on_menu(name="Pad Thai", price=11.5, category="Wok")
        with pytest.raises(ValidationError):
            dish.update_rating(-1.0)
