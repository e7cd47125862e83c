"""Application tests for listing dishes and reading the menu."""

import pytest
from delivery.catalogue.dish import Dish
from delivery.catalogue.menu import get_dish, list_dishes
from delivery.errors import DishNotFound
from protean import current_domain


class TestListDish:
    def test_listed_dish_is_persisted(self, list_dish):
        dish_id = list_dish(name="Pad Thai", price=11.5, category="Wok", vegetarian=False, image="pad-thai.jpg")

        dish = current_domain.repository_for(Dish).get(dish_id)
        assert dish.name == "Pad Thai"
        assert dish.price == 11.5
        assert dish.image == "pad-thai.jpg"
        assert dish.rating == 0.0


class TestReadMenu:
    def test_get_dish(self, margherita):
        assert get_dish(margherita).name == "Margherita"

    def test_get_unknown_dish_fails(self):
        with pytest.raises(DishNotFound):
            get_dish("no-such-dish")

    def test_list_dishes_by_name(self, margherita, tom_yum, list_dish):
        list_dish(name="Lemonade", price=3.0, category="Drink")

        assert [dish.name for dish in list_dishes()] == ["Lemonade", "Margherita", "Tom Yum"]

    def test_empty_menu(self):
        assert list_dishes() == []
