"""Menu management: listing dishes and reading them back."""

import structlog
from protean import handle
from protean.exceptions import ObjectNotFoundError
from protean.fields import Boolean, Float, String, Text
from protean.utils.globals import current_domain

from delivery.catalogue.dish import Dish
from delivery.domain import delivery
from delivery.errors import DishNotFound
from delivery.utils.queries import fetch_all

logger = structlog.get_logger(__name__)


@delivery.command(part_of="Dish")
class ListDish:
    """Put a new dish on the menu."""

    name = String(required=True, max_length=255)
    price = Float(required=True)
    category = String(required=True, max_length=50)
    description = Text()
    image = String(max_length=500)
    vegetarian = Boolean(default=False)


@delivery.command_handler(part_of=Dish)
class MenuHandler:
    @handle(ListDish)
    def list_dish(self, command):
        dish = Dish.list_on_menu(
            name=command.name,
            price=command.price,
            category=command.category,
            description=command.description,
            image=command.image,
            vegetarian=command.vegetarian or False,
        )
        current_domain.repository_for(Dish).add(dish)
        logger.info("Dish listed", dish_id=str(dish.id), name=dish.name, price=dish.price)
        return str(dish.id)


def get_dish(dish_id) -> Dish:
    try:
        return current_domain.repository_for(Dish).get(dish_id)
    except ObjectNotFoundError as exc:
        raise DishNotFound(dish_id) from exc


def list_dishes() -> list[Dish]:
    """All dishes on the menu, by name."""
    return list(fetch_all(current_domain.repository_for(Dish)._dao.query.order_by("name")))
