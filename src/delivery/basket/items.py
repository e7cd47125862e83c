"""Basket line management: commands, handler and the basket read."""

import structlog
from protean import handle
from protean.exceptions import ExpectedVersionError, ObjectNotFoundError, ValidationError
from protean.fields import Boolean, Identifier
from protean.utils.globals import current_domain

from delivery.basket.basket import Basket
from delivery.catalogue.menu import get_dish
from delivery.domain import delivery

logger = structlog.get_logger(__name__)


@delivery.command(part_of="Basket")
class AddDishToBasket:
    user_id = Identifier(required=True)
    dish_id = Identifier(required=True)


@delivery.command(part_of="Basket")
class ModifyBasket:
    """Shrink or wipe the basket line of a dish.

    ``decrement=True`` takes away one unit (removing the line when it holds a
    single unit); ``decrement=False`` removes the line regardless of quantity.
    """

    user_id = Identifier(required=True)
    dish_id = Identifier(required=True)
    decrement = Boolean(default=False)


def _basket_of(repo, user_id):
    """The user's basket and whether it was opened just now."""
    try:
        return repo.get(user_id), False
    except ObjectNotFoundError:
        return Basket.open_for(user_id), True


@delivery.command_handler(part_of=Basket)
class ManageBasketHandler:
    @handle(AddDishToBasket)
    def add_dish(self, command):
        dish = get_dish(command.dish_id)

        repo = current_domain.repository_for(Basket)
        basket, opened = _basket_of(repo, command.user_id)
        basket.add_dish(dish)
        try:
            repo.add(basket)
        except ValidationError as exc:
            # Another request opened this user's basket after our read
            if opened and "user_id" in exc.messages:
                raise ExpectedVersionError(f"Basket of user {command.user_id} was opened concurrently") from exc
            raise

        line = basket.line_named(dish.name)
        logger.info(
            "Dish added to basket",
            user_id=str(command.user_id),
            dish=dish.name,
            quantity=line.quantity,
            total_price=line.total_price,
            basket_total=basket.total_price,
        )

    @handle(ModifyBasket)
    def modify_basket(self, command):
        dish = get_dish(command.dish_id)

        repo = current_domain.repository_for(Basket)
        basket, _ = _basket_of(repo, command.user_id)

        if command.decrement:
            basket.decrement_dish(dish)
        else:
            basket.remove_dish(dish)
        repo.add(basket)

        logger.info(
            "Basket modified",
            user_id=str(command.user_id),
            dish=dish.name,
            decrement=bool(command.decrement),
            basket_total=basket.total_price,
        )


def get_basket(user_id) -> list:
    """The user's current basket lines, ordered by dish name."""
    try:
        basket = current_domain.repository_for(Basket).get(user_id)
    except ObjectNotFoundError:
        return []
    return sorted(basket.lines, key=lambda line: line.name)
