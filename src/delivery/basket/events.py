"""Domain events for the Basket aggregate."""

from protean.fields import Float, Identifier, Integer, String

from delivery.domain import delivery


@delivery.event(part_of="Basket")
class DishAddedToBasket:
    """One unit of a dish was added to the user's basket."""

    __version__ = 1

    user_id = Identifier(required=True)
    line_id = Identifier(required=True)
    dish_id = Identifier(required=True)
    name = String(required=True)
    quantity = Integer(required=True)
    total_price = Float(required=True)


@delivery.event(part_of="Basket")
class BasketLineDecremented:
    """A basket line lost one unit but still holds at least one."""

    __version__ = 1

    user_id = Identifier(required=True)
    line_id = Identifier(required=True)
    name = String(required=True)
    quantity = Integer(required=True)
    total_price = Float(required=True)


@delivery.event(part_of="Basket")
class BasketLineRemoved:
    """A basket line was removed entirely."""

    __version__ = 1

    user_id = Identifier(required=True)
    line_id = Identifier(required=True)
    name = String(required=True)


@delivery.event(part_of="Basket")
class BasketCleared:
    """Every line of the basket moved into an order."""

    __version__ = 1

    user_id = Identifier(required=True)
    order_id = Identifier(required=True)
    line_count = Integer(required=True)
