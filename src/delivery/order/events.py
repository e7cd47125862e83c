"""Domain events for the Order aggregate."""

from protean.fields import DateTime, Float, Identifier, Integer, String, Text

from delivery.domain import delivery


@delivery.event(part_of="Order")
class OrderPlaced:
    """A basket was converted into an order."""

    __version__ = 1

    order_id = Identifier(required=True)
    user_id = Identifier(required=True)
    delivery_time = DateTime(required=True)
    order_time = DateTime(required=True)
    price = Float(required=True)
    address = String(required=True)
    lines = Text(required=True)  # JSON: list of {name, price, quantity, image}


@delivery.event(part_of="Order")
class OrderDelivered:
    """The order left InProcess and reached its terminal Delivered status."""

    __version__ = 1

    order_id = Identifier(required=True)
    user_id = Identifier(required=True)
    delivered_at = DateTime(required=True)


@delivery.event(part_of="Order")
class DishRated:
    """A user rated a dish for the first time."""

    __version__ = 1

    order_id = Identifier(required=True)
    line_id = Identifier(required=True)
    user_id = Identifier(required=True)
    name = String(required=True)
    score = Integer(required=True)
    initial_rating = Float(required=True)


@delivery.event(part_of="Order")
class DishRatingChanged:
    """A user replaced their earlier rating of a dish."""

    __version__ = 1

    order_id = Identifier(required=True)
    line_id = Identifier(required=True)
    user_id = Identifier(required=True)
    name = String(required=True)
    previous_score = Integer(required=True)
    score = Integer(required=True)
