"""Domain events for the Dish aggregate."""

from protean.fields import DateTime, Float, Identifier, String

from delivery.domain import delivery


@delivery.event(part_of="Dish")
class DishListed:
    """A dish was added to the menu."""

    __version__ = 1

    dish_id = Identifier(required=True)
    name = String(required=True)
    price = Float(required=True)
    category = String(required=True)


@delivery.event(part_of="Dish")
class DishAggregateRatingUpdated:
    """The dish's aggregate rating was recalculated after a user rating."""

    __version__ = 1

    dish_id = Identifier(required=True)
    name = String(required=True)
    previous_rating = Float(required=True)
    rating = Float(required=True)
    updated_at = DateTime(required=True)
