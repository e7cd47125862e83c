"""Dish aggregate: a menu entry that can be put in a basket and rated.

The catalogue is read-only to the basket and order components. The only
mutation after listing is the aggregate rating, which the rating component
sets through ``update_rating``.
"""

from datetime import UTC, datetime
from enum import Enum

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import Boolean, Float, String, Text

from delivery.catalogue.events import DishAggregateRatingUpdated, DishListed
from delivery.domain import delivery

# Aggregate rating of a dish nobody has rated yet
UNRATED = 0.0


class DishCategory(Enum):
    WOK = "Wok"
    PIZZA = "Pizza"
    SOUP = "Soup"
    DESSERT = "Dessert"
    DRINK = "Drink"


@delivery.aggregate
class Dish:
    name = String(required=True, max_length=255)
    description = Text()
    price = Float(required=True)
    image = String(max_length=500)
    vegetarian = Boolean(default=False)
    category = String(choices=DishCategory, required=True)
    rating = Float(default=UNRATED)

    @invariant.post
    def price_must_be_positive(self):
        if self.price is not None and self.price <= 0:
            raise ValidationError({"price": ["Dish price must be greater than zero"]})

    @invariant.post
    def rating_cannot_be_negative(self):
        if self.rating is not None and self.rating < 0:
            raise ValidationError({"rating": ["Dish rating cannot be negative"]})

    @classmethod
    def list_on_menu(cls, name, price, category, description=None, image=None, vegetarian=False):
        dish = cls(
            name=name,
            description=description,
            price=price,
            image=image,
            vegetarian=vegetarian,
            category=category,
            rating=UNRATED,
        )
        dish.raise_(
            DishListed(
                dish_id=str(dish.id),
                name=name,
                price=price,
                category=category,
            )
        )
        return dish

    def update_rating(self, rating):
        """Replace the aggregate rating with a value computed by the rating component."""
        previous = self.rating
        self.rating = rating

        self.raise_(
            DishAggregateRatingUpdated(
                dish_id=str(self.id),
                name=self.name,
                previous_rating=previous,
                rating=rating,
                updated_at=datetime.now(UTC),
            )
        )
