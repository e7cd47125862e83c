"""Basket aggregate: the per-user collection of dishes waiting to be ordered.

There is exactly one basket per user; the user id is the basket's identity,
so concurrent writers to the same basket collide on its version instead of
creating duplicate lines.

Lines are matched by dish *name*, not by dish id: two catalogue entries that
share a name end up on the same basket line. Unit price is copied from the
dish when the line is created and is not re-synced afterwards.
"""

import math

from protean import atomic_change, invariant
from protean.exceptions import ValidationError
from protean.fields import Float, HasMany, Identifier, Integer, String

from delivery.basket.events import (
    BasketCleared,
    BasketLineDecremented,
    BasketLineRemoved,
    DishAddedToBasket,
)
from delivery.domain import delivery
from delivery.errors import BasketLineNotFound


@delivery.entity(part_of="Basket")
class BasketLine:
    dish_id = Identifier(required=True)
    name = String(required=True, max_length=255)
    price = Float(required=True)
    quantity = Integer(required=True, min_value=1)
    total_price = Float(required=True)
    image = String(max_length=500)

    def snapshot(self):
        return {
            "name": self.name,
            "price": self.price,
            "quantity": self.quantity,
            "image": self.image,
        }


@delivery.aggregate
class Basket:
    user_id = Identifier(identifier=True, required=True)
    lines = HasMany(BasketLine)

    @invariant.post
    def line_totals_match_quantities(self):
        for line in self.lines:
            if not math.isclose(line.total_price, line.price * line.quantity):
                raise ValidationError({"lines": [f"Total of '{line.name}' does not match price × quantity"]})

    # -------------------------------------------------------------------
    # Factory
    # -------------------------------------------------------------------
    @classmethod
    def open_for(cls, user_id):
        return cls(user_id=user_id)

    # -------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------
    def line_named(self, name):
        return next((line for line in self.lines if line.name == name), None)

    @property
    def is_empty(self):
        return not self.lines

    @property
    def total_price(self):
        return sum(line.total_price for line in self.lines)

    # -------------------------------------------------------------------
    # Line management
    # -------------------------------------------------------------------
    def add_dish(self, dish):
        """Add one unit of ``dish``, merging into an existing line of the same name."""
        line = self.line_named(dish.name)

        if line:
            with atomic_change(self):
                line.quantity = line.quantity + 1
                line.total_price = line.price * line.quantity
        else:
            line = BasketLine(
                dish_id=dish.id,
                name=dish.name,
                price=dish.price,
                quantity=1,
                total_price=dish.price,
                image=dish.image,
            )
            self.add_lines(line)

        self.raise_(
            DishAddedToBasket(
                user_id=str(self.user_id),
                line_id=str(line.id),
                dish_id=str(dish.id),
                name=line.name,
                quantity=line.quantity,
                total_price=line.total_price,
            )
        )

    def decrement_dish(self, dish):
        """Take one unit away; a line holding a single unit is removed instead."""
        line = self._line_for(dish)

        if line.quantity == 1:
            self._remove_line(line)
            return

        with atomic_change(self):
            line.quantity = line.quantity - 1
            line.total_price = line.price * line.quantity

        self.raise_(
            BasketLineDecremented(
                user_id=str(self.user_id),
                line_id=str(line.id),
                name=line.name,
                quantity=line.quantity,
                total_price=line.total_price,
            )
        )

    def remove_dish(self, dish):
        """Remove the line for ``dish`` whatever its quantity."""
        self._remove_line(self._line_for(dish))

    def clear_into(self, order_id):
        """Drop every line after they have been copied into order ``order_id``."""
        line_count = len(self.lines)
        for line in list(self.lines):
            self.remove_lines(line)

        self.raise_(
            BasketCleared(
                user_id=str(self.user_id),
                order_id=str(order_id),
                line_count=line_count,
            )
        )

    def _line_for(self, dish):
        line = self.line_named(dish.name)
        if line is None:
            raise BasketLineNotFound(dish.id)
        return line

    def _remove_line(self, line):
        self.remove_lines(line)
        self.raise_(
            BasketLineRemoved(
                user_id=str(self.user_id),
                line_id=str(line.id),
                name=line.name,
            )
        )
