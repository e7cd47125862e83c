"""Order aggregate: an immutable snapshot of a basket plus its delivery status.

Lines are copied from the basket at placement time (name, unit price,
quantity, image) and never follow later catalogue changes. The total price is
fixed at placement as well.

State Machine (2 states):
    IN_PROCESS → DELIVERED
    DELIVERED → (terminal)

Each line also carries the owner's rating of that dish, if any, and the
dish's aggregate rating as it stood just before that rating was first given.
"""

import json
from datetime import UTC, datetime, timedelta
from enum import Enum

from protean.exceptions import ValidationError
from protean.fields import DateTime, Float, HasMany, Identifier, Integer, String

from delivery.domain import delivery
from delivery.errors import EmptyBasket, InvalidDeliveryTime, InvalidStatusTransition
from delivery.order.events import DishRated, DishRatingChanged, OrderDelivered, OrderPlaced

# Delivery must be requested strictly later than this from the moment of ordering
MINIMUM_DELIVERY_LEAD = timedelta(minutes=60)


class OrderStatus(Enum):
    IN_PROCESS = "InProcess"
    DELIVERED = "Delivered"


_VALID_TRANSITIONS = {
    OrderStatus.IN_PROCESS: {OrderStatus.DELIVERED},
    OrderStatus.DELIVERED: set(),  # Terminal
}


def as_utc(moment):
    """Treat naive datetimes as UTC."""
    if moment.tzinfo is None:
        return moment.replace(tzinfo=UTC)
    return moment.astimezone(UTC)


def check_delivery_time(delivery_time, now=None):
    now = now or datetime.now(UTC)
    if as_utc(delivery_time) <= now + MINIMUM_DELIVERY_LEAD:
        raise InvalidDeliveryTime(int(MINIMUM_DELIVERY_LEAD.total_seconds() // 60))


# ---------------------------------------------------------------------------
# Entities
# ---------------------------------------------------------------------------
@delivery.entity(part_of="Order")
class OrderLine:
    """A dish as it was ordered."""

    name = String(required=True, max_length=255)
    price = Float(required=True)
    quantity = Integer(required=True, min_value=1)
    image = String(max_length=500)
    rating = Integer()
    initial_rating = Float()

    @property
    def total_price(self):
        return self.price * self.quantity

    @property
    def is_rated(self):
        return self.rating is not None


# ---------------------------------------------------------------------------
# Aggregate Root
# ---------------------------------------------------------------------------
@delivery.aggregate
class Order:
    user_id = Identifier(required=True)
    delivery_time = DateTime(required=True)
    order_time = DateTime(required=True)
    status = String(choices=OrderStatus, default=OrderStatus.IN_PROCESS.value)
    price = Float(required=True)
    address = String(required=True, max_length=500)
    lines = HasMany(OrderLine)

    # -------------------------------------------------------------------
    # Factory
    # -------------------------------------------------------------------
    @classmethod
    def place(cls, user_id, delivery_time, address, basket_lines, now=None):
        """Create an InProcess order from snapshots of the user's basket lines.

        Args:
            basket_lines: List of dicts with name, price, quantity, image.
        """
        now = now or datetime.now(UTC)
        check_delivery_time(delivery_time, now=now)
        if not basket_lines:
            raise EmptyBasket()
        if not address or not address.strip():
            raise ValidationError({"address": ["Delivery address is required"]})

        price = sum(line["price"] * line["quantity"] for line in basket_lines)

        order = cls(
            user_id=user_id,
            delivery_time=as_utc(delivery_time),
            order_time=now,
            status=OrderStatus.IN_PROCESS.value,
            price=price,
            address=address,
        )
        for line in basket_lines:
            order.add_lines(OrderLine(**line))

        order.raise_(
            OrderPlaced(
                order_id=str(order.id),
                user_id=str(user_id),
                delivery_time=order.delivery_time,
                order_time=now,
                price=price,
                address=address,
                lines=json.dumps(basket_lines),
            )
        )
        return order

    # -------------------------------------------------------------------
    # Status progression
    # -------------------------------------------------------------------
    def _assert_can_transition(self, target_status):
        current = OrderStatus(self.status)
        if target_status not in _VALID_TRANSITIONS.get(current, set()):
            raise InvalidStatusTransition(current.value, target_status.value)

    def mark_delivered(self):
        self._assert_can_transition(OrderStatus.DELIVERED)

        self.status = OrderStatus.DELIVERED.value
        self.raise_(
            OrderDelivered(
                order_id=str(self.id),
                user_id=str(self.user_id),
                delivered_at=datetime.now(UTC),
            )
        )

    # -------------------------------------------------------------------
    # Ratings
    # -------------------------------------------------------------------
    def lines_named(self, name):
        return [line for line in self.lines if line.name == name]

    def _line(self, line_id):
        line = next((line for line in self.lines if str(line.id) == str(line_id)), None)
        if line is None:
            raise ValidationError({"line_id": ["Line not found in order"]})
        return line

    def record_first_rating(self, line_id, score, initial_rating):
        """Attach the owner's first rating of a dish to one of its lines."""
        line = self._line(line_id)
        if line.is_rated:
            raise ValidationError({"rating": [f"'{line.name}' has already been rated on this order"]})

        line.rating = score
        line.initial_rating = initial_rating

        self.raise_(
            DishRated(
                order_id=str(self.id),
                line_id=str(line.id),
                user_id=str(self.user_id),
                name=line.name,
                score=score,
                initial_rating=initial_rating,
            )
        )

    def change_rating(self, line_id, score):
        """Overwrite an existing rating. Returns the score it replaced."""
        line = self._line(line_id)
        if not line.is_rated:
            raise ValidationError({"rating": [f"'{line.name}' has not been rated on this order"]})

        previous = line.rating
        line.rating = score

        self.raise_(
            DishRatingChanged(
                order_id=str(self.id),
                line_id=str(line.id),
                user_id=str(self.user_id),
                name=line.name,
                previous_score=previous,
                score=score,
            )
        )
        return previous
