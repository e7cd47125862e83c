"""Named error conditions raised by the delivery domain.

Each error subclasses the Protean exception whose FastAPI mapping matches its
client-visible outcome: ``ObjectNotFoundError`` renders as 404 and
``ValidationError`` as 400. ``RatingNotAllowed`` gets its own 403 handler in
the application.
"""

from protean.exceptions import ObjectNotFoundError, ValidationError


# ---------------------------------------------------------------------------
# Not found
# ---------------------------------------------------------------------------
class DishNotFound(ObjectNotFoundError):
    def __init__(self, dish_id):
        self.dish_id = str(dish_id)
        super().__init__(f"Dish with ID {dish_id} not found.")


class BasketLineNotFound(ObjectNotFoundError):
    def __init__(self, dish_id):
        self.dish_id = str(dish_id)
        super().__init__(f"Dish with ID {dish_id} not found in the basket for the current user.")


class OrderNotFound(ObjectNotFoundError):
    """Raised for missing orders and for orders owned by someone else alike."""

    def __init__(self, order_id):
        self.order_id = str(order_id)
        super().__init__(f"Order with ID {order_id} not found.")


class NoOrdersFound(ObjectNotFoundError):
    def __init__(self):
        super().__init__("No orders found.")


# ---------------------------------------------------------------------------
# Rule violations
# ---------------------------------------------------------------------------
class InvalidDeliveryTime(ValidationError):
    def __init__(self, minimum_lead_minutes):
        super().__init__(
            {
                "delivery_time": [
                    f"Invalid delivery time. Delivery time must be more than "
                    f"current datetime by {minimum_lead_minutes} minutes"
                ]
            }
        )


class EmptyBasket(ValidationError):
    def __init__(self):
        super().__init__({"basket": ["The basket is empty. Cannot create an order."]})


class InvalidRatingScore(ValidationError):
    def __init__(self, score, low, high):
        self.score = score
        super().__init__({"rating_score": [f"Rating score must be between {low} and {high}, got {score}"]})


class RatingNotAllowed(ValidationError):
    """The user never ordered a dish with this name."""

    def __init__(self, dish_name):
        super().__init__({"rating": [f"You can only rate dishes you have ordered: {dish_name}"]})


class InvalidStatusTransition(ValidationError):
    def __init__(self, current, target):
        super().__init__(
            {"status": [f"Order is not in 'InProcess' status and cannot be marked as '{target}' (current: {current})"]}
        )
