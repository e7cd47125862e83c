"""Delivery bounded context: Catalogue, Basket, Orders and Dish Ratings.

All four components live in one domain so that a command handler's unit of
work spans every aggregate it touches: placing an order snapshots and clears
the basket in the same transaction, and a rating updates the order line and
the dish aggregate together.
"""

from protean.domain import Domain

from delivery.utils.logging import configure_logging

configure_logging()

delivery = Domain(name="delivery")
