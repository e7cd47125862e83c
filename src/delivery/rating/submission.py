"""RateDish: record or change a user's rating of a dish they ordered.

One live rating per (user, dish name). The first rating is stored on the
oldest matching order line together with the dish's aggregate rating at that
moment; later submissions overwrite that same line's score.
"""

import structlog
from protean import handle
from protean.fields import Identifier, Integer
from protean.utils.globals import current_domain

from delivery.catalogue.dish import Dish
from delivery.catalogue.menu import get_dish
from delivery.domain import delivery
from delivery.errors import InvalidRatingScore, RatingNotAllowed
from delivery.order.order import Order
from delivery.rating.aggregation import (
    MAX_SCORE,
    MIN_SCORE,
    average_with_first_rating,
    recomputed_average,
    score_in_range,
)
from delivery.rating.eligibility import purchased_lines

logger = structlog.get_logger(__name__)


@delivery.command(part_of="Dish")
class RateDish:
    user_id = Identifier(required=True)
    dish_id = Identifier(required=True)
    score = Integer(required=True)


@delivery.command_handler(part_of=Dish)
class RateDishHandler:
    @handle(RateDish)
    def rate_dish(self, command):
        if not score_in_range(command.score):
            raise InvalidRatingScore(command.score, MIN_SCORE, MAX_SCORE)

        dish = get_dish(command.dish_id)

        purchases = purchased_lines(command.user_id, dish.name)
        if not purchases:
            raise RatingNotAllowed(dish.name)

        rated = next(((order, line) for order, line in purchases if line.is_rated), None)
        if rated is None:
            order, line = purchases[0]
            self._record_first_rating(dish, order, line, command.score)
        else:
            order, line = rated
            self._change_rating(dish, order, line, command.score)

        current_domain.repository_for(Order).add(order)
        current_domain.repository_for(Dish).add(dish)
        return dish.rating

    def _record_first_rating(self, dish, order, line, score):
        prior = dish.rating
        order.record_first_rating(line.id, score, initial_rating=prior)
        dish.update_rating(average_with_first_rating(prior, score))

        logger.info(
            "Dish rated",
            user_id=str(order.user_id),
            dish=dish.name,
            score=score,
            previous_rating=prior,
            rating=dish.rating,
        )

    def _change_rating(self, dish, order, line, score):
        # Read before the line changes: the recorded scores must still hold the old one
        recorded = [
            rated_line.rating
            for rated_line in current_domain.repository_for(Order).rated_lines_named(dish.name)
        ]
        old_score = order.change_rating(line.id, score)
        dish.update_rating(recomputed_average(recorded, old_score, score))

        logger.info(
            "Dish rating changed",
            user_id=str(order.user_id),
            dish=dish.name,
            previous_score=old_score,
            score=score,
            rating=dish.rating,
            rating_count=len(recorded),
        )
