"""Repository for the Order aggregate."""

from protean.utils.globals import current_domain

from delivery.domain import delivery
from delivery.order.order import Order, OrderLine
from delivery.utils.queries import fetch_all


@delivery.repository(part_of=Order)
class OrderRepository:
    def placed_by(self, user_id) -> list[Order]:
        """Every order of ``user_id``, oldest first."""
        queryset = self._dao.query.filter(user_id=str(user_id)).order_by("order_time")
        return list(fetch_all(queryset))

    def rated_lines_named(self, name) -> list[OrderLine]:
        """Order lines of any user carrying a rating for a dish called ``name``."""
        line_dao = current_domain.repository_for(OrderLine)._dao
        return [line for line in fetch_all(line_dao.query.filter(name=name)) if line.rating is not None]
