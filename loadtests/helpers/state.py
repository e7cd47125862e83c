"""Per-user state tracking for Locust load test scenarios.

Each Locust user instance maintains its own state: no cross-user sharing.
State tracks entity IDs returned by the API so follow-up operations can
reference them.
"""

from dataclasses import dataclass, field


@dataclass
class BasketState:
    """Tracks a simulated user's basket."""

    user_id: str | None = None
    units: dict[str, int] = field(default_factory=dict)  # dish id -> units in the basket
    line_count: int = 0


@dataclass
class JourneyState:
    """Tracks state for the basket → order → rating journey."""

    user_id: str | None = None
    ordered_dish_ids: list[str] = field(default_factory=list)
    order_id: str | None = None
    current_status: str = "InProcess"
    ratings_given: int = 0
