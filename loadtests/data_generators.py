"""Faker-based data generators for Locust load test scenarios.

Each generator produces values that pass the domain's validation rules
(delivery lead time, rating range) and match the field names expected by
the API's Pydantic request schemas.
"""

import random
import uuid
from datetime import UTC, datetime, timedelta

from faker import Faker

fake = Faker()


def unique_user_id() -> str:
    """Generate unique caller identities like 'user-lt-a1b2c3d4'."""
    return f"user-lt-{uuid.uuid4().hex[:8]}"


def user_headers(user_id: str) -> dict:
    return {"X-User-Id": user_id}


def delivery_time(min_minutes: int = 75, max_minutes: int = 24 * 60) -> str:
    """ISO timestamp safely past the 60-minute minimum delivery lead."""
    minutes = random.randint(min_minutes, max_minutes)
    return (datetime.now(UTC) + timedelta(minutes=minutes)).isoformat()


def order_data() -> dict:
    """Generate a CreateOrderRequest payload."""
    return {
        "deliveryTime": delivery_time(),
        "address": fake.street_address()[:500],
    }


def too_early_order_data() -> dict:
    """CreateOrderRequest payload the domain must reject (inside the lead time)."""
    return {
        "deliveryTime": (datetime.now(UTC) + timedelta(minutes=random.randint(1, 59))).isoformat(),
        "address": fake.street_address()[:500],
    }


def rating_score() -> int:
    return random.randint(1, 10)


def dish_picks(dish_ids: list[str], max_dishes: int = 3) -> list[str]:
    """A few dishes to put in a basket, possibly repeating one."""
    count = random.randint(1, max_dishes)
    return [random.choice(dish_ids) for _ in range(count)]
