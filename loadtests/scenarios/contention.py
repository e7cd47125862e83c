"""Contention scenario: many users writing to the same basket and dish.

All simulated users share one caller identity, so concurrent adds collide on
the basket's version and concurrent ratings on the dish's version. Conflicts
must surface as 409 and never as lost or duplicated basket lines.
"""

import random

from locust import HttpUser, constant_pacing, task

from loadtests.data_generators import order_data, rating_score, user_headers
from loadtests.helpers.response import extract_error_detail

SHARED_USER = "user-lt-shared"


class SharedBasketUser(HttpUser):
    wait_time = constant_pacing(0.1)  # ~10 requests/sec per user

    def on_start(self):
        resp = self.client.get("/api/dish", name="GET /api/dish")
        self.dish_ids = [dish["id"] for dish in resp.json()] if resp.status_code == 200 else []

    @task(6)
    def add_to_shared_basket(self):
        if not self.dish_ids:
            return
        with self.client.post(
            f"/api/basket/dish/{random.choice(self.dish_ids)}",
            headers=user_headers(SHARED_USER),
            catch_response=True,
            name="[CONTENTION] POST /api/basket/dish/{id}",
        ) as resp:
            if resp.status_code in (201, 409):
                resp.success()
            else:
                resp.failure(f"Unexpected: {resp.status_code} — {extract_error_detail(resp)}")

    @task(1)
    def order_shared_basket(self):
        with self.client.post(
            "/api/order",
            json=order_data(),
            headers=user_headers(SHARED_USER),
            catch_response=True,
            name="[CONTENTION] POST /api/order",
        ) as resp:
            # Another user may have just emptied the basket
            if resp.status_code in (201, 400, 409):
                resp.success()
            else:
                resp.failure(f"Unexpected: {resp.status_code} — {extract_error_detail(resp)}")

    @task(2)
    def rate_shared_dish(self):
        if not self.dish_ids:
            return
        with self.client.post(
            f"/api/dish/{self.dish_ids[0]}/rating?ratingScore={rating_score()}",
            headers=user_headers(SHARED_USER),
            catch_response=True,
            name="[CONTENTION] POST /api/dish/{id}/rating",
        ) as resp:
            if resp.status_code in (200, 403, 409):
                resp.success()
            else:
                resp.failure(f"Unexpected: {resp.status_code} — {extract_error_detail(resp)}")
