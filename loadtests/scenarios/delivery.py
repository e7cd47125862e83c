"""Delivery load test scenarios.

Stateful SequentialTaskSet journeys over the basket, order and rating
endpoints. The menu must be seeded first (``python src/manage.py seed-menu``).
"""

import random

from locust import HttpUser, SequentialTaskSet, between, task

from loadtests.data_generators import (
    dish_picks,
    order_data,
    rating_score,
    too_early_order_data,
    unique_user_id,
    user_headers,
)
from loadtests.helpers.response import extract_error_detail
from loadtests.helpers.state import BasketState, JourneyState


class MenuMixin:
    """Loads the menu once per simulated user."""

    dish_ids: list[str] = []

    def load_menu(self):
        with self.client.get("/api/dish", catch_response=True, name="GET /api/dish") as resp:
            if resp.status_code == 200 and resp.json():
                self.dish_ids = [dish["id"] for dish in resp.json()]
            else:
                resp.failure(f"Menu unavailable: {resp.status_code} — {extract_error_detail(resp)}")
                self.interrupt()


class BasketChurnJourney(MenuMixin, SequentialTaskSet):
    """Add dishes -> Decrement one -> Remove one -> Read basket.

    Models a user who fills a basket, changes their mind and never orders.
    """

    def on_start(self):
        self.state = BasketState(user_id=unique_user_id())
        self.load_menu()

    @task
    def add_dishes(self):
        for dish_id in dish_picks(self.dish_ids, max_dishes=4):
            with self.client.post(
                f"/api/basket/dish/{dish_id}",
                headers=user_headers(self.state.user_id),
                catch_response=True,
                name="POST /api/basket/dish/{id}",
            ) as resp:
                if resp.status_code == 201:
                    self.state.units[dish_id] = self.state.units.get(dish_id, 0) + 1
                else:
                    resp.failure(f"Add dish failed: {resp.status_code} — {extract_error_detail(resp)}")

    @task
    def decrement_dish(self):
        if not self.state.units:
            return
        dish_id = random.choice(list(self.state.units))
        with self.client.delete(
            f"/api/basket/dish/{dish_id}?increase=true",
            headers=user_headers(self.state.user_id),
            catch_response=True,
            name="DELETE /api/basket/dish/{id}?increase=true",
        ) as resp:
            if resp.status_code == 200:
                self.state.units[dish_id] -= 1
                if self.state.units[dish_id] == 0:
                    del self.state.units[dish_id]
            else:
                resp.failure(f"Decrement failed: {resp.status_code} — {extract_error_detail(resp)}")

    @task
    def remove_dish(self):
        if not self.state.units:
            return
        dish_id = next(iter(self.state.units))
        with self.client.delete(
            f"/api/basket/dish/{dish_id}",
            headers=user_headers(self.state.user_id),
            catch_response=True,
            name="DELETE /api/basket/dish/{id}",
        ) as resp:
            if resp.status_code == 200:
                del self.state.units[dish_id]
            else:
                resp.failure(f"Remove failed: {resp.status_code} — {extract_error_detail(resp)}")

    @task
    def read_basket(self):
        with self.client.get(
            "/api/basket",
            headers=user_headers(self.state.user_id),
            catch_response=True,
            name="GET /api/basket",
        ) as resp:
            if resp.status_code == 200:
                self.state.line_count = len(resp.json())
                if self.state.line_count != len(self.state.units):
                    resp.failure(f"Basket has {self.state.line_count} lines, expected {len(self.state.units)}")
            else:
                resp.failure(f"Read basket failed: {resp.status_code} — {extract_error_detail(resp)}")

    @task
    def done(self):
        self.interrupt()


class OrderAndRateJourney(MenuMixin, SequentialTaskSet):
    """Fill basket -> Order -> List orders -> Deliver -> Rate -> Re-rate.

    The happy path through every component: the rating steps exercise both
    the first-rating and the changed-rating aggregate updates.
    """

    def on_start(self):
        self.state = JourneyState(user_id=unique_user_id())
        self.load_menu()

    @task
    def fill_basket(self):
        for dish_id in dish_picks(self.dish_ids):
            with self.client.post(
                f"/api/basket/dish/{dish_id}",
                headers=user_headers(self.state.user_id),
                catch_response=True,
                name="POST /api/basket/dish/{id}",
            ) as resp:
                if resp.status_code == 201:
                    self.state.ordered_dish_ids.append(dish_id)
                else:
                    resp.failure(f"Add dish failed: {resp.status_code} — {extract_error_detail(resp)}")

    @task
    def place_order(self):
        with self.client.post(
            "/api/order",
            json=order_data(),
            headers=user_headers(self.state.user_id),
            catch_response=True,
            name="POST /api/order",
        ) as resp:
            if resp.status_code == 201:
                self.state.order_id = resp.json()["order_id"]
            else:
                resp.failure(f"Create order failed: {resp.status_code} — {extract_error_detail(resp)}")
                self.interrupt()

    @task
    def list_orders(self):
        self.client.get(
            "/api/order",
            headers=user_headers(self.state.user_id),
            name="GET /api/order",
        )

    @task
    def deliver(self):
        with self.client.post(
            f"/api/order/{self.state.order_id}/status",
            headers=user_headers(self.state.user_id),
            catch_response=True,
            name="POST /api/order/{id}/status",
        ) as resp:
            if resp.status_code == 200:
                self.state.current_status = resp.json()["new_status"]
            else:
                resp.failure(f"Advance status failed: {resp.status_code} — {extract_error_detail(resp)}")

    @task
    def rate_dish(self):
        self._rate(name="POST /api/dish/{id}/rating (first)")

    @task
    def change_rating(self):
        self._rate(name="POST /api/dish/{id}/rating (change)")

    @task
    def done(self):
        self.interrupt()

    def _rate(self, name):
        if not self.state.ordered_dish_ids:
            return
        dish_id = self.state.ordered_dish_ids[0]
        with self.client.post(
            f"/api/dish/{dish_id}/rating?ratingScore={rating_score()}",
            headers=user_headers(self.state.user_id),
            catch_response=True,
            name=name,
        ) as resp:
            if resp.status_code == 200:
                self.state.ratings_given += 1
            else:
                resp.failure(f"Rating failed: {resp.status_code} — {extract_error_detail(resp)}")


class RejectionJourney(MenuMixin, SequentialTaskSet):
    """Requests the domain must refuse, each with its named client error."""

    def on_start(self):
        self.user_id = unique_user_id()
        self.load_menu()

    @task
    def order_with_empty_basket(self):
        self._expect("post", "/api/order", 400, "POST /api/order (empty basket)", json=order_data())

    @task
    def order_too_early(self):
        self.client.post(
            f"/api/basket/dish/{self.dish_ids[0]}",
            headers=user_headers(self.user_id),
            name="POST /api/basket/dish/{id}",
        )
        self._expect("post", "/api/order", 400, "POST /api/order (too early)", json=too_early_order_data())

    @task
    def rate_without_purchase(self):
        dish_id = random.choice(self.dish_ids)
        self._expect("post", f"/api/dish/{dish_id}/rating?ratingScore=5", 403, "POST /api/dish/{id}/rating (403)")

    @task
    def done(self):
        self.interrupt()

    def _expect(self, method, path, status, name, **kwargs):
        with getattr(self.client, method)(
            path,
            headers=user_headers(self.user_id),
            catch_response=True,
            name=name,
            **kwargs,
        ) as resp:
            if resp.status_code == status:
                resp.success()
            else:
                resp.failure(f"Expected {status}, got {resp.status_code} — {extract_error_detail(resp)}")


class DeliveryUser(HttpUser):
    """Realistic mix: mostly ordering, some browsing, a few refused requests."""

    wait_time = between(0.5, 2.0)
    tasks = {
        OrderAndRateJourney: 6,
        BasketChurnJourney: 3,
        RejectionJourney: 1,
    }


class MenuBrowserUser(HttpUser):
    """Anonymous read traffic on the menu."""

    wait_time = between(0.2, 1.0)

    def on_start(self):
        resp = self.client.get("/api/dish", name="GET /api/dish")
        self.dish_ids = [dish["id"] for dish in resp.json()] if resp.status_code == 200 else []

    @task(3)
    def browse_menu(self):
        self.client.get("/api/dish", name="GET /api/dish")

    @task(1)
    def view_dish(self):
        if self.dish_ids:
            self.client.get(f"/api/dish/{random.choice(self.dish_ids)}", name="GET /api/dish/{id}")
