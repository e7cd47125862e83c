"""Pydantic request/response schemas for the Delivery API.

These are the external contract (anti-corruption layer), kept separate from
the Protean commands and aggregates they are translated into.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


# ---------------------------------------------------------------------------
# Dishes
# ---------------------------------------------------------------------------
class DishResponse(BaseModel):
    id: str
    name: str
    description: str | None = None
    price: float
    image: str | None = None
    vegetarian: bool
    category: str
    rating: float


# ---------------------------------------------------------------------------
# Basket
# ---------------------------------------------------------------------------
class BasketLineResponse(BaseModel):
    id: str
    name: str
    price: float
    total_price: float
    amount: int
    image: str | None = None


# ---------------------------------------------------------------------------
# Orders
# ---------------------------------------------------------------------------
class CreateOrderRequest(BaseModel):
    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "examples": [
                {
                    "deliveryTime": "2030-01-01T18:30:00Z",
                    "address": "12 Baker Street",
                }
            ]
        },
    )

    delivery_time: datetime = Field(alias="deliveryTime")
    address: str = Field(min_length=1, max_length=500)


class OrderLineResponse(BaseModel):
    id: str
    name: str
    price: float
    total_price: float
    amount: int
    image: str | None = None
    rating: int | None = None


class OrderInfoResponse(BaseModel):
    id: str
    delivery_time: datetime
    order_time: datetime
    status: str
    price: float


class OrderResponse(OrderInfoResponse):
    address: str
    dishes: list[OrderLineResponse]


class OrderIdResponse(BaseModel):
    message: str = "Order created successfully."
    order_id: str


class OrderStatusResponse(BaseModel):
    message: str = "Order status updated to 'Delivered'."
    order_id: str
    new_status: str


# ---------------------------------------------------------------------------
# Ratings
# ---------------------------------------------------------------------------
class RatingResponse(BaseModel):
    dish_id: str
    rating: float


class StatusResponse(BaseModel):
    status: str = "ok"
