"""FastAPI endpoints for the Delivery domain.

Writes go through commands processed synchronously; reads call the query
functions directly. Every endpoint except the dish reads requires a caller
identity.
"""

from fastapi import APIRouter, Depends, Query
from protean.utils.globals import current_domain

from delivery.api.identity import current_user_id
from delivery.api.schemas import (
    BasketLineResponse,
    CreateOrderRequest,
    DishResponse,
    OrderIdResponse,
    OrderInfoResponse,
    OrderLineResponse,
    OrderResponse,
    OrderStatusResponse,
    RatingResponse,
    StatusResponse,
)
from delivery.basket.items import AddDishToBasket, ModifyBasket, get_basket
from delivery.catalogue.menu import get_dish, list_dishes
from delivery.order.placement import CreateOrder
from delivery.order.progression import AdvanceOrderStatus
from delivery.order.queries import get_order, list_orders
from delivery.rating.eligibility import check_eligibility
from delivery.rating.submission import RateDish

dish_router = APIRouter(prefix="/api/dish", tags=["dish"])
basket_router = APIRouter(prefix="/api/basket", tags=["basket"])
order_router = APIRouter(prefix="/api/order", tags=["order"])


def _dish_response(dish) -> DishResponse:
    return DishResponse(
        id=str(dish.id),
        name=dish.name,
        description=dish.description,
        price=dish.price,
        image=dish.image,
        vegetarian=bool(dish.vegetarian),
        category=dish.category,
        rating=dish.rating,
    )


def _basket_line_response(line) -> BasketLineResponse:
    return BasketLineResponse(
        id=str(line.id),
        name=line.name,
        price=line.price,
        total_price=line.total_price,
        amount=line.quantity,
        image=line.image,
    )


def _order_response(order) -> OrderResponse:
    return OrderResponse(
        id=str(order.id),
        delivery_time=order.delivery_time,
        order_time=order.order_time,
        status=order.status,
        price=order.price,
        address=order.address,
        dishes=[
            OrderLineResponse(
                id=str(line.id),
                name=line.name,
                price=line.price,
                total_price=line.total_price,
                amount=line.quantity,
                image=line.image,
                rating=line.rating,
            )
            for line in order.lines
        ],
    )


# --- Dish endpoints ---


@dish_router.get("", response_model=list[DishResponse])
async def get_all_dishes() -> list[DishResponse]:
    return [_dish_response(dish) for dish in list_dishes()]


@dish_router.get("/{dish_id}", response_model=DishResponse)
async def get_dish_by_id(dish_id: str) -> DishResponse:
    return _dish_response(get_dish(dish_id))


@dish_router.get("/{dish_id}/rating/check", response_model=bool)
async def check_rating_eligibility(dish_id: str, user_id: str = Depends(current_user_id)) -> bool:
    return check_eligibility(user_id, dish_id)


@dish_router.post("/{dish_id}/rating", response_model=RatingResponse)
async def rate_dish(
    dish_id: str,
    rating_score: int = Query(alias="ratingScore"),
    user_id: str = Depends(current_user_id),
) -> RatingResponse:
    command = RateDish(user_id=user_id, dish_id=dish_id, score=rating_score)
    rating = current_domain.process(command, asynchronous=False)
    return RatingResponse(dish_id=dish_id, rating=rating)


# --- Basket endpoints ---


@basket_router.get("", response_model=list[BasketLineResponse])
async def get_user_basket(user_id: str = Depends(current_user_id)) -> list[BasketLineResponse]:
    return [_basket_line_response(line) for line in get_basket(user_id)]


@basket_router.post("/dish/{dish_id}", status_code=201, response_model=StatusResponse)
async def add_dish_to_basket(dish_id: str, user_id: str = Depends(current_user_id)) -> StatusResponse:
    current_domain.process(AddDishToBasket(user_id=user_id, dish_id=dish_id), asynchronous=False)
    return StatusResponse()


@basket_router.delete("/dish/{dish_id}", response_model=StatusResponse)
async def modify_basket(
    dish_id: str,
    increase: bool = Query(default=False, description="When true, take away one unit instead of the whole line"),
    user_id: str = Depends(current_user_id),
) -> StatusResponse:
    command = ModifyBasket(user_id=user_id, dish_id=dish_id, decrement=increase)
    current_domain.process(command, asynchronous=False)
    return StatusResponse()


# --- Order endpoints ---


@order_router.get("", response_model=list[OrderInfoResponse])
async def get_user_orders(user_id: str = Depends(current_user_id)) -> list[OrderInfoResponse]:
    return [
        OrderInfoResponse(
            id=summary.order_id,
            delivery_time=summary.delivery_time,
            order_time=summary.order_time,
            status=summary.status,
            price=summary.price,
        )
        for summary in list_orders(user_id)
    ]


@order_router.get("/{order_id}", response_model=OrderResponse)
async def get_order_by_id(order_id: str, user_id: str = Depends(current_user_id)) -> OrderResponse:
    return _order_response(get_order(user_id, order_id))


@order_router.post("", status_code=201, response_model=OrderIdResponse)
async def create_order(body: CreateOrderRequest, user_id: str = Depends(current_user_id)) -> OrderIdResponse:
    command = CreateOrder(user_id=user_id, delivery_time=body.delivery_time, address=body.address)
    order_id = current_domain.process(command, asynchronous=False)
    return OrderIdResponse(order_id=order_id)


@order_router.post("/{order_id}/status", response_model=OrderStatusResponse)
async def advance_order_status(order_id: str, user_id: str = Depends(current_user_id)) -> OrderStatusResponse:
    status = current_domain.process(AdvanceOrderStatus(order_id=order_id), asynchronous=False)
    return OrderStatusResponse(order_id=order_id, new_status=status)
