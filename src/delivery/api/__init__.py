"""Delivery domain API package."""

from delivery.api.errors import register_error_handlers
from delivery.api.routes import basket_router, dish_router, order_router

__all__ = ["dish_router", "basket_router", "order_router", "register_error_handlers"]
