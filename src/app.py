"""Delivery FastAPI application.

Web server for the dish catalogue, baskets, orders and dish ratings. Commands
are processed synchronously inside each request.

Usage:
    uvicorn app:app --app-dir src --host 0.0.0.0 --port 8000 --reload
"""

# ---------------------------------------------------------------------------
# Domain initialization
# ---------------------------------------------------------------------------
# Initialized at module level so uvicorn workers share it.
# PROTEAN_ENV selects the config overlay from domain.toml.
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from delivery.domain import delivery
from delivery.utils.logging import clear_context

delivery.init()

# ---------------------------------------------------------------------------
# FastAPI app
# ---------------------------------------------------------------------------
app = FastAPI(
    title="Delivery API",
    description="Food delivery: dishes, basket, orders and dish ratings",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def domain_context_middleware(request: Request, call_next):
    """Run every request inside the delivery domain context."""
    with delivery.domain_context():
        try:
            response = await call_next(request)
        finally:
            clear_context()
    return response


# ---------------------------------------------------------------------------
# Routers and error mapping
# ---------------------------------------------------------------------------
from delivery.api import (  # noqa: E402
    basket_router,
    dish_router,
    order_router,
    register_error_handlers,
)

app.include_router(dish_router)
app.include_router(basket_router)
app.include_router(order_router)
register_error_handlers(app)


# ---------------------------------------------------------------------------
# Health
# ---------------------------------------------------------------------------
@app.get("/health")
async def health():
    return JSONResponse(content={"status": "ok", "domain": delivery.name})
