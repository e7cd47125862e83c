from datetime import UTC, datetime, timedelta

import pytest


@pytest.fixture(scope="session")
def _delivery_domain():
    """Initialize the delivery domain once per session."""
    from delivery.domain import delivery

    delivery.init()
    return delivery


@pytest.fixture(scope="session", autouse=True)
def setup_db(_delivery_domain):
    from delivery.utils.db import drop_db, setup_db

    setup_db(_delivery_domain)

    yield

    drop_db(_delivery_domain)


@pytest.fixture(autouse=True)
def run_around_tests(_delivery_domain):
    """Push domain context before each test, cleanup after."""
    ctx = _delivery_domain.domain_context()
    ctx.push()

    yield

    from protean import current_domain

    for _, provider in current_domain.providers.items():
        provider._data_reset()

    for _, broker in current_domain.brokers.items():
        broker._data_reset()

    current_domain.event_store.store._data_reset()
    ctx.pop()


# ---------------------------------------------------------------------------
# Shared fixtures
# ---------------------------------------------------------------------------
def _list_dish(name="Margherita", price=8.5, category="Pizza", **kwargs):
    from protean import current_domain

    from delivery.catalogue.menu import ListDish

    return current_domain.process(
        ListDish(name=name, price=price, category=category, **kwargs),
        asynchronous=False,
    )


@pytest.fixture()
def list_dish():
    """Put a dish on the menu through the command pipeline; returns its id."""
    return _list_dish


@pytest.fixture()
def margherita():
    return _list_dish()


@pytest.fixture()
def tom_yum():
    return _list_dish(name="Tom Yum", price=7.25, category="Soup")


@pytest.fixture()
def delivery_time():
    """Comfortably past the minimum delivery lead."""
    return datetime.now(UTC) + timedelta(hours=2)
