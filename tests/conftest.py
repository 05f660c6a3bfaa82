"""Shared test fixtures: in-memory SQLite database with the cart schema."""

import os

# До импорта cart_totals: настройки читаются при импорте
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["ENVIRONMENT"] = "development"
os.environ.pop("CART_TOTAL_QUERY", None)

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import Session
from sqlalchemy.pool import StaticPool

from cart_totals.db.base import Base
from cart_totals.models import Order, OrderStatus, Product, User
from cart_totals.services.cart_service import add_item


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session(engine):
    with Session(bind=engine) as session:
        yield session


@pytest.fixture
def conn(session):
    """Connection of the test session, sees flushed rows."""
    return session.connection()


@pytest.fixture
def make_cart(session):
    """Creates a user with orders in the given statuses and cart items.

    items is a list of (price, quantity) pairs; each gets its own product.
    """
    def _make(user_id, statuses=(OrderStatus.active,), items=()):
        session.add(User(id=user_id, full_name=f"User {user_id}"))
        for status in statuses:
            session.add(Order(user_id=user_id, status=status))
        session.flush()
        products = []
        for price, quantity in items:
            product = Product(title=f"p{user_id}-{price}", price=price)
            session.add(product)
            session.flush()
            add_item(session, user_id=user_id, product_id=product.id, quantity=quantity)
            products.append(product)
        session.flush()
        return products

    return _make
