# cart_totals/db/seed.py
# Демо-данные для сравнения планов: у пользователя 18 позиций в корзине
# и 4 активных заказа, что даёт 72 строки после JOIN по user_id.
# Дополнительно: один неактивный заказ и второй пользователь с корзиной,
# чтобы фильтры по статусу и user_id действительно что-то отсекали.

import logging
from typing import Dict

from sqlalchemy import text
from sqlalchemy.orm import Session

from cart_totals.models.order import Order, OrderStatus
from cart_totals.models.product import Product
from cart_totals.models.user import User
from cart_totals.services.cart_service import add_item

logger = logging.getLogger(__name__)


def seed_demo_data(session: Session, *, user_id: int = 1, active_orders: int = 4,
                   cart_items: int = 18) -> Dict[str, int]:
    """
    Заполняет БД демо-данными. ValueError, если cart_items < 1, active_orders < 0
    или пользователи user_id / user_id + 1 уже существуют (повторный запуск).
    """
    if cart_items < 1:
        raise ValueError("cart_items must be >= 1")
    if active_orders < 0:
        raise ValueError("active_orders must be >= 0")
    existing = [uid for uid in (user_id, user_id + 1) if session.get(User, uid) is not None]
    if existing:
        raise ValueError(f"users {existing} already exist, demo data is seeded once per database")

    user = User(id=user_id, full_name="Demo User")
    other = User(id=user_id + 1, full_name="Other User")
    session.add_all([user, other])
    session.flush()
    # Явные id не двигают serial-последовательность Postgres
    if session.get_bind().dialect.name == "postgresql":
        session.execute(text(
            "SELECT setval(pg_get_serial_sequence('users', 'id'), (SELECT MAX(id) FROM users))"
        ))

    # Цены кратны 0.25, чтобы суммы во float были точными
    products = [
        Product(title=f"Product {i}", price=5.0 + i * 2.25)
        for i in range(1, cart_items + 1)
    ]
    session.add_all(products)
    session.flush()

    for _ in range(active_orders):
        session.add(Order(user_id=user.id, status=OrderStatus.active))
    session.add(Order(user_id=user.id, status=OrderStatus.delivered))
    session.add(Order(user_id=other.id, status=OrderStatus.active))
    session.flush()

    for i, product in enumerate(products):
        add_item(session, user_id=user.id, product_id=product.id, quantity=i % 3 + 1)
    add_item(session, user_id=other.id, product_id=products[0].id, quantity=7)
    session.flush()

    logger.info(
        f"🌱 Seeded user {user.id}: {cart_items} cart items, {active_orders} active orders "
        f"({cart_items * active_orders} joined rows)"
    )
    return {
        "user_id": user.id,
        "other_user_id": other.id,
        "cart_items": cart_items,
        "active_orders": active_orders,
    }
