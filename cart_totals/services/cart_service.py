# cart_totals/services/cart_service.py
# Добавление товара в корзину с копированием цены из products.
# Оптимизированный запрос суммы корзины не читает products, поэтому
# cart_items.price должен совпадать с products.price на момент добавления.

import logging

from sqlalchemy.orm import Session

from cart_totals.models.cart import CartItem
from cart_totals.models.product import Product

logger = logging.getLogger(__name__)


def add_item(session: Session, *, user_id: int, product_id: int, quantity: int = 1) -> CartItem:
    """Создаёт CartItem с ценой товара. ValueError если товара нет или quantity <= 0."""
    qnty = int(quantity)
    if qnty <= 0:
        raise ValueError("quantity must be > 0")
    product = session.get(Product, product_id)
    if product is None:
        raise ValueError(f"product {product_id} not found")

    item = CartItem(
        user_id=user_id,
        product_id=product.id,
        price=product.price,
        quantity=qnty,
    )
    session.add(item)
    session.flush()
    logger.debug(f"Cart item {item.id} added: user={user_id} product={product_id} qty={qnty} price={product.price}")
    return item
