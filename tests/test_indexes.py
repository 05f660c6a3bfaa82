from decimal import Decimal

from cart_totals.db.indexes import (
    CART_TOTAL_INDEXES,
    create_cart_total_indexes,
    create_index_statements,
    drop_cart_total_indexes,
    existing_cart_total_indexes,
)
from cart_totals.models import OrderStatus
from cart_totals.queries.cart_total import LEGACY, OPTIMIZED, get_cart_total


def test_index_statements():
    assert create_index_statements() == [
        "CREATE INDEX IF NOT EXISTS idx_cart_items_user_id ON cart_items (user_id)",
        "CREATE INDEX IF NOT EXISTS idx_orders_user_id_status ON orders (user_id, status)",
        "CREATE INDEX IF NOT EXISTS idx_cart_items_product_id ON cart_items (product_id)",
    ]


def test_create_is_idempotent(conn):
    assert existing_cart_total_indexes(conn) == []
    create_cart_total_indexes(conn)
    create_cart_total_indexes(conn)
    assert existing_cart_total_indexes(conn) == list(CART_TOTAL_INDEXES)


def test_drop(conn):
    create_cart_total_indexes(conn)
    drop_cart_total_indexes(conn)
    assert existing_cart_total_indexes(conn) == []


def test_indexes_do_not_change_results(conn, make_cart):
    make_cart(1, statuses=(OrderStatus.active, OrderStatus.active), items=[(10, 2), (5, 1), (2.5, 4)])
    make_cart(2, statuses=(OrderStatus.reserved,), items=[(7, 1)])

    before = {(u, v): get_cart_total(conn, u, v) for u in (1, 2, 3) for v in (LEGACY, OPTIMIZED)}
    create_cart_total_indexes(conn)
    after = {(u, v): get_cart_total(conn, u, v) for u in (1, 2, 3) for v in (LEGACY, OPTIMIZED)}

    assert before == after
    assert after[(1, OPTIMIZED)] == Decimal("70")
    assert after[(2, OPTIMIZED)] is None
