from decimal import Decimal

import pytest

from cart_totals.core.config import settings
from cart_totals.models import OrderStatus
from cart_totals.queries.cart_total import LEGACY, OPTIMIZED, get_cart_total


@pytest.mark.parametrize("variant", [LEGACY, OPTIMIZED])
def test_single_active_order(conn, make_cart, variant):
    make_cart(1, items=[(10, 2), (5, 1)])
    assert get_cart_total(conn, 1, variant) == Decimal("25")


@pytest.mark.parametrize("variant", [LEGACY, OPTIMIZED])
def test_no_active_orders_is_null(conn, make_cart, variant):
    make_cart(1, statuses=(OrderStatus.delivered, OrderStatus.cancelled), items=[(10, 2)])
    assert get_cart_total(conn, 1, variant) is None


@pytest.mark.parametrize("variant", [LEGACY, OPTIMIZED])
def test_unknown_user_is_null(conn, make_cart, variant):
    make_cart(1, items=[(10, 2)])
    assert get_cart_total(conn, 999, variant) is None


@pytest.mark.parametrize("variant", [LEGACY, OPTIMIZED])
def test_other_users_items_are_excluded(conn, make_cart, variant):
    make_cart(1, items=[(10, 2)])
    make_cart(2, items=[(100, 3)])
    assert get_cart_total(conn, 1, variant) == Decimal("20")
    assert get_cart_total(conn, 2, variant) == Decimal("300")


def test_multiple_active_orders_overcount_identically(conn, make_cart):
    # JOIN только по user_id: каждая позиция считается по разу на активный заказ
    make_cart(
        1,
        statuses=(OrderStatus.active, OrderStatus.active, OrderStatus.active, OrderStatus.delivered),
        items=[(10, 2), (5, 1)],
    )
    legacy = get_cart_total(conn, 1, LEGACY)
    optimized = get_cart_total(conn, 1, OPTIMIZED)
    assert legacy == optimized == Decimal("75")


def test_price_change_after_adding_only_affects_legacy(session, conn, make_cart):
    (product,) = make_cart(1, items=[(10, 2)])
    product.price = 12
    session.flush()
    assert get_cart_total(conn, 1, LEGACY) == Decimal("24")
    assert get_cart_total(conn, 1, OPTIMIZED) == Decimal("20")


def test_total_is_quantized_to_cents(conn, make_cart):
    make_cart(1, items=[(0.1, 3)])
    assert get_cart_total(conn, 1, OPTIMIZED) == Decimal("0.30")


def test_default_variant_comes_from_settings(session, conn, make_cart, monkeypatch):
    (product,) = make_cart(1, items=[(10, 1)])
    product.price = 11
    session.flush()
    monkeypatch.setattr(settings, "CART_TOTAL_QUERY", "legacy")
    assert get_cart_total(conn, 1) == Decimal("11")
    monkeypatch.setattr(settings, "CART_TOTAL_QUERY", "optimized")
    assert get_cart_total(conn, 1) == Decimal("10")


@pytest.mark.parametrize("user_id", ["1", 1.0, None, True])
def test_rejects_non_int_user_id(conn, user_id):
    with pytest.raises(ValueError, match="user_id must be int"):
        get_cart_total(conn, user_id, OPTIMIZED)


@pytest.mark.parametrize("variant", ["materialized", ""])
def test_rejects_unknown_variant(conn, variant):
    with pytest.raises(ValueError, match="Unknown cart total variant"):
        get_cart_total(conn, 1, variant)
