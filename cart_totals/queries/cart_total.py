# cart_totals/queries/cart_total.py
# Запрос суммы корзины пользователя: исходный (legacy) и оптимизированный варианты,
# плюс получение плана выполнения (EXPLAIN) для сравнения.
#
# Оба варианта соединяют cart_items и orders только по user_id, а не по конкретному
# заказу: каждая строка корзины повторяется столько раз, сколько у пользователя
# активных заказов (18 строк корзины × 4 активных заказа = 72 строки).
# Это поведение одинаково в обоих вариантах и намеренно не исправляется здесь.

import logging
import re
from dataclasses import dataclass, field
from decimal import Decimal
from typing import List, Optional

from sqlalchemy import text
from sqlalchemy.engine import Connection
from sqlalchemy.exc import SQLAlchemyError

from cart_totals.core.config import settings

logger = logging.getLogger(__name__)

LEGACY = "legacy"
OPTIMIZED = "optimized"

# Цена берётся из products — лишний JOIN
LEGACY_CART_TOTAL_SQL = """
SELECT SUM(products.price * cart_items.quantity) AS total_cost
FROM products
JOIN cart_items ON products.id = cart_items.product_id
JOIN orders ON orders.user_id = cart_items.user_id
WHERE orders.status = 'active'
  AND orders.user_id = :user_id
""".strip()

# Цена берётся из денормализованной копии cart_items.price
OPTIMIZED_CART_TOTAL_SQL = """
SELECT SUM(ci.price * ci.quantity) AS total_cost
FROM cart_items AS ci
JOIN orders AS o ON o.user_id = ci.user_id
WHERE o.user_id = :user_id
  AND o.status = 'active'
""".strip()

CART_TOTAL_SQL = {
    LEGACY: LEGACY_CART_TOTAL_SQL,
    OPTIMIZED: OPTIMIZED_CART_TOTAL_SQL,
}

CENTS = Decimal("0.01")

_EXECUTION_TIME_RE = re.compile(r"Execution Time:\s*([0-9.]+)\s*ms")


def _check_args(user_id, variant: str) -> str:
    # bool — подкласс int, но user_id=True почти наверняка ошибка вызывающего
    if not isinstance(user_id, int) or isinstance(user_id, bool):
        raise ValueError(f"user_id must be int, got {type(user_id).__name__}")
    if variant not in CART_TOTAL_SQL:
        raise ValueError(f"Unknown cart total variant: {variant!r}")
    return CART_TOTAL_SQL[variant]


def get_cart_total(connection: Connection, user_id: int, variant: Optional[str] = None) -> Optional[Decimal]:
    """
    Сумма SUM(price * quantity) по корзине пользователя для его активных заказов.

    Args:
        connection: Открытое соединение SQLAlchemy
        user_id: id пользователя
        variant: "optimized" или "legacy"; по умолчанию settings.CART_TOTAL_QUERY

    Returns:
        Сумма, округлённая до копеек, или None если подходящих строк нет
        (в том числе для несуществующего пользователя).
    """
    if variant is None:
        variant = settings.CART_TOTAL_QUERY
    sql = _check_args(user_id, variant)
    try:
        value = connection.execute(text(sql), {"user_id": user_id}).scalar()
    except SQLAlchemyError as e:
        logger.error(f"❌ Cart total query ({variant}) failed for user {user_id}: {e}")
        raise
    if value is None:
        logger.debug(f"Cart total ({variant}) for user {user_id}: NULL")
        return None
    total = Decimal(str(value)).quantize(CENTS)
    logger.debug(f"Cart total ({variant}) for user {user_id}: {total}")
    return total


def explain_cart_total(connection: Connection, user_id: int, variant: str = OPTIMIZED,
                       analyze: bool = True) -> List[str]:
    """
    План выполнения запроса суммы корзины, построчно.

    PostgreSQL: EXPLAIN ANALYZE (запрос реально выполняется) или EXPLAIN при analyze=False.
    SQLite: EXPLAIN QUERY PLAN (analyze игнорируется).
    """
    sql = _check_args(user_id, variant)
    dialect = connection.dialect.name
    if dialect == "postgresql":
        prefix = "EXPLAIN ANALYZE" if analyze else "EXPLAIN"
    elif dialect == "sqlite":
        prefix = "EXPLAIN QUERY PLAN"
    else:
        raise ValueError(f"EXPLAIN is not supported for dialect {dialect!r}")

    try:
        rows = connection.execute(text(f"{prefix} {sql}"), {"user_id": user_id}).fetchall()
    except SQLAlchemyError as e:
        logger.error(f"❌ EXPLAIN ({variant}) failed for user {user_id}: {e}")
        raise
    # У Postgres одна колонка "QUERY PLAN", у SQLite описание шага — последняя колонка
    return [str(row[-1]) for row in rows]


def execution_time_ms(plan_lines: List[str]) -> Optional[float]:
    """Достаёт 'Execution Time: X ms' из вывода EXPLAIN ANALYZE (Postgres)."""
    for line in plan_lines:
        match = _EXECUTION_TIME_RE.search(line)
        if match:
            return float(match.group(1))
    return None


@dataclass
class PlanComparison:
    user_id: int
    legacy_total: Optional[Decimal]
    optimized_total: Optional[Decimal]
    legacy_plan: List[str] = field(default_factory=list)
    optimized_plan: List[str] = field(default_factory=list)

    @property
    def totals_match(self) -> bool:
        return self.legacy_total == self.optimized_total

    @property
    def legacy_time_ms(self) -> Optional[float]:
        return execution_time_ms(self.legacy_plan)

    @property
    def optimized_time_ms(self) -> Optional[float]:
        return execution_time_ms(self.optimized_plan)


def compare_cart_total_plans(connection: Connection, user_id: int, analyze: bool = True) -> PlanComparison:
    """Выполняет оба варианта для пользователя и собирает суммы и планы."""
    comparison = PlanComparison(
        user_id=user_id,
        legacy_total=get_cart_total(connection, user_id, LEGACY),
        optimized_total=get_cart_total(connection, user_id, OPTIMIZED),
        legacy_plan=explain_cart_total(connection, user_id, LEGACY, analyze=analyze),
        optimized_plan=explain_cart_total(connection, user_id, OPTIMIZED, analyze=analyze),
    )
    if not comparison.totals_match:
        logger.warning(
            f"⚠️ Cart totals differ for user {user_id}: "
            f"legacy={comparison.legacy_total} optimized={comparison.optimized_total}"
        )
    return comparison
