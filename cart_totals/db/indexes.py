# cart_totals/db/indexes.py
# B-tree индексы под запрос суммы корзины.
# Те же индексы создаёт миграция alembic/versions/0002_cart_total_indexes.py;
# здесь — DDL для ручного применения и сравнения планов с индексами и без.

import logging
from typing import Dict, List

from sqlalchemy import inspect, text
from sqlalchemy.engine import Connection
from sqlalchemy.exc import SQLAlchemyError

logger = logging.getLogger(__name__)

# name -> (table, columns)
CART_TOTAL_INDEXES: Dict[str, tuple] = {
    # Ведущая сторона фильтра/джойна
    "idx_cart_items_user_id": ("cart_items", ("user_id",)),
    # Композитный: поиск активных заказов пользователя только по индексу
    "idx_orders_user_id_status": ("orders", ("user_id", "status")),
    # Остался от исходной схемы, оптимизированным запросом не используется
    "idx_cart_items_product_id": ("cart_items", ("product_id",)),
}


def create_index_statements() -> List[str]:
    """DDL CREATE INDEX для всех индексов (идемпотентно, IF NOT EXISTS)."""
    return [
        f"CREATE INDEX IF NOT EXISTS {name} ON {table} ({', '.join(columns)})"
        for name, (table, columns) in CART_TOTAL_INDEXES.items()
    ]


def create_cart_total_indexes(connection: Connection) -> None:
    """Создаёт индексы. Повторный вызов ничего не меняет."""
    try:
        for statement in create_index_statements():
            logger.debug(f"Executing: {statement}")
            connection.execute(text(statement))
    except SQLAlchemyError as e:
        logger.error(f"❌ Failed to create cart total indexes: {e}")
        raise
    logger.info(f"✅ Cart total indexes ensured: {', '.join(CART_TOTAL_INDEXES)}")


def drop_cart_total_indexes(connection: Connection) -> None:
    try:
        for name in CART_TOTAL_INDEXES:
            connection.execute(text(f"DROP INDEX IF EXISTS {name}"))
    except SQLAlchemyError as e:
        logger.error(f"❌ Failed to drop cart total indexes: {e}")
        raise
    logger.info("🗑️ Cart total indexes dropped")


def existing_cart_total_indexes(connection: Connection) -> List[str]:
    """Имена индексов из CART_TOTAL_INDEXES, которые реально есть в БД."""
    inspector = inspect(connection)
    present = set()
    for table in {table for table, _ in CART_TOTAL_INDEXES.values()}:
        present.update(ix["name"] for ix in inspector.get_indexes(table))
    return [name for name in CART_TOTAL_INDEXES if name in present]
