# cart_totals/db/init_db.py
# Создание таблиц с повторными попытками (для локального запуска и демо).
# В рабочем окружении схема и индексы создаются миграциями Alembic.

import logging
import time
from typing import Optional

from sqlalchemy.engine import Engine

from cart_totals.db.base import Base
# Импорт моделей, чтобы SQLAlchemy видел их определения
import cart_totals.models  # noqa: F401

logger = logging.getLogger(__name__)


def try_create_tables(retries: int = 5, delay: int = 2, bind: Optional[Engine] = None) -> bool:
    """
    Пытаемся создать таблицы с повторными попытками.
    Если БД недоступна, логируем ошибку и пробуем снова.

    Args:
        retries: Количество попыток подключения
        delay: Задержка между попытками в секундах
        bind: Engine, в котором создаются таблицы; по умолчанию engine из настроек

    Returns:
        True если таблицы созданы/существуют, False если все попытки исчерпаны
    """
    if bind is None:
        from cart_totals.db.session import engine as bind

    for attempt in range(1, retries + 1):
        try:
            logger.info(f"Попытка создания таблиц ({attempt}/{retries})...")
            Base.metadata.create_all(bind=bind)
            logger.info("✅ Database tables created (or already exist).")
            return True
        except Exception as e:
            logger.warning(f"❌ Attempt {attempt}/{retries} failed to create tables: {e}")
            if attempt < retries:
                logger.info(f"⏳ Waiting {delay}s before retry...")
                time.sleep(delay)
            else:
                logger.error(
                    f"❌ Could not create tables after {retries} retries. "
                    "Database initialization failed."
                )
    return False
