# cart_totals/db/session.py
# Инициализация SQLAlchemy engine и фабрики сессий.
# Поддерживает как Postgres, так и SQLite (для тестов/локального использования).

from contextlib import contextmanager

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker

from cart_totals.core.config import settings


def make_engine(url: str) -> Engine:
    # Для sqlite требуется connect_args; для Postgres — пустой dict
    connect_args = {"check_same_thread": False} if url.startswith("sqlite") else {}
    # pool_pre_ping полезен для долгоживущих соединений с Postgres
    return create_engine(url, connect_args=connect_args, pool_pre_ping=True)


engine = make_engine(settings.DATABASE_URL)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@contextmanager
def get_session():
    """Сессия с коммитом при успехе и откатом при ошибке."""
    session = SessionLocal()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()
