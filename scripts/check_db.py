# scripts/check_db.py
# Проверяет подключение к DATABASE_URL и наличие индексов под запрос суммы корзины
from sqlalchemy import inspect, text
from sqlalchemy.exc import SQLAlchemyError

from cart_totals.core.config import settings
from cart_totals.db.indexes import CART_TOTAL_INDEXES, existing_cart_total_indexes
from cart_totals.db.session import make_engine

def main():
    url = settings.DATABASE_URL
    print('Trying to connect to:', url)
    engine = make_engine(url)
    try:
        with engine.connect() as conn:
            print('Connection OK, SELECT 1 ->', conn.execute(text("SELECT 1")).scalar())
            if not inspect(conn).has_table("cart_items"):
                print('Tables not created yet (run: alembic upgrade head)')
                return 1
            present = existing_cart_total_indexes(conn)
            for name in CART_TOTAL_INDEXES:
                print(f"  {name}: {'present' if name in present else 'MISSING'}")
    except SQLAlchemyError as e:
        print('Connection failed:', e)
        return 1
    finally:
        engine.dispose()
    return 0

if __name__ == '__main__':
    raise SystemExit(main())
