# scripts/compare_cart_total_plans.py
# Сравнивает legacy и оптимизированный запросы суммы корзины:
# суммы должны совпадать, планы выполнения печатаются для сравнения.

import argparse
import logging
import sys

from cart_totals.core.config import settings
from cart_totals.db.indexes import create_cart_total_indexes, drop_cart_total_indexes
from cart_totals.db.init_db import try_create_tables
from cart_totals.db.seed import seed_demo_data
from cart_totals.db.session import engine, get_session
from cart_totals.queries.cart_total import compare_cart_total_plans

logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger(__name__)


def _print_plan(title, total, plan, time_ms):
    print(f"=== {title}: total_cost = {total}")
    for line in plan:
        print(f"  {line}")
    if time_ms is not None:
        print(f"  -> {time_ms:.3f} ms")


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Compare legacy and optimized cart total queries"
    )
    parser.add_argument("--user-id", type=int, default=1, help="User to compute the cart total for (default: 1)")
    parser.add_argument("--init", action="store_true", help="Create tables before running")
    parser.add_argument("--seed", action="store_true", help="Insert demo data (18 cart items, 4 active orders)")
    indexes = parser.add_mutually_exclusive_group()
    indexes.add_argument("--with-indexes", action="store_true", help="Create the cart total indexes first")
    indexes.add_argument("--drop-indexes", action="store_true", help="Drop the cart total indexes first")
    parser.add_argument("--no-analyze", action="store_true", help="Plain EXPLAIN instead of EXPLAIN ANALYZE")
    args = parser.parse_args(argv)

    if args.init and not try_create_tables(
        retries=settings.DB_CONNECT_RETRIES, delay=settings.DB_CONNECT_RETRY_DELAY, bind=engine
    ):
        return 2

    if args.seed:
        try:
            with get_session() as session:
                seed_demo_data(session, user_id=args.user_id)
        except ValueError as e:
            logger.error(f"❌ Seeding failed: {e}")
            return 2

    with engine.begin() as conn:
        if args.with_indexes:
            create_cart_total_indexes(conn)
        elif args.drop_indexes:
            drop_cart_total_indexes(conn)

    with engine.connect() as conn:
        result = compare_cart_total_plans(conn, args.user_id, analyze=not args.no_analyze)

    _print_plan("legacy", result.legacy_total, result.legacy_plan, result.legacy_time_ms)
    _print_plan("optimized", result.optimized_total, result.optimized_plan, result.optimized_time_ms)

    if not result.totals_match:
        logger.error("❌ Totals differ between legacy and optimized queries")
        return 1
    print("✅ Totals match")
    return 0


if __name__ == "__main__":
    sys.exit(main())
