# cart_totals/queries/__init__.py
from cart_totals.queries.cart_total import (
    LEGACY,
    OPTIMIZED,
    LEGACY_CART_TOTAL_SQL,
    OPTIMIZED_CART_TOTAL_SQL,
    PlanComparison,
    compare_cart_total_plans,
    execution_time_ms,
    explain_cart_total,
    get_cart_total,
)

__all__ = [
    "LEGACY",
    "OPTIMIZED",
    "LEGACY_CART_TOTAL_SQL",
    "OPTIMIZED_CART_TOTAL_SQL",
    "PlanComparison",
    "compare_cart_total_plans",
    "execution_time_ms",
    "explain_cart_total",
    "get_cart_total",
]
