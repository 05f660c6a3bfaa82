# cart_totals/models/__init__.py
# Импорт моделей, чтобы они были зарегистрированы в Base.metadata
from cart_totals.models.user import User
from cart_totals.models.product import Product
from cart_totals.models.order import Order, OrderStatus
from cart_totals.models.cart import CartItem

__all__ = ["User", "Product", "Order", "OrderStatus", "CartItem"]
