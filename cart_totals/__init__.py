# cart_totals/__init__.py
# Запрос суммы корзины пользователя (legacy и оптимизированный) и индексы для него.

__version__ = "1.0.0"
