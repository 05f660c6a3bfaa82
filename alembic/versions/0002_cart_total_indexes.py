"""add indexes for the cart total query

Revision ID: 0002
Revises: 0001
Create Date: 2026-09-28 11:47:03.552918

"""
from typing import Sequence, Union

from alembic import op


# revision identifiers, used by Alembic.
revision: str = '0002'
down_revision: Union[str, None] = '0001'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """
    B-tree индексы под:
      SELECT SUM(ci.price * ci.quantity) FROM cart_items ci
      JOIN orders o ON o.user_id = ci.user_id
      WHERE o.user_id = ? AND o.status = 'active'
    """
    op.create_index("idx_cart_items_user_id", "cart_items", ["user_id"], unique=False)
    # Композитный: активные заказы пользователя ищутся только по индексу
    op.create_index("idx_orders_user_id_status", "orders", ["user_id", "status"], unique=False)
    # Из исходной схемы; оптимизированным запросом не используется
    op.create_index("idx_cart_items_product_id", "cart_items", ["product_id"], unique=False)


def downgrade() -> None:
    op.drop_index("idx_cart_items_product_id", table_name="cart_items")
    op.drop_index("idx_orders_user_id_status", table_name="orders")
    op.drop_index("idx_cart_items_user_id", table_name="cart_items")
