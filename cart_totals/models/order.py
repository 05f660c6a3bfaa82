# cart_totals/models/order.py
# Модель Order. Статус 'active' — заказ, по которому считается сумма корзины.
from sqlalchemy import Column, Integer, ForeignKey, DateTime, Enum
from sqlalchemy.orm import relationship
from datetime import datetime
from cart_totals.db.base import Base
import enum

class OrderStatus(str, enum.Enum):
    active = "active"
    reserved = "reserved"
    processing = "processing"
    delivered = "delivered"
    cancelled = "cancelled"

class Order(Base):
    __tablename__ = "orders"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False)
    # Имена членов enum совпадают со значениями, поэтому в SQL достаточно литерала 'active'
    status = Column(Enum(OrderStatus), default=OrderStatus.active, nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow)

    user = relationship("User", backref="orders")
