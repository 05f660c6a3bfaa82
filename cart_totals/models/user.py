# cart_totals/models/user.py
# Модель пользователя — владелец заказов и корзины.
from sqlalchemy import Column, Integer, String, DateTime
from datetime import datetime
from cart_totals.db.base import Base

class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String, unique=True, nullable=True)
    full_name = Column(String, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow)
