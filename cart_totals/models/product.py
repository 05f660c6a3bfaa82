# cart_totals/models/product.py
# Модель Product — исходный источник цены товара.
from sqlalchemy import Column, Integer, String, Float, DateTime, Text
from datetime import datetime
from cart_totals.db.base import Base

class Product(Base):
    __tablename__ = "products"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String, nullable=False)
    description = Column(Text, nullable=True)
    price = Column(Float, nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow)
