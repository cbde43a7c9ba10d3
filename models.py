# models.py

from sqlalchemy import Column, Integer, String
from database import Base


class Product(Base):
    __tablename__ = "product"
    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    image_url = Column(String(2048))
