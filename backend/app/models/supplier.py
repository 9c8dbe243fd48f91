from sqlalchemy import Column, Integer, String, Text

from app.models.base import Base


class Supplier(Base):
    __tablename__ = "suppliers"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255))
    registration_number = Column(String(100), unique=True)
    address = Column(Text)
