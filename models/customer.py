# models/customer.py
from sqlalchemy import Column, BigInteger, Boolean, DateTime, Integer, Text, func, true
from database.base import Base


class Customer(Base):
    __tablename__ = "customers"

    # SQLite 는 INTEGER PRIMARY KEY 만 자동 증가
    id = Column(BigInteger().with_variant(Integer, "sqlite"), primary_key=True, autoincrement=True)
    name = Column(Text, nullable=False)
    phone = Column(Text, nullable=False)
    active = Column(Boolean, nullable=False, server_default=true())
    created = Column(DateTime(timezone=True), nullable=False, server_default=func.now())

    def __repr__(self) -> str:
        return f"<Customer id={self.id} name={self.name!r} active={self.active}>"


__all__ = ["Customer"]
