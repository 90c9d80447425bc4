# server/models/transaction.py

from datetime import datetime
from sqlalchemy import Column, Date, DateTime, Float, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship
from . import Base


TRANSACTION_TYPES = ("income", "expense")


class Transaction(Base):
    __tablename__ = "transactions"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), index=True, nullable=False)
    type = Column(String, nullable=False)
    category = Column(String, nullable=False)
    amount = Column(Float, nullable=False)
    note = Column(Text, nullable=False, default="")
    date = Column(Date, index=True, nullable=False)
    created_at = Column(DateTime, default=datetime.now)

    owner = relationship("User", back_populates="transactions")
