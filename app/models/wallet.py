from sqlalchemy import Column, String, DateTime, Integer, Numeric
from datetime import datetime
from app.models.base import Base


class Wallet(Base):
    """A single wallet movement for a user. The balance is the sum of amounts."""
    __tablename__ = "wallets"
    id = Column(Integer, primary_key=True, autoincrement=True)
    user_fk = Column(Integer, nullable=False, index=True)
    transaction_description = Column(String, nullable=False)
    amount = Column(Numeric(12, 2, asdecimal=False), nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
