from pydantic import BaseModel, ConfigDict, Field
from datetime import datetime
from decimal import Decimal


class WalletTopUpRequest(BaseModel):
    user_id: int = Field(alias="userId")
    # matches the Numeric(12, 2) column
    amount: Decimal = Field(max_digits=12, decimal_places=2)

    model_config = ConfigDict(populate_by_name=True)

class WalletBalanceSchema(BaseModel):
    balance: float

class WalletTransactionSchema(BaseModel):
    id: int
    user_fk: int
    transaction_description: str
    amount: float
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)
