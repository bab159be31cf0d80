from sqlalchemy import select, func, desc
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from decimal import Decimal
from typing import List
from app.models.wallet import Wallet
from app.schemas.wallet import WalletBalanceSchema
from app.core.exceptions import NegativeAmountException, InvalidAmountException, DatabaseException
import logging

logger = logging.getLogger(__name__)

TOP_UP_DESCRIPTION = "Deposit"
CENT = Decimal("0.01")

class WalletRepository:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def _balance_of(self, user_fk: int) -> float:
        result = await self.db.execute(
            select(func.coalesce(func.sum(Wallet.amount), 0)).where(Wallet.user_fk == user_fk)
        )
        return float(result.scalar_one())

    async def get_user_wallet_balance(self, user_fk: int) -> WalletBalanceSchema:
        logger.info(f"method=get_user_wallet_balance user_fk={user_fk}")
        balance = await self._balance_of(user_fk)
        return WalletBalanceSchema(balance=balance)

    async def top_up_wallet(self, user_id: int, amount: Decimal | float) -> WalletBalanceSchema:
        logger.info(f"method=top_up_wallet user_id={user_id} amount={amount}")
        amount = Decimal(str(amount))
        if amount <= 0:
            raise NegativeAmountException(amount)
        # the column keeps cents only
        if amount != amount.quantize(CENT):
            raise InvalidAmountException(amount)

        transaction = Wallet(
            user_fk=user_id,
            transaction_description=TOP_UP_DESCRIPTION,
            amount=amount,
        )
        try:
            self.db.add(transaction)
            await self.db.flush()
            balance = await self._balance_of(user_id)
            await self.db.commit()
        except SQLAlchemyError:
            await self.db.rollback()
            logger.exception(f"failed to top up wallet for user_id={user_id}")
            raise DatabaseException(500, "failed to top up wallet")
        logger.info(f"Updated user {user_id} balance: {balance}")
        return WalletBalanceSchema(balance=balance)

    async def list_all_transactions(self, user_fk: int) -> List[Wallet]:
        logger.info(f"method=list_all_transactions user_fk={user_fk}")
        result = await self.db.execute(
            select(Wallet)
            .where(Wallet.user_fk == user_fk)
            .order_by(desc(Wallet.created_at), desc(Wallet.id))
        )
        return list(result.scalars().all())
