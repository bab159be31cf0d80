from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from app.core.exceptions import Error500Server
from app.repositories.wallet import WalletRepository
from app.schemas.wallet import WalletTopUpRequest, WalletTransactionSchema
import logging

logger = logging.getLogger(__name__)


class WalletController:
    """Turns wallet requests into repository calls and JSON responses.

    Every failure coming out of the repository, whatever it is, is re-raised
    as a single ``Error500Server`` for the 500 exception handler to render.
    No response is built on that path.
    """

    def __init__(self, wallet_repository: WalletRepository):
        self.wallet_repository = wallet_repository

    async def show_user_balance(self, user_fk: int) -> JSONResponse:
        try:
            balance = await self.wallet_repository.get_user_wallet_balance(user_fk)
        except Exception as ex:
            logger.exception(f"user {user_fk} unexpected error getting wallet balance")
            raise Error500Server() from ex
        return JSONResponse(status_code=200, content=jsonable_encoder(balance))

    async def top_up_wallet(self, body: WalletTopUpRequest) -> JSONResponse:
        user_id, amount = body.user_id, body.amount
        try:
            balance = await self.wallet_repository.top_up_wallet(user_id, amount)
        except Exception as ex:
            logger.exception(f"user {user_id} unexpected error topping up wallet amount={amount}")
            raise Error500Server() from ex
        return JSONResponse(status_code=200, content=jsonable_encoder(balance))

    async def list_all_transactions(self, user_fk: int) -> JSONResponse:
        try:
            transactions = await self.wallet_repository.list_all_transactions(user_fk)
            data = [WalletTransactionSchema.model_validate(t) for t in transactions]
        except Exception as ex:
            logger.exception(f"user {user_fk} unexpected error listing transactions")
            raise Error500Server() from ex
        return JSONResponse(status_code=200, content=jsonable_encoder(data))
