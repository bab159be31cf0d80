from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from app.db.session import get_db
from app.controllers.wallet import WalletController
from app.repositories.wallet import WalletRepository
from app.schemas.wallet import WalletTopUpRequest, WalletBalanceSchema, WalletTransactionSchema
from typing import List

router = APIRouter()


def get_wallet_repository(db: AsyncSession = Depends(get_db)):
    return WalletRepository(db)

def get_wallet_controller(wallet_repository: WalletRepository = Depends(get_wallet_repository)):
    return WalletController(wallet_repository)

@router.get("/{user_fk}/wallet/balance", response_model=WalletBalanceSchema)
async def show_user_balance(user_fk: int,
    controller: WalletController = Depends(get_wallet_controller)):
    return await controller.show_user_balance(user_fk)

@router.post("/{user_fk}/wallet/topup", response_model=WalletBalanceSchema)
async def top_up_wallet(user_fk: int,
    payload: WalletTopUpRequest,
    controller: WalletController = Depends(get_wallet_controller)):
    # the credited user comes from the body
    return await controller.top_up_wallet(payload)

@router.get("/{user_fk}/wallet/transactions", response_model=List[WalletTransactionSchema])
async def list_all_transactions(user_fk: int,
    controller: WalletController = Depends(get_wallet_controller)):
    return await controller.list_all_transactions(user_fk)
