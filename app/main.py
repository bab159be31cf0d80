from fastapi import FastAPI
from app.api.routes import wallet, health
from app.core.config import settings
from app.db.session import init_db
from app.handlers.exception_handlers import init_exception_handlers
import logging
from app.core.logging_config import setup_logging
setup_logging()

logger = logging.getLogger(__name__)

app = FastAPI(title=settings.app_name)

#init exception handlers
init_exception_handlers(app)
app.include_router(wallet.router, prefix="/users", tags=["Wallet"])
app.include_router(health.router, prefix="/health", tags=["Health"])

@app.on_event("startup")
async def startup():
    logger.info("creating database tables")
    await init_db()
