# logging_config.py
import logging
from logging.handlers import RotatingFileHandler
from app.core.config import settings

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

def setup_logging():
    # Create handlers
    console_handler = logging.StreamHandler()
    file_handler = RotatingFileHandler(
        settings.log_file, maxBytes=10_000_000, backupCount=3
    )

    console_handler.setLevel(logging.DEBUG)
    file_handler.setLevel(logging.DEBUG)

    formatter = logging.Formatter(LOG_FORMAT)
    console_handler.setFormatter(formatter)
    file_handler.setFormatter(formatter)

    root_logger = logging.getLogger()

    if settings.debug:
        root_logger.setLevel(logging.DEBUG)
    else:
        root_logger.setLevel(logging.INFO)
    root_logger.addHandler(console_handler)
    root_logger.addHandler(file_handler)

    # uvicorn loggers go through the root logger
    for name in ("uvicorn", "uvicorn.error", "uvicorn.access"):
        logging.getLogger(name).propagate = True
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)

    sqlalchemy_engine_logger = logging.getLogger("sqlalchemy.engine")
    sqlalchemy_engine_logger.setLevel(logging.WARNING)
    sqlalchemy_engine_logger.handlers = []
    sqlalchemy_engine_logger.propagate = False
