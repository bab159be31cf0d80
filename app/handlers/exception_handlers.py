from fastapi import Request, FastAPI
from fastapi.responses import JSONResponse
from app.core.exceptions import Error500Server

# the cause is logged where Error500Server is raised
async def error_500_server_handler(request: Request, exc: Error500Server):
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.detail}
    )

def init_exception_handlers(app: FastAPI):
    app.add_exception_handler(Error500Server, error_500_server_handler)
