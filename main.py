# main.py
import logging
import routes
from contextlib import asynccontextmanager
from util.enums import Environment, Color, ErrorMessage
from fastapi import FastAPI, Request
from starlette.middleware.cors import CORSMiddleware
from config.settings import settings
from fastapi.responses import JSONResponse
from model.api import HealthResponse
from util.constants import InternalURIs
from util.errors import AppError
from util.logger import init_logger

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(fastApi: FastAPI):
    init_logger()
    print(f"{Color.GREEN}Initializing...{Color.RESET}")
    logger.info(
        "startup env=%s refinement=%s",
        settings.APP_ENV,
        "on" if settings.refinement_enabled else "off",
    )
    print(f"{Color.BLUE}Server Started{Color.RESET}")
    try:
        yield
    finally:
        print(f"{Color.RED}Server Shutdown{Color.RESET}")


app: FastAPI = FastAPI(title="Ravi Scan", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[settings.ALLOWED_ORIGIN],
    allow_credentials=True,  # Allow cookies and other credentials
    allow_methods=["GET", "POST"],  # Allowed HTTP Methods
    allow_headers=["Content-Type", "Accept"],  # Allowed HTTP Headers
)


@app.get(InternalURIs.HEALTH, response_model=HealthResponse)
async def healthz():
    return {"ok": True}


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError):
    return JSONResponse(status_code=exc.status_code, content={"error": exc.detail})


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.error("request.unhandled path=%s", request.url.path, exc_info=exc)
    return JSONResponse(
        status_code=ErrorMessage.ANALYSIS_FAILED.value.http_status,
        content={"error": ErrorMessage.ANALYSIS_FAILED.value.message},
    )


routes.register_routes(app)

if __name__ == "__main__":
    import uvicorn

    reload = settings.APP_ENV == Environment.DEV
    uvicorn.run("main:app", host="127.0.0.1", port=8000, reload=reload)
