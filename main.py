from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.api import api_router
from app.api.deps import get_engine
from app.core.config import get_settings
from app.core.errors import OptimizerError
from app.core.logging import configure_logging, get_logger

configure_logging(get_settings().log_level)
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(_app: FastAPI):
    engine = get_engine()
    logger.info("FastAPI application started with engine config %s", engine.config.version)
    yield


app = FastAPI(title="Student Loan Optimizer", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(OptimizerError)
async def handle_optimizer_error(_request: Request, err: OptimizerError) -> JSONResponse:
    logger.warning("%s: %s", type(err).__name__, err.message)
    return JSONResponse(status_code=err.status_code, content={"detail": err.message})


app.include_router(api_router)
