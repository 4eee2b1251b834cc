"""
FastAPI Server - HTTP front for balance lookups and devnet airdrops.
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from api.routes import router
from gateway.airdrop import AirdropService
from gateway.balance import BalanceService
from gateway.config import Config
from gateway.errors import GatewayError, RequestValidationFailed
from gateway.logger import configure_logging, get_logger
from gateway.settlement import Settlement, build_settlement
from solana_rpc.client import SolanaRPC


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log all requests."""

    def __init__(self, app):
        super().__init__(app)
        self.log = get_logger("request")

    async def dispatch(self, request: Request, call_next):
        start = datetime.now(timezone.utc)

        response = await call_next(request)

        duration = (datetime.now(timezone.utc) - start).total_seconds() * 1000
        self.log.info(
            f"{request.method} {request.url.path} "
            f"status={response.status_code} "
            f"duration={duration:.2f}ms"
        )

        return response


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    log = get_logger("server")
    log.info(f"Starting API server (rpc={app.state.config.rpc_url})")

    yield

    session = getattr(app.state.rpc, "session", None)
    if session is not None:
        session.close()
    log.info("API server shutdown complete")


async def gateway_error_handler(request: Request, exc: GatewayError) -> JSONResponse:
    get_logger("server").warn(
        f"{request.method} {request.url.path} -> {exc.status_code} [{exc.code.category}] {exc.message}"
    )
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    problems = "; ".join(
        f"{'.'.join(str(p) for p in err.get('loc', ()) if p != 'body')}: {err.get('msg')}"
        for err in exc.errors()
    )
    error = RequestValidationFailed(f"Invalid request: {problems}")
    return JSONResponse(status_code=error.status_code, content=error.to_dict())


def create_app(
    config: Optional[Config] = None,
    rpc: Optional[SolanaRPC] = None,
    settlement: Optional[Settlement] = None,
) -> FastAPI:
    """Create and configure FastAPI application."""
    config = config or Config.load()
    configure_logging(config.server.log_level)

    rpc = rpc or SolanaRPC(config.solana.rpc_url, timeout=config.solana.rpc_timeout)
    settlement = settlement or build_settlement(config.settlement, rpc)

    app = FastAPI(
        title="Solana Airdrop Gateway",
        description="Wallet balance lookups and devnet airdrops over Solana JSON-RPC",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.state.config = config
    app.state.rpc = rpc
    app.state.balance_service = BalanceService(rpc)
    app.state.airdrop_service = AirdropService(
        rpc,
        settlement,
        explorer_url=config.solana.explorer_url,
        cluster=config.solana.cluster,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Compression
    app.add_middleware(GZipMiddleware, minimum_size=1000)

    # Request logging
    app.add_middleware(RequestLoggingMiddleware)

    app.add_exception_handler(GatewayError, gateway_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)

    app.include_router(router)

    return app
