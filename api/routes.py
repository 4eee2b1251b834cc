"""
API Routes - balance lookup, devnet airdrops, health.
"""

from __future__ import annotations

from pathlib import Path

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse
from pydantic import BaseModel, Field

from gateway.airdrop import AirdropService
from gateway.balance import BalanceService
from gateway.config import Config


router = APIRouter(tags=["Gateway"])

_STATIC_DIR = Path(__file__).resolve().parent / "static"


# ============================================================
# PYDANTIC MODELS
# ============================================================

class BalanceRequest(BaseModel):
    """Balance lookup request."""
    wallet: str


class BalanceResponse(BaseModel):
    """Balance lookup response."""
    wallet: str
    balance_lamports: int
    balance_sol: float


class AirdropRequest(BaseModel):
    """Airdrop request, amount in whole SOL."""
    wallet: str
    sol: int = Field(..., ge=0, strict=True)


class AirdropResponse(BaseModel):
    """Balances before the airdrop and after settlement."""
    wallet: str
    previous_balance_lamports: int
    new_balance_lamports: int
    new_balance_sol: float


class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    rpc_url: str


class ErrorResponse(BaseModel):
    """Error body for every failed request."""
    error: str
    code: str


# ============================================================
# DEPENDENCIES
# ============================================================

def get_config(request: Request) -> Config:
    return request.app.state.config


def get_balance_service(request: Request) -> BalanceService:
    return request.app.state.balance_service


def get_airdrop_service(request: Request) -> AirdropService:
    return request.app.state.airdrop_service


# ============================================================
# ROUTES
# ============================================================

@router.get("/", response_class=HTMLResponse, include_in_schema=False)
async def index():
    """Serve the wallet page."""
    return HTMLResponse((_STATIC_DIR / "index.html").read_text(encoding="utf-8"))


@router.get("/health", response_model=HealthResponse)
async def health(config: Config = Depends(get_config)):
    return HealthResponse(status="healthy", rpc_url=config.rpc_url)


@router.post(
    "/get_balance",
    response_model=BalanceResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def get_balance(
    payload: BalanceRequest,
    service: BalanceService = Depends(get_balance_service),
):
    reading = await service.get_balance(payload.wallet)
    return BalanceResponse(
        wallet=reading.wallet,
        balance_lamports=reading.lamports,
        balance_sol=reading.sol,
    )


@router.post(
    "/get_airdrop",
    response_model=AirdropResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def get_airdrop(
    payload: AirdropRequest,
    service: AirdropService = Depends(get_airdrop_service),
):
    outcome = await service.request_airdrop(payload.wallet, payload.sol)
    return AirdropResponse(
        wallet=outcome.wallet,
        previous_balance_lamports=outcome.previous_balance_lamports,
        new_balance_lamports=outcome.new_balance_lamports,
        new_balance_sol=outcome.new_balance_sol,
    )
