"""
FastAPI backend for the Solana airdrop gateway.
Provides balance lookup, devnet airdrop and health endpoints.
"""

from .server import create_app
from .routes import router

__all__ = ["create_app", "router"]
