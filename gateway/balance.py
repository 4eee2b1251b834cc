"""
Balance lookup - validate the wallet and read its balance once.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass

from gateway.errors import UpstreamFailure
from gateway.logger import get_logger
from gateway.validators import validate_wallet_address
from solana_rpc.client import RpcError, SolanaRPC, lamports_to_sol


@dataclass(frozen=True)
class BalanceReading:
    """A fresh balance read; never cached."""
    wallet: str
    lamports: int

    @property
    def sol(self) -> float:
        return lamports_to_sol(self.lamports)


class BalanceService:
    def __init__(self, rpc: SolanaRPC):
        self.rpc = rpc
        self.log = get_logger("balance")

    async def get_balance(self, wallet: str) -> BalanceReading:
        pubkey = validate_wallet_address(wallet)
        try:
            lamports = await asyncio.to_thread(self.rpc.get_balance, pubkey)
        except RpcError as e:
            self.log.error(f"Balance read failed for {wallet}: {e.cause}")
            raise UpstreamFailure("balance read", e.cause) from e
        return BalanceReading(wallet=wallet, lamports=lamports)
