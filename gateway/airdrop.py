"""
Airdrop orchestration - request devnet SOL and report the balance change.

Flow: validate address -> check ceiling -> read balance -> submit airdrop
-> settle -> read balance again. The ceiling check runs before any RPC
call, so rejected requests never touch the network. Any RPC failure ends
the flow; nothing is retried.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass

from gateway.errors import AmountTooLargeError, UpstreamFailure
from gateway.logger import get_logger
from gateway.settlement import Settlement
from gateway.validators import validate_wallet_address
from solana_rpc.client import LAMPORTS_PER_SOL, RpcError, SolanaRPC, lamports_to_sol


MAX_AIRDROP_SOL = 2
MAX_AIRDROP_LAMPORTS = MAX_AIRDROP_SOL * LAMPORTS_PER_SOL


@dataclass(frozen=True)
class AirdropOutcome:
    """Balances observed before the request and after settlement."""
    wallet: str
    signature: str
    previous_balance_lamports: int
    new_balance_lamports: int

    @property
    def new_balance_sol(self) -> float:
        return lamports_to_sol(self.new_balance_lamports)


def explorer_tx_url(explorer_url: str, signature: str, cluster: str) -> str:
    return f"{explorer_url}/tx/{signature}?cluster={cluster}"


class AirdropService:
    def __init__(
        self,
        rpc: SolanaRPC,
        settlement: Settlement,
        explorer_url: str = "https://explorer.solana.com",
        cluster: str = "devnet",
    ):
        self.rpc = rpc
        self.settlement = settlement
        self.explorer_url = explorer_url
        self.cluster = cluster
        self.log = get_logger("airdrop")

    async def _read_balance(self, pubkey, stage: str) -> int:
        try:
            return await asyncio.to_thread(self.rpc.get_balance, pubkey)
        except RpcError as e:
            self.log.error(f"{stage} failed for {pubkey}: {e.cause}")
            raise UpstreamFailure(stage, e.cause) from e

    async def request_airdrop(self, wallet: str, sol: int) -> AirdropOutcome:
        pubkey = validate_wallet_address(wallet)

        lamports = sol * LAMPORTS_PER_SOL
        if lamports > MAX_AIRDROP_LAMPORTS:
            raise AmountTooLargeError(lamports, MAX_AIRDROP_LAMPORTS, MAX_AIRDROP_SOL)

        previous = await self._read_balance(pubkey, "initial balance read")

        try:
            signature = await asyncio.to_thread(self.rpc.request_airdrop, pubkey, lamports)
        except RpcError as e:
            self.log.error(f"Airdrop submission failed for {wallet}: {e.cause}")
            raise UpstreamFailure("airdrop submission", e.cause) from e

        self.log.info(f"Airdrop txn: {explorer_tx_url(self.explorer_url, signature, self.cluster)}")

        await self.settlement.wait(signature)

        new = await self._read_balance(pubkey, "post-airdrop balance read")
        self.log.action("airdrop", f"wallet={wallet} sol={sol} before={previous} after={new}")

        return AirdropOutcome(
            wallet=wallet,
            signature=signature,
            previous_balance_lamports=previous,
            new_balance_lamports=new,
        )
