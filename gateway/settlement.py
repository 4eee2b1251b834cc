"""
Settlement strategies - how the airdrop flow waits for a transfer to land.

The default is an unconditional fixed delay. It does not check that the
transaction landed, so the post-wait balance may still reflect a pending
or failed transfer. ``SignatureStatusSettlement`` polls the signature
status instead and stops early once the cluster reports it.
"""

from __future__ import annotations

import asyncio
import time
from abc import ABC, abstractmethod

from gateway.config import SettlementConfig
from gateway.logger import get_logger
from solana_rpc.client import RpcError, SolanaRPC


DEFAULT_SETTLEMENT_SECONDS = 10.0
SETTLED_STATUSES = ("confirmed", "finalized")


class Settlement(ABC):
    """Abstract settlement strategy."""

    @abstractmethod
    async def wait(self, signature: str) -> None:
        """Suspend the calling request until the transfer is expected to settle."""
        pass


class FixedDelaySettlement(Settlement):
    """Sleep for a fixed number of seconds."""

    def __init__(self, seconds: float = DEFAULT_SETTLEMENT_SECONDS):
        self.seconds = seconds

    async def wait(self, signature: str) -> None:
        await asyncio.sleep(self.seconds)


class NoSettlement(Settlement):
    """Return immediately."""

    async def wait(self, signature: str) -> None:
        return None


class SignatureStatusSettlement(Settlement):
    """Poll getSignatureStatuses until confirmed, failed, or timed out."""

    def __init__(self, rpc: SolanaRPC, timeout: float = 30.0, interval: float = 1.0):
        self.rpc = rpc
        self.timeout = timeout
        self.interval = interval
        self.log = get_logger("settlement")

    async def wait(self, signature: str) -> None:
        deadline = time.monotonic() + self.timeout
        while True:
            try:
                status = await asyncio.to_thread(self.rpc.get_signature_status, signature)
            except RpcError as e:
                self.log.warn(f"Signature status check failed: {e.cause}")
                status = None

            if status:
                if status.get("err") is not None:
                    self.log.warn(f"Airdrop transaction {signature} failed: {status['err']}")
                    return
                if status.get("confirmationStatus") in SETTLED_STATUSES:
                    return

            remaining = deadline - time.monotonic()
            if remaining <= 0:
                self.log.warn(f"Airdrop transaction {signature} not confirmed after {self.timeout}s")
                return
            await asyncio.sleep(min(self.interval, remaining))


def build_settlement(config: SettlementConfig, rpc: SolanaRPC) -> Settlement:
    """Create the strategy named in configuration."""
    if config.strategy == "poll":
        return SignatureStatusSettlement(rpc, timeout=config.delay_seconds)
    if config.strategy == "none":
        return NoSettlement()
    return FixedDelaySettlement(config.delay_seconds)
