"""
Test configuration and fixtures.
"""

import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

# Add parent to path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from gateway.config import Config, ServerConfig, SettlementConfig, SolanaConfig
from gateway.settlement import Settlement
from solana_rpc.client import RpcError


VALID_WALLET = "So11111111111111111111111111111111111111112"
SYSTEM_PROGRAM = "11111111111111111111111111111111"
TEST_RPC_URL = "https://rpc.test.invalid"
TEST_SIGNATURE = "5" + "x" * 87

INVALID_WALLETS = [
    "not-a-valid-address",
    "",
    "abc",
    "1" * 31,
    "1" * 33,
    "1" * 45,
    "0" * 32,
    "O" * 32,
    VALID_WALLET + " ",
    " " + VALID_WALLET,
    VALID_WALLET[:-1] + "l",
]


# ============================================================
# TEST DOUBLES
# ============================================================

class FakeRPC:
    """In-memory stand-in for SolanaRPC that records every call."""

    def __init__(self, balances=(0,), signature=TEST_SIGNATURE, balance_errors=None, airdrop_error=None):
        self.balances = list(balances)
        self.signature = signature
        self.balance_errors = dict(balance_errors or {})
        self.airdrop_error = airdrop_error
        self.calls = []

    @property
    def balance_calls(self):
        return [c for c in self.calls if c[0] == "get_balance"]

    @property
    def airdrop_calls(self):
        return [c for c in self.calls if c[0] == "request_airdrop"]

    def get_balance(self, pubkey):
        index = len(self.balance_calls)
        self.calls.append(("get_balance", pubkey.to_base58()))
        if index in self.balance_errors:
            raise RpcError("getBalance", self.balance_errors[index])
        return self.balances[min(index, len(self.balances) - 1)]

    def request_airdrop(self, pubkey, lamports):
        self.calls.append(("request_airdrop", pubkey.to_base58(), lamports))
        if self.airdrop_error:
            raise RpcError("requestAirdrop", self.airdrop_error)
        return self.signature

    def get_signature_status(self, signature):
        self.calls.append(("get_signature_status", signature))
        return {"confirmationStatus": "finalized", "err": None}


class RecordingSettlement(Settlement):
    """Settlement that returns immediately and remembers what it waited on."""

    def __init__(self):
        self.waited = []

    async def wait(self, signature):
        self.waited.append(signature)


# ============================================================
# FIXTURES
# ============================================================

@pytest.fixture
def test_config():
    return Config(
        solana=SolanaConfig(
            rpc_url=TEST_RPC_URL,
            rpc_timeout=5.0,
            cluster="devnet",
            explorer_url="https://explorer.solana.com",
        ),
        settlement=SettlementConfig(strategy="none", delay_seconds=0.0),
        server=ServerConfig(host="127.0.0.1", port=3000, log_level="DEBUG"),
    )


@pytest.fixture
def fake_rpc():
    return FakeRPC(balances=[500_000_000, 1_500_000_000])


@pytest.fixture
def settlement():
    return RecordingSettlement()


@pytest.fixture
def api_client(test_config, fake_rpc, settlement):
    """Create test client for FastAPI."""
    from api.server import create_app

    app = create_app(test_config, rpc=fake_rpc, settlement=settlement)
    with TestClient(app) as client:
        yield client


@pytest.fixture
def clean_env(monkeypatch):
    """Remove every variable the gateway reads."""
    for key in (
        "RPC_URL", "PORT", "HOST", "RPC_TIMEOUT_SECONDS", "SOLANA_CLUSTER",
        "EXPLORER_URL", "SETTLEMENT_STRATEGY", "SETTLEMENT_DELAY_SECONDS", "LOG_LEVEL",
    ):
        # setenv first so values loaded from a .env file are undone afterwards
        monkeypatch.setenv(key, "")
        monkeypatch.delenv(key)
    return monkeypatch
