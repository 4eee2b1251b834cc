from __future__ import annotations

from dataclasses import dataclass

import base58
import requests
from requests.adapters import HTTPAdapter

from gateway.logger import get_logger

LAMPORTS_PER_SOL = 1_000_000_000
PUBKEY_BYTES = 32
MAX_BASE58_LEN = 44
# asyncio.to_thread default executor is capped at 32 workers
DEFAULT_POOL_MAXSIZE = 32

ALPHABET = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"


class RpcError(RuntimeError):
    """Raised when a Solana RPC call fails; carries the endpoint's error text."""

    def __init__(self, method: str, cause: str):
        super().__init__(cause)
        self.method = method
        self.cause = cause


@dataclass(frozen=True)
class PublicKey:
    data: bytes

    def __bytes__(self) -> bytes:
        return self.data

    def __str__(self) -> str:
        return self.to_base58()

    def to_base58(self) -> str:
        return base58.b58encode(self.data).decode("ascii")

    @classmethod
    def from_base58(cls, s: str) -> "PublicKey":
        if len(s) > MAX_BASE58_LEN:
            raise ValueError("Public key string too long.")
        if any(ch not in ALPHABET for ch in s):
            raise ValueError("Invalid base58 string.")
        data = base58.b58decode(s)
        if len(data) != PUBKEY_BYTES:
            raise ValueError("Public key must be 32 bytes.")
        return cls(data)


def lamports_to_sol(lamports: int) -> float:
    return lamports / LAMPORTS_PER_SOL


class SolanaRPC:
    def __init__(
        self,
        url: str,
        timeout: float = 20.0,
        session: requests.Session | None = None,
        pool_maxsize: int = DEFAULT_POOL_MAXSIZE,
    ):
        self.url = url
        self.timeout = timeout
        if session is None:
            # Shared by worker threads; only the connection pool is relied on across threads.
            session = requests.Session()
            adapter = HTTPAdapter(pool_connections=1, pool_maxsize=pool_maxsize)
            session.mount("http://", adapter)
            session.mount("https://", adapter)
        self.session = session
        self.log = get_logger("solana_rpc")

    def _post(self, method: str, params: list):
        payload = {"jsonrpc": "2.0", "id": 1, "method": method, "params": params}
        try:
            resp = self.session.post(self.url, json=payload, timeout=self.timeout)
            resp.raise_for_status()
            data = resp.json()
        except requests.RequestException as e:
            raise RpcError(method, str(e)) from e
        except ValueError as e:
            raise RpcError(method, f"invalid JSON in RPC response: {e}") from e
        if not isinstance(data, dict):
            raise RpcError(method, f"unexpected RPC response: {data!r}")
        if "error" in data:
            err = data["error"]
            msg = err.get("message", str(err)) if isinstance(err, dict) else str(err)
            raise RpcError(method, msg)
        if "result" not in data:
            raise RpcError(method, "RPC response has no result")
        self.log.debug(f"{method} ok")
        return data["result"]

    def get_balance(self, pubkey: PublicKey) -> int:
        res = self._post("getBalance", [pubkey.to_base58()])
        value = res.get("value") if isinstance(res, dict) else None
        if not isinstance(value, int):
            raise RpcError("getBalance", f"malformed balance result: {res!r}")
        return value

    def request_airdrop(self, pubkey: PublicKey, lamports: int) -> str:
        sig = self._post("requestAirdrop", [pubkey.to_base58(), lamports])
        if not isinstance(sig, str):
            raise RpcError("requestAirdrop", f"malformed signature result: {sig!r}")
        return sig

    def get_signature_status(self, signature: str) -> dict | None:
        res = self._post(
            "getSignatureStatuses", [[signature], {"searchTransactionHistory": True}]
        )
        value = res.get("value") if isinstance(res, dict) else None
        if not value:
            return None
        return value[0]
