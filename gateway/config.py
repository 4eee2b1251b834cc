"""
Configuration loader for the airdrop gateway.
Loads environment variables once and exposes an immutable config object.
"""

import os
from pathlib import Path
from dataclasses import dataclass
from dotenv import load_dotenv

from gateway.errors import ConfigurationError


# Find the .env file relative to this module
BASE_DIR = Path(__file__).resolve().parent.parent
ENV_PATH = BASE_DIR / ".env"

DEFAULT_RPC_URL = "https://api.devnet.solana.com"
SETTLEMENT_STRATEGIES = ("fixed", "poll", "none")


def _env(key: str, default: str = "") -> str:
    return os.getenv(key, default).strip()


def _number(key: str, default: str, cast=float):
    raw = _env(key, default) or default
    try:
        value = cast(raw)
    except ValueError:
        raise ConfigurationError(f"{key} must be a number, got {raw!r}")
    if value < 0:
        raise ConfigurationError(f"{key} must not be negative, got {raw!r}")
    return value


def _log_level() -> str:
    level = (_env("LOG_LEVEL", "INFO") or "INFO").upper()
    return "WARNING" if level == "WARN" else level


@dataclass(frozen=True)
class SolanaConfig:
    """Solana network configuration."""
    rpc_url: str
    rpc_timeout: float
    cluster: str
    explorer_url: str


@dataclass(frozen=True)
class SettlementConfig:
    """How the airdrop flow waits for the transfer to land."""
    strategy: str
    delay_seconds: float


@dataclass(frozen=True)
class ServerConfig:
    """HTTP server configuration."""
    host: str
    port: int
    log_level: str


@dataclass(frozen=True)
class Config:
    """Main configuration container."""
    solana: SolanaConfig
    settlement: SettlementConfig
    server: ServerConfig

    @property
    def rpc_url(self) -> str:
        return self.solana.rpc_url

    @classmethod
    def load(cls, env_file: Path | None = ENV_PATH) -> "Config":
        """Load configuration from environment variables."""
        if env_file is not None:
            load_dotenv(env_file)

        strategy = _env("SETTLEMENT_STRATEGY", "fixed").lower() or "fixed"
        if strategy not in SETTLEMENT_STRATEGIES:
            raise ConfigurationError(
                f"SETTLEMENT_STRATEGY must be one of {', '.join(SETTLEMENT_STRATEGIES)}, got {strategy!r}"
            )

        return cls(
            solana=SolanaConfig(
                rpc_url=_env("RPC_URL", DEFAULT_RPC_URL) or DEFAULT_RPC_URL,
                rpc_timeout=_number("RPC_TIMEOUT_SECONDS", "20"),
                cluster=_env("SOLANA_CLUSTER", "devnet") or "devnet",
                explorer_url=(_env("EXPLORER_URL", "https://explorer.solana.com")
                              or "https://explorer.solana.com").rstrip("/"),
            ),
            settlement=SettlementConfig(
                strategy=strategy,
                delay_seconds=_number("SETTLEMENT_DELAY_SECONDS", "10"),
            ),
            server=ServerConfig(
                host=_env("HOST", "0.0.0.0") or "0.0.0.0",
                port=_number("PORT", "3000", cast=int),
                log_level=_log_level(),
            ),
        )
