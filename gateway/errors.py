"""
Error codes and exception hierarchy for the airdrop gateway.
Every error is terminal for the request that raised it.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Optional


# ============================================================
# Error Codes
# ============================================================

class ErrorCode(str, Enum):
    """
    Stable machine-readable error kinds exposed to clients.

    Format: XX_YYY_ZZZ
    - XX: Category (VA=Validation, SO=Solana, CF=Config, SY=System)
    """

    VA_INVALID_ADDRESS = "VA_002_001"
    VA_AMOUNT_TOO_LARGE = "VA_002_003"
    VA_INVALID_REQUEST = "VA_004_001"

    SO_RPC_ERROR = "SO_001_002"

    CF_INVALID_VALUE = "CF_001_002"

    SY_UNEXPECTED_ERROR = "SY_999_999"

    @property
    def category(self) -> str:
        """Get error category from code."""
        prefix = self.value.split("_")[0]
        mapping = {
            "VA": "VALIDATION",
            "SO": "SOLANA",
            "CF": "CONFIG",
            "SY": "SYSTEM",
        }
        return mapping.get(prefix, "SYSTEM")


# ============================================================
# Base Exceptions
# ============================================================

class GatewayError(Exception):
    """Base exception for all gateway errors."""

    status_code = 500

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.SY_UNEXPECTED_ERROR,
        details: Optional[Dict[str, Any]] = None,
        status_code: Optional[int] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}
        if status_code is not None:
            self.status_code = status_code

    def to_dict(self) -> Dict[str, Any]:
        return {"error": self.message, "code": self.code.value}

    def __str__(self) -> str:
        return f"[{self.code.value}] {self.message}"


# ============================================================
# Specific Exception Classes
# ============================================================

class InvalidAddressError(GatewayError):
    """The wallet string is not a valid Solana public key."""

    status_code = 400

    def __init__(self, address: str, message: str = "Invalid wallet address"):
        super().__init__(message, ErrorCode.VA_INVALID_ADDRESS, details={"address": address})
        self.address = address


class AmountTooLargeError(GatewayError):
    """Requested airdrop exceeds the per-request ceiling."""

    status_code = 400

    def __init__(self, lamports: int, max_lamports: int, max_sol: int):
        super().__init__(
            f"Airdrop amount too large (max {max_sol} SOL)",
            ErrorCode.VA_AMOUNT_TOO_LARGE,
            details={"lamports": lamports, "max_lamports": max_lamports},
        )


class RequestValidationFailed(GatewayError):
    """Request body did not match the expected schema."""

    status_code = 400

    def __init__(self, message: str):
        super().__init__(message, ErrorCode.VA_INVALID_REQUEST)


class UpstreamFailure(GatewayError):
    """An RPC adapter call failed; tagged with the stage that failed."""

    status_code = 500

    _PREFIXES = {
        "balance read": "Failed to get balance",
        "initial balance read": "Failed to read initial balance",
        "airdrop submission": "Airdrop failed",
        "post-airdrop balance read": "Failed to read post-airdrop balance",
    }

    def __init__(self, stage: str, cause: str):
        prefix = self._PREFIXES.get(stage, f"RPC call failed during {stage}")
        super().__init__(
            f"{prefix}: {cause}",
            ErrorCode.SO_RPC_ERROR,
            details={"stage": stage},
        )
        self.stage = stage
        self.cause = cause


class ConfigurationError(GatewayError):
    """Configuration errors."""

    def __init__(self, message: str):
        super().__init__(message, ErrorCode.CF_INVALID_VALUE)
