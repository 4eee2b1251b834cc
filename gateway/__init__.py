"""
Airdrop Gateway - Core Module

This module provides the request handling behind the HTTP layer:
- Configuration management
- Structured logging
- Wallet address validation
- Balance lookup
- Airdrop orchestration with pluggable settlement
"""

from .config import Config
from .errors import (
    ErrorCode,
    GatewayError,
    InvalidAddressError,
    AmountTooLargeError,
    UpstreamFailure,
    ConfigurationError,
)
from .logger import get_logger

__all__ = [
    "Config",
    "ErrorCode",
    "GatewayError",
    "InvalidAddressError",
    "AmountTooLargeError",
    "UpstreamFailure",
    "ConfigurationError",
    "get_logger",
]
