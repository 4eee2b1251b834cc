"""
Validators for gateway requests.
Wallet strings are parsed before any network call is made.
"""

from __future__ import annotations

from gateway.errors import InvalidAddressError
from solana_rpc.client import PublicKey


def validate_wallet_address(value: str) -> PublicKey:
    """Parse a base58 wallet string into a 32-byte public key."""
    if not isinstance(value, str):
        raise InvalidAddressError(repr(value))
    try:
        return PublicKey.from_base58(value)
    except ValueError:
        raise InvalidAddressError(value) from None
