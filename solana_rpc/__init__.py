"""
Solana JSON-RPC adapter for the airdrop gateway.
"""

from .client import LAMPORTS_PER_SOL, PublicKey, RpcError, SolanaRPC, lamports_to_sol

__all__ = ["LAMPORTS_PER_SOL", "PublicKey", "RpcError", "SolanaRPC", "lamports_to_sol"]
