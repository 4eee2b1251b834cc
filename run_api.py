"""
Run the API server for the Solana airdrop gateway.
"""

import uvicorn
from rich.console import Console
from rich.panel import Panel

from gateway.config import Config


def main():
    """Run the API server."""
    config = Config.load()
    host = config.server.host
    port = config.server.port

    Console().print(Panel.fit(
        f"Host:   {host}:{port}\n"
        f"RPC:    {config.rpc_url}\n"
        f"Open:   http://localhost:{port}\n"
        f"Health: http://localhost:{port}/health",
        title="SOLANA AIRDROP GATEWAY",
    ))

    uvicorn.run(
        "api.server:create_app",
        factory=True,
        host=host,
        port=port,
        log_level=config.server.log_level.lower(),
        access_log=True,
    )


if __name__ == "__main__":
    main()
