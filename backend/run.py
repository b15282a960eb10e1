"""
Start the NFT dispenser server with uvicorn
"""

import sys

import uvicorn

from dispenser.dependencies.solana import get_config
from dispenser.utils.solana_error import ConfigurationError


def run_server():
    """Run the dispenser app on the configured host and port"""
    try:
        config = get_config()
    except ConfigurationError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 1

    uvicorn.run("dispenser.main:app", host=config.host, port=config.port)
    return 0


if __name__ == '__main__':
    sys.exit(run_server())
