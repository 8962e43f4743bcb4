"""
Shared configuration for the x402 weather API.
"""

import os
from dotenv import load_dotenv

load_dotenv()

# Receiving address for paid routes. Empty disables the paywall.
PAY_TO_ADDRESS = os.getenv("SERVER_PAY_TO_ADDRESS", "")

# Facilitator that verifies and settles payments
FACILITATOR_URL = os.getenv("X402_FACILITATOR_URL", "https://x402.org/facilitator")

# Default network
DEFAULT_NETWORK = os.getenv("X402_NETWORK", "base-sepolia")

# Price charged on every paid route
ROUTE_PRICE = "$0.01"

SERVICE_NAME = "API Clima X402"
SERVICE_VERSION = "1.0.0"

# Dev server
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "3000"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()


def paywall_enabled(pay_to: str = PAY_TO_ADDRESS) -> bool:
    """Paid routes are only protected when a receiving address is set."""
    return bool(pay_to and pay_to.strip())
