"""
x402 paywall for the paid weather routes.

Verification and settlement are done by the x402 middleware and the
facilitator. This module only declares which routes cost what, installs
the middleware, and reads back what it left on the request.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional

from fastapi import FastAPI, Request
from x402.fastapi.middleware import require_payment

from config import DEFAULT_NETWORK, ROUTE_PRICE, paywall_enabled

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PaidRoute:
    """Price, network and description for one paid endpoint."""
    method: str
    path: str
    price: str = ROUTE_PRICE
    network: str = DEFAULT_NETWORK
    description: str = ""

    @property
    def key(self) -> str:
        return f"{self.method} {self.path}"


def paid_routes(network: str = DEFAULT_NETWORK) -> List[PaidRoute]:
    return [
        PaidRoute("GET", "/api/clima", network=network,
                  description="Dados de clima em tempo real"),
        PaidRoute("GET", "/api/clima/detalhado", network=network,
                  description="Previsão detalhada de 7 dias"),
        PaidRoute("GET", "/api/clima/alertas", network=network,
                  description="Alertas meteorológicos"),
    ]


def install_paywall(
    app: FastAPI,
    pay_to: Optional[str],
    facilitator_url: str,
    routes: Iterable[PaidRoute],
) -> bool:
    """
    Register one x402 middleware per paid route.

    Without a receiving address nothing is installed and every route
    behaves as free.

    Returns:
        True if the paywall was installed
    """
    routes = list(routes)
    pay_to = (pay_to or "").strip()
    if not paywall_enabled(pay_to):
        logger.warning("SERVER_PAY_TO_ADDRESS not set - %d paid routes are open", len(routes))
        return False

    for route in routes:
        # x402 matches on path only; all routes here are GET
        app.middleware("http")(
            require_payment(
                path=route.path,
                price=route.price,
                pay_to_address=pay_to,
                network=route.network,
                description=route.description,
                facilitator_config={"url": facilitator_url},
            )
        )
        logger.info("Paywall on %s: %s (%s)", route.key, route.price, route.network)

    logger.info("Facilitator: %s", facilitator_url)
    return True


# =============================================================================
# PAYMENT METADATA
# =============================================================================

@dataclass(frozen=True)
class PaymentMetadata:
    """What the gate attached to a request. Read only."""
    transaction_hash: Optional[str] = None
    payer: Optional[str] = None


def payment_metadata(request: Request) -> Optional[PaymentMetadata]:
    """
    Read payment details left on request.state by the x402 middleware.

    Returns None when the request did not pass through a paywall.
    """
    verify_response = getattr(request.state, "verify_response", None)
    # x402 settles after the handler and returns the hash in X-PAYMENT-RESPONSE;
    # x402_transaction is only present if something upstream sets it
    transaction = getattr(request.state, "x402_transaction", None)
    if verify_response is None and transaction is None:
        return None
    return PaymentMetadata(
        transaction_hash=transaction,
        payer=getattr(verify_response, "payer", None),
    )


def com_pagamento(
    documento: Dict[str, Any],
    pagamento: Optional[PaymentMetadata],
    valor: str = ROUTE_PRICE,
) -> Dict[str, Any]:
    """Return the handler document with the pagamento block appended."""
    transacao = pagamento.transaction_hash if pagamento else None
    return {
        **documento,
        "pagamento": {
            "transacao": transacao or "N/A",
            "valor": valor,
        },
    }
