#!/usr/bin/env python3
"""
x402 Weather Server - mock weather data behind an x402 paywall.

Free:  GET /, GET /api/cidades, GET /health
Paid:  GET /api/clima, GET /api/clima/detalhado, GET /api/clima/alertas
"""

import logging
from typing import Any, Dict, Optional

from fastapi import FastAPI, Query, Request

import config
import weather
from paywall import install_paywall, paid_routes, payment_metadata

logger = logging.getLogger(__name__)


def create_app(
    pay_to: Optional[str] = config.PAY_TO_ADDRESS,
    facilitator_url: str = config.FACILITATOR_URL,
    network: str = config.DEFAULT_NETWORK,
) -> FastAPI:
    """Build the app. Paid routes are only gated when pay_to is set."""
    app = FastAPI(title=config.SERVICE_NAME, version=config.SERVICE_VERSION)
    app.state.paywall = install_paywall(app, pay_to, facilitator_url, paid_routes(network))

    @app.get("/")
    async def root() -> Dict[str, Any]:
        return weather.indice()

    @app.get("/api/cidades")
    async def cidades() -> Dict[str, Any]:
        return weather.listar_cidades()

    @app.get("/health")
    async def health() -> Dict[str, Any]:
        """Health check endpoint (not protected)."""
        return weather.saude()

    @app.get("/api/clima")
    async def clima(request: Request, cidade: str = Query(weather.DEFAULT_CIDADE)) -> Dict[str, Any]:
        """Current weather - requires payment."""
        return weather.clima_basico(cidade, payment_metadata(request))

    @app.get("/api/clima/detalhado")
    async def clima_detalhado(request: Request, cidade: str = Query(weather.DEFAULT_CIDADE)) -> Dict[str, Any]:
        """7-day forecast - requires payment."""
        return weather.clima_detalhado(cidade, payment_metadata(request))

    @app.get("/api/clima/alertas")
    async def clima_alertas(request: Request, cidade: str = Query(weather.DEFAULT_CIDADE)) -> Dict[str, Any]:
        """Weather alerts - requires payment."""
        return weather.alertas(cidade, payment_metadata(request))

    return app


# ASGI entry point (uvicorn server:app)
app = create_app()


if __name__ == "__main__":
    import uvicorn

    logging.basicConfig(
        level=config.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    print(f"Starting {config.SERVICE_NAME} v{config.SERVICE_VERSION}...")
    print(f"Pay to: {config.PAY_TO_ADDRESS or '(not set - paid routes are free)'}")
    print(f"Network: {config.DEFAULT_NETWORK}")
    print(f"Facilitator: {config.FACILITATOR_URL}")
    print(f"\nTest with: curl http://localhost:{config.PORT}/api/clima?cidade=rj")
    uvicorn.run(app, host=config.HOST, port=config.PORT)
