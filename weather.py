"""
Mock weather data and route handlers.

This module handles:
1. The static city table
2. Randomized weather samples per city
3. JSON documents returned by each route

Handlers are plain functions so they can be called without an HTTP stack.
"""

import random
from dataclasses import dataclass
from datetime import date, datetime, timedelta, timezone
from types import MappingProxyType
from typing import Any, Dict, List, Optional

from config import ROUTE_PRICE, SERVICE_NAME, SERVICE_VERSION
from paywall import PaymentMetadata, com_pagamento


# =============================================================================
# CITY TABLE
# =============================================================================

@dataclass(frozen=True)
class Cidade:
    """Base climate attributes for a city."""
    code: str
    nome: str
    temp: int
    condicao: str


CIDADES = MappingProxyType({
    c.code: c for c in (
        Cidade("sp", "São Paulo", 25, "☀️ Ensolarado"),
        Cidade("rj", "Rio de Janeiro", 28, "⛅ Parcialmente nublado"),
        Cidade("bh", "Belo Horizonte", 23, "🌧️ Chuva leve"),
        Cidade("brasilia", "Brasília", 24, "☁️ Nublado"),
        Cidade("salvador", "Salvador", 30, "☀️ Sol forte"),
        Cidade("recife", "Recife", 29, "⛅ Ensolarado"),
    )
})

DEFAULT_CIDADE = "sp"

# Sample ranges (upper bounds exclusive)
VARIACAO_TEMP = 2
UMIDADE_RANGE = (50, 90)
VENTO_RANGE = (5, 25)

ALERTAS = (
    {"tipo": "chuva", "nivel": "baixo", "mensagem": "Possibilidade de chuva à tarde"},
    {"tipo": "vento", "nivel": "médio", "mensagem": "Ventos fortes esperados"},
)


def get_cidade(code: Optional[str] = None) -> Cidade:
    """Case-insensitive lookup. Unknown or missing codes fall back to São Paulo."""
    return CIDADES.get((code or "").lower(), CIDADES[DEFAULT_CIDADE])


def agora_iso() -> str:
    """Current UTC time, e.g. 2024-05-01T12:00:00.000Z"""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


# =============================================================================
# WEATHER SAMPLE
# =============================================================================

@dataclass
class WeatherSample:
    """
    One randomized weather reading.

    Not persisted; generated fresh for every response.
    """
    cidade: str
    temperatura: int
    condicao: str
    umidade: int
    vento: int
    timestamp: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "cidade": self.cidade,
            "temperatura": self.temperatura,
            "condicao": self.condicao,
            "umidade": self.umidade,
            "vento": self.vento,
            "timestamp": self.timestamp,
        }


def gerar_clima(code: Optional[str] = None) -> WeatherSample:
    """
    Generate a weather sample for a city.

    Args:
        code: City code (case-insensitive). Unknown codes use São Paulo.

    Returns:
        WeatherSample with temperature jittered by +/-2 degrees,
        humidity in [50, 90) and wind speed in [5, 25).
    """
    cidade = get_cidade(code)
    return WeatherSample(
        cidade=cidade.nome,
        temperatura=cidade.temp + random.randint(-VARIACAO_TEMP, VARIACAO_TEMP),
        condicao=cidade.condicao,
        umidade=random.randrange(*UMIDADE_RANGE),
        vento=random.randrange(*VENTO_RANGE),
        timestamp=agora_iso(),
    )


# =============================================================================
# ROUTE HANDLERS
# =============================================================================

def indice() -> Dict[str, Any]:
    """Service description."""
    return {
        "nome": SERVICE_NAME,
        "versao": SERVICE_VERSION,
        "status": "online",
        "rotas": {
            "gratis": [
                "GET /api/cidades",
                "GET /health",
            ],
            "pagas": [
                f"GET /api/clima?cidade=sp ({ROUTE_PRICE})",
                f"GET /api/clima/detalhado?cidade=rj ({ROUTE_PRICE})",
                f"GET /api/clima/alertas?cidade=bh ({ROUTE_PRICE})",
            ],
        },
        "documentacao": "Adicione ?cidade=sp para escolher a cidade",
    }


def listar_cidades() -> Dict[str, Any]:
    codes = list(CIDADES)
    return {
        "cidades": codes,
        "total": len(codes),
        "info": "Use ?cidade=sp nas rotas protegidas",
    }


def saude() -> Dict[str, Any]:
    return {
        "status": "ok",
        "timestamp": agora_iso(),
        "servico": SERVICE_NAME,
    }


def clima_basico(cidade: Optional[str] = DEFAULT_CIDADE,
                 pagamento: Optional[PaymentMetadata] = None) -> Dict[str, Any]:
    """Current weather for one city."""
    return com_pagamento(gerar_clima(cidade).to_dict(), pagamento, ROUTE_PRICE)


def previsao(cidade: Optional[str] = DEFAULT_CIDADE,
             hoje: Optional[date] = None, dias: int = 7) -> List[Dict[str, Any]]:
    """
    Forecast for consecutive days starting today.

    Each day is an independent draw; there is no continuity between days.
    """
    hoje = hoje or date.today()
    entries = []
    for i in range(dias):
        dia = hoje + timedelta(days=i)
        entries.append({"dia": dia.strftime("%d/%m/%Y"), **gerar_clima(cidade).to_dict()})
    return entries


def clima_detalhado(cidade: Optional[str] = DEFAULT_CIDADE,
                    pagamento: Optional[PaymentMetadata] = None,
                    hoje: Optional[date] = None) -> Dict[str, Any]:
    """7-day forecast."""
    documento = {
        "cidade": get_cidade(cidade).nome,
        "previsao7dias": previsao(cidade, hoje),
    }
    return com_pagamento(documento, pagamento, ROUTE_PRICE)


def alertas(cidade: Optional[str] = DEFAULT_CIDADE,
            pagamento: Optional[PaymentMetadata] = None) -> Dict[str, Any]:
    # Fixed list, same for every city
    lista = [dict(a) for a in ALERTAS]
    documento = {
        "cidade": get_cidade(cidade).nome,
        "alertas": lista,
        "ativo": len(lista) > 0,
    }
    return com_pagamento(documento, pagamento, ROUTE_PRICE)
