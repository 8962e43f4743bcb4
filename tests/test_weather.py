"""Tests for the weather sample generator and route handlers."""

from datetime import datetime

import pytest

from paywall import PaymentMetadata
from weather import (
    ALERTAS,
    CIDADES,
    alertas,
    clima_basico,
    clima_detalhado,
    gerar_clima,
    get_cidade,
    indice,
    listar_cidades,
    saude,
)


class TestCityTable:

    def test_six_cities(self):
        assert list(CIDADES) == ["sp", "rj", "bh", "brasilia", "salvador", "recife"]

    def test_table_is_read_only(self):
        with pytest.raises(TypeError):
            CIDADES["poa"] = CIDADES["sp"]

    def test_lookup_is_case_insensitive(self):
        assert get_cidade("RJ").nome == "Rio de Janeiro"
        assert get_cidade("Brasilia").nome == "Brasília"

    @pytest.mark.parametrize("code", [None, "", "xyz", "porto-alegre"])
    def test_unknown_falls_back_to_sao_paulo(self, code):
        assert get_cidade(code).code == "sp"


class TestGerarClima:

    @pytest.mark.parametrize("code", list(CIDADES))
    def test_city_name_matches_table(self, code):
        assert gerar_clima(code).cidade == CIDADES[code].nome

    def test_missing_code_uses_default(self):
        assert gerar_clima().cidade == "São Paulo"
        assert gerar_clima("nowhere").cidade == "São Paulo"

    @pytest.mark.parametrize("code", list(CIDADES))
    def test_values_stay_in_range(self, code):
        base = CIDADES[code].temp
        for _ in range(200):
            sample = gerar_clima(code)
            assert base - 2 <= sample.temperatura <= base + 2
            assert 50 <= sample.umidade < 90
            assert 5 <= sample.vento < 25
            assert sample.condicao == CIDADES[code].condicao

    def test_timestamp_is_iso_utc(self):
        ts = gerar_clima("sp").timestamp
        assert ts.endswith("Z")
        datetime.fromisoformat(ts.replace("Z", "+00:00"))

    def test_to_dict_keys(self):
        assert list(gerar_clima("bh").to_dict()) == [
            "cidade", "temperatura", "condicao", "umidade", "vento", "timestamp",
        ]


class TestFreeHandlers:

    def test_indice(self):
        doc = indice()
        assert doc["nome"] == "API Clima X402"
        assert doc["versao"] == "1.0.0"
        assert doc["status"] == "online"
        assert doc["rotas"]["gratis"] == ["GET /api/cidades", "GET /health"]
        assert len(doc["rotas"]["pagas"]) == 3
        assert "documentacao" in doc

    def test_listar_cidades(self):
        doc = listar_cidades()
        assert doc["cidades"] == list(CIDADES)
        assert doc["total"] == 6

    def test_saude(self):
        doc = saude()
        assert doc["status"] == "ok"
        assert doc["servico"] == "API Clima X402"
        assert doc["timestamp"].endswith("Z")


class TestPaidHandlers:

    def test_clima_basico_without_payment(self):
        doc = clima_basico("rj")
        assert doc["cidade"] == "Rio de Janeiro"
        assert doc["pagamento"] == {"transacao": "N/A", "valor": "$0.01"}

    def test_clima_basico_echoes_transaction(self):
        doc = clima_basico("rj", PaymentMetadata(transaction_hash="0xabc"))
        assert doc["pagamento"]["transacao"] == "0xabc"

    def test_detalhado_has_seven_consecutive_days(self, hoje):
        doc = clima_detalhado("salvador", hoje=hoje)
        dias = [entry["dia"] for entry in doc["previsao7dias"]]
        assert dias == [
            "28/12/2024", "29/12/2024", "30/12/2024", "31/12/2024",
            "01/01/2025", "02/01/2025", "03/01/2025",
        ]
        assert doc["cidade"] == "Salvador"
        assert all(entry["cidade"] == "Salvador" for entry in doc["previsao7dias"])

    def test_detalhado_entries_start_with_day_label(self, hoje):
        entry = clima_detalhado("sp", hoje=hoje)["previsao7dias"][0]
        assert list(entry)[0] == "dia"

    def test_detalhado_unknown_city(self):
        assert clima_detalhado("zzz")["cidade"] == "São Paulo"

    @pytest.mark.parametrize("code", ["sp", "recife", "unknown"])
    def test_alertas_fixed_for_every_city(self, code):
        doc = alertas(code)
        assert doc["alertas"] == list(ALERTAS)
        assert len(doc["alertas"]) == 2
        assert doc["ativo"] is True

    def test_alertas_returns_copies(self):
        alertas("sp")["alertas"][0]["nivel"] = "alto"
        assert ALERTAS[0]["nivel"] == "baixo"
