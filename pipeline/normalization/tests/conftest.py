"""Shared fixtures: the same processo expressed in both MNI dialects."""

from __future__ import annotations

import pytest

NUMERO = "01234567820258260001"


@pytest.fixture
def raw_mni22() -> dict:
    """MNI 2.2 shape: scalars inside ``attributes`` bags, compact timestamps."""
    return {
        "dadosBasicos": {
            "attributes": {
                "numero": NUMERO,
                "classeProcessual": "7",
                "nivelSigilo": "0",
                "dataAjuizamento": "20250310143000",
                "codigoLocalidade": "26",
                "competencia": "1",
            },
            "polo": [
                {
                    "attributes": {"polo": "AT"},
                    "parte": {
                        "pessoa": {
                            "attributes": {
                                "nome": "Maria da Silva",
                                "tipoPessoa": "fisica",
                                "numeroDocumentoPrincipal": "12345678901",
                                "dataNascimento": "19800115",
                            },
                            "endereco": {
                                "attributes": {"cep": "01310100"},
                                "logradouro": "Av. Paulista",
                                "numero": "1000",
                                "bairro": "Bela Vista",
                                "cidade": "São Paulo",
                                "estado": "SP",
                            },
                        },
                        "advogado": {
                            "attributes": {
                                "nome": "João Souza",
                                "inscricao": "SP123456",
                                "numeroDocumentoPrincipal": "98765432100",
                            }
                        },
                    },
                },
                {
                    "attributes": {"polo": "PA"},
                    "parte": [
                        {
                            "pessoa": {
                                "attributes": {
                                    "nome": "Banco Exemplo S.A.",
                                    "tipoPessoa": "juridica",
                                    "numeroDocumentoPrincipal": "12345678000199",
                                }
                            }
                        }
                    ],
                },
            ],
            "assunto": [
                {"attributes": {"principal": "true"}, "codigoNacional": "7780"},
                {"attributes": {"principal": "false"}, "codigoNacional": "10433"},
            ],
            "prioridade": ["Idoso"],
            "processoVinculado": {
                "attributes": {"numeroProcesso": "09876543220248260001", "vinculo": "Conexão"}
            },
            "orgaoJulgador": {"attributes": {"codigoOrgao": "1234", "nomeOrgao": "1ª Vara Cível"}},
            "valorCausa": "15000.50",
            "outroParametro": [{"attributes": {"nome": "ritoProcessual", "valor": "Ordinário"}}],
        },
        "movimento": [
            {
                "attributes": {"identificadorMovimento": "101", "dataHora": "20250310143000"},
                "movimentoLocal": {
                    "attributes": {"codigoMovimento": "26", "descricao": "Distribuído por sorteio"}
                },
                "complemento": "Distribuição automática",
            },
            {
                "attributes": {"identificadorMovimento": "102", "dataHora": "20251123081102"},
                "movimentoLocal": {
                    "attributes": {"codigoMovimento": "85", "descricao": "Petição juntada"}
                },
                "complemento": ["Petição intermediária", "Emenda"],
            },
        ],
        "documento": [
            {
                "attributes": {
                    "idDocumento": "D1",
                    "descricao": "Petição Inicial",
                    "mimetype": "application/pdf",
                    "nivelSigilo": "0",
                    "movimento": "101",
                    "dataHora": "20250310143000",
                    "tipoDocumento": "58",
                },
                "outroParametro": [
                    {"attributes": {"nome": "tamanho", "valor": "1536"}},
                    {"attributes": {"nome": "rotulo", "valor": "Inicial"}},
                ],
            },
            {
                "attributes": {
                    "idDocumento": "D2",
                    "descricao": "Procuração",
                    "mimetype": "text/html",
                    "nivelSigilo": "5",
                    "movimento": "102",
                    "dataHora": "20251123081102",
                },
                "outroParametro": {"attributes": {"nome": "tamanho", "valor": "2048"}},
            },
            {
                "attributes": {
                    "idDocumento": "D3",
                    "descricao": "Certidão",
                    "mimetype": "application/pdf",
                }
            },
        ],
    }


@pytest.fixture
def raw_mni30() -> dict:
    """MNI 3.0 shape: nested ``dadosBasicos``, direct fields, ISO-8601 timestamps."""
    return {
        "dadosBasicos": {
            "dadosBasicos": {
                "numero": NUMERO,
                "classeProcessual": 7,
                "nivelSigilo": 0,
                "dataAjuizamento": "2025-03-10T14:30:00-03:00",
                "codigoLocalidade": "26",
                "competencia": "1",
                "polo": [
                    {
                        "polo": "AT",
                        "parte": [
                            {
                                "pessoa": {
                                    "qualificacaoPessoa": "FIS",
                                    "dadosBasicos": {
                                        "nome": "Maria da Silva",
                                        "numeroDocumentoPrincipal": "12345678901",
                                        "dataNascimento": "1980-01-15",
                                    },
                                    "endereco": [
                                        {
                                            "cep": "01310100",
                                            "logradouro": "Av. Paulista",
                                            "numero": "1000",
                                            "bairro": "Bela Vista",
                                            "cidade": "São Paulo",
                                            "estado": "SP",
                                        }
                                    ],
                                },
                                "advogado": [
                                    {
                                        "nome": "João Souza",
                                        "inscricao": "SP123456",
                                        "numeroDocumentoPrincipal": "98765432100",
                                    }
                                ],
                            }
                        ],
                    },
                    {
                        "polo": "PA",
                        "parte": {
                            "pessoa": {
                                "qualificacaoPessoa": "JUR",
                                "dadosBasicos": {
                                    "nome": "Banco Exemplo S.A.",
                                    "numeroDocumentoPrincipal": "12345678000199",
                                },
                            }
                        },
                    },
                ],
                "assunto": [
                    {"principal": True, "codigoNacional": 7780},
                    {"principal": "N", "codigoNacional": 10433},
                ],
                "prioridade": "Idoso",
                "processoVinculado": [
                    {"numeroProcesso": "09876543220248260001", "vinculo": "Conexão"}
                ],
                "orgaoJulgador": {"codigo": "1234", "nome": "1ª Vara Cível", "instancia": "ORIG"},
                "valorCausa": 15000.50,
                "outroParametro": [{"nome": "ritoProcessual", "valor": "Ordinário"}],
            }
        },
        "movimento": [
            {
                "idMovimento": "102",
                "dataHora": "2025-11-23T08:11:02-03:00",
                "movimentoLocal": {"codigoMovimento": 85, "descricao": "Petição juntada"},
                "complemento": ["Petição intermediária", "Emenda"],
            },
            {
                "idMovimento": "101",
                "dataHora": "2025-03-10T14:30:00-03:00",
                "movimentoLocal": {"codigoMovimento": 26, "descricao": "Distribuído por sorteio"},
                "complemento": ["Distribuição automática"],
            },
        ],
        "documento": [
            {
                "idDocumento": "D1",
                "descricao": "Petição Inicial",
                "conteudo": {"mimetype": "application/pdf"},
                "tamanhoConteudo": 1536,
                "nivelSigilo": 0,
                "idMovimento": "101",
                "dataHora": "2025-03-10T14:30:00-03:00",
                "tipoDocumento": "58",
                "outroParametro": [{"nome": "rotulo", "valor": "Inicial"}],
            },
            {
                "idDocumento": "D2",
                "descricao": "Procuração",
                "conteudo": {"mimetype": "text/html"},
                "tamanhoConteudo": "2048",
                "nivelSigilo": 5,
                "idMovimento": "102",
                "dataHora": "2025-11-23T08:11:02-03:00",
            },
            {
                "idDocumento": "D3",
                "descricao": "Certidão",
                "conteudo": {"mimetype": "application/pdf"},
            },
        ],
    }
