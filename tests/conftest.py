from __future__ import annotations
from pathlib import Path
import pytest
import pandas as pd

from docvalidator.utils.config import reset_settings

# ---------- CONFIG LIMPA A CADA TESTE ----------

@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    for k in ("DOCVALIDATOR_LOG_LEVEL", "DOCVALIDATOR_DOCUMENT_COLUMN", "DOCVALIDATOR_KIND"):
        monkeypatch.delenv(k, raising=False)
    reset_settings()
    yield
    reset_settings()

# ---------- FIXTURES DE DADOS BÁSICOS ----------

@pytest.fixture
def documents_df() -> pd.DataFrame:
    return pd.DataFrame([
        {"nome": "Ana", "documento": "541.560.490-19"},
        {"nome": "Bruno", "documento": "18440985088"},
        {"nome": "Cooperativa", "documento": "32.609.453/0001-06"},
        {"nome": "Empresa X", "documento": "47.102.248/0011-27"},
        {"nome": "Placeholder", "documento": "111.111.111-11"},
        {"nome": "Vazio", "documento": None},
        {"nome": "Lixo", "documento": "abc"},
    ])

@pytest.fixture
def documents_csv(tmp_path: Path, documents_df) -> Path:
    out = tmp_path / "clientes.csv"
    documents_df.to_csv(out, index=False)
    return out
