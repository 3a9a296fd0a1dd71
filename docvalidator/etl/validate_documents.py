# docvalidator/etl/validate_documents.py
from __future__ import annotations
import argparse
import sys
from pathlib import Path
from typing import Any

import pandas as pd

from docvalidator.errors import InvalidKind
from docvalidator.etl.common import get_logger, read_table, write_table
from docvalidator.models import DocumentKind, ValidationResult
from docvalidator.utils.config import setting
from docvalidator.utils.validators_br import format_document, parse_document, validate

AUTO = "auto"

def _resolve_kind(kind: DocumentKind | str | None) -> DocumentKind | None:
    if kind is None or str(kind).strip().lower() == AUTO:
        return None
    return DocumentKind.parse(kind)

def validate_value(value: Any, kind: DocumentKind | str | None = AUTO) -> ValidationResult:
    """Valida uma célula. Vazio/NaN -> inválido, sem kind."""
    if value is None or (not isinstance(value, str) and pd.isna(value)):
        return ValidationResult()
    k = _resolve_kind(kind)
    cand = parse_document(value, k)
    if not cand.is_well_formed:
        return ValidationResult(raw=cand.raw, kind=k)
    return ValidationResult(
        raw=cand.raw,
        kind=cand.kind,
        digits=cand.digits,
        valid=validate(cand.digits, cand.kind),
        formatted=format_document(cand.digits, cand.kind),
    )

def validate_series(values: pd.Series, kind: DocumentKind | str | None = AUTO) -> pd.DataFrame:
    """Uma linha por valor: kind, digits, valid, formatted (mesmo índice da série)."""
    _resolve_kind(kind)  # InvalidKind antes de percorrer a série
    rows = [validate_value(v, kind).as_dict() for v in values]
    out = pd.DataFrame(rows, index=values.index, columns=list(ValidationResult.model_fields))
    out["valid"] = out["valid"].astype(bool)
    return out

def validate_frame(df: pd.DataFrame, column: str, kind: DocumentKind | str | None = AUTO) -> pd.DataFrame:
    """Copia `df` acrescentando <column>_kind, <column>_valid e <column>_formatted."""
    if column not in df.columns:
        raise KeyError(f"Coluna '{column}' não encontrada. Encontrei: {list(df.columns)}")
    res = validate_series(df[column], kind)
    out = df.copy()
    out[f"{column}_kind"] = res["kind"]
    out[f"{column}_valid"] = res["valid"]
    out[f"{column}_formatted"] = res["formatted"]
    return out

def summarize(df: pd.DataFrame, column: str) -> dict[str, int]:
    valid = df[f"{column}_valid"]
    # só conta o tipo dos documentos bem formados
    kinds = df[f"{column}_kind"].where(df[f"{column}_formatted"].notna())
    return {
        "total": int(len(df)),
        "valid": int(valid.sum()),
        "invalid": int((~valid).sum()),
        "cpf": int((kinds == DocumentKind.CPF.value).sum()),
        "cnpj": int((kinds == DocumentKind.CNPJ.value).sum()),
    }

def _sheet(v: str) -> int | str:
    """--sheet 1 -> índice 1; qualquer outro texto é o nome da aba"""
    return int(v) if v.isdigit() else v

def _default_out(src: Path) -> Path:
    return src.with_name(f"{src.stem}_validado{src.suffix}")

def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="Valida CPF/CNPJ de uma coluna de CSV/XLSX.")
    ap.add_argument("--src", required=True, help="arquivo .csv ou .xlsx")
    ap.add_argument("--column", default=None, help="coluna com os documentos (default: DOCVALIDATOR_DOCUMENT_COLUMN)")
    ap.add_argument("--kind", default=None, type=str.lower, choices=[AUTO, "cpf", "cnpj"],
                    help="tipo esperado (default: DOCVALIDATOR_KIND)")
    ap.add_argument("--sheet", default=0, type=_sheet, help="aba do Excel (índice ou nome)")
    ap.add_argument("--out", default=None, help="saída (default: <src>_validado.<ext>)")
    ap.add_argument("--fail-on-invalid", action="store_true", help="sai com código 2 se houver inválidos")
    args = ap.parse_args(argv)

    log = get_logger("docvalidator.validate")
    src = Path(args.src)
    column = args.column or setting("DOCVALIDATOR_DOCUMENT_COLUMN")
    kind = args.kind or setting("DOCVALIDATOR_KIND")

    try:
        _resolve_kind(kind)
    except InvalidKind as e:
        log.error(f"DOCVALIDATOR_KIND inválido: {e}")
        return 1

    if not src.exists():
        log.error(f"Faltando: {src}")
        return 1
    df = read_table(src, sheet=args.sheet)
    if column not in df.columns:
        log.error(f"Coluna '{column}' não encontrada em {src.name}: {list(df.columns)}")
        return 1

    log.info(f"Validando {len(df)} linhas de {src.name} (coluna={column}, tipo={kind})")
    out_df = validate_frame(df, column, kind)
    summary = summarize(out_df, column)

    out = Path(args.out) if args.out else _default_out(src)
    write_table(out_df, out)

    log.info(f"CPF: {summary['cpf']} | CNPJ: {summary['cnpj']}")
    if summary["invalid"]:
        log.warning(f"{summary['invalid']} de {summary['total']} documentos inválidos")
    log.info(f"✅ resultado salvo em {out}")

    if args.fail_on_invalid and summary["invalid"]:
        return 2
    return 0

if __name__ == "__main__":
    sys.exit(main())
