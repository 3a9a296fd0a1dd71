from __future__ import annotations
import logging, sys
from pathlib import Path

import pandas as pd

from docvalidator.utils.config import log_level

# ----------------- logging -----------------
def get_logger(name: str = "docvalidator", level: int | None = None) -> logging.Logger:
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        fmt = logging.Formatter("[%(levelname)s] %(message)s")
        handler.setFormatter(fmt)
        logger.addHandler(handler)
    logger.setLevel(level if level is not None else log_level())
    return logger

# ----------------- io helpers -----------------
def ensure_parent(path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)

def read_table(path: Path, sheet: int | str = 0) -> pd.DataFrame:
    # dtype=str preserva zeros à esquerda (CPF 089.884.870-31 viraria 8988487031)
    if path.suffix.lower() in (".xlsx", ".xlsm"):
        df = pd.read_excel(path, sheet_name=sheet, engine="openpyxl", dtype=str)
    else:
        df = pd.read_csv(path, dtype=str)
    df.columns = [str(c).strip() for c in df.columns]
    return df

def write_table(df: pd.DataFrame, path: Path, sheet: str = "validacao") -> None:
    ensure_parent(path)
    if path.suffix.lower() in (".xlsx", ".xlsm"):
        with pd.ExcelWriter(path, engine="openpyxl") as xw:
            df.to_excel(xw, index=False, sheet_name=sheet)
    else:
        df.to_csv(path, index=False)
