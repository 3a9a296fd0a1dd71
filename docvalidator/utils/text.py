from __future__ import annotations
import re
from typing import Any, Optional

_NON_DIGIT = re.compile(r"[^0-9]")
_ASCII_DIGITS = re.compile(r"[0-9]+")

def only_digits(s: Optional[str]) -> str:
    """'541.560.490-19' -> '54156049019' (só dígitos ASCII)"""
    return _NON_DIGIT.sub("", s or "")

def is_digits(s: Optional[str]) -> bool:
    # str.isdigit aceita '²' e dígitos de outras escritas
    return bool(s) and _ASCII_DIGITS.fullmatch(s) is not None

def clean(v: Any) -> str:
    if v is None:
        return ""
    return str(v).strip()

