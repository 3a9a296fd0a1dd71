from __future__ import annotations
import re
from typing import Any

from docvalidator.errors import FormatError
from docvalidator.models.document import DocumentCandidate, DocumentKind
from docvalidator.utils.text import clean, is_digits, only_digits

# Máscaras canônicas: CPF 3-3-3-2, CNPJ 2-3-3-4-2
_MASKS = {
    DocumentKind.CPF: re.compile(r"[0-9]{3}\.[0-9]{3}\.[0-9]{3}-[0-9]{2}"),
    DocumentKind.CNPJ: re.compile(r"[0-9]{2}\.[0-9]{3}\.[0-9]{3}/[0-9]{4}-[0-9]{2}"),
}

# Sequências de um único dígito repetido (00000000000, 111..., 99999999999999)
_REPEATED = frozenset(str(d) * kind.length for d in range(10) for kind in DocumentKind)


def _normalize(value: Any, kind: DocumentKind) -> str:
    """
    Entrada crua ou com a máscara canônica -> só dígitos.
    Levanta FormatError para qualquer outro formato.
    """
    if not isinstance(value, str):
        raise FormatError(f"{kind.value} deve ser texto, recebido {type(value).__name__}")
    s = value.strip()
    if _MASKS[kind].fullmatch(s):
        s = only_digits(s)
    if not is_digits(s):
        raise FormatError(f"{kind.value} com caracteres ou máscara inválidos: {value!r}")
    if len(s) != kind.length:
        raise FormatError(f"{kind.value} deve ter {kind.length} dígitos, recebido {len(s)}")
    return s

# ---------------- Dígitos verificadores ----------------

def _weights(length: int, kind: DocumentKind) -> list[int]:
    """
    Pesos do módulo 11, do dígito mais significativo para o menos.
    CPF começa em length+1 (10..2, 11..2); CNPJ começa em length-7 (5..2 9..2, 6..2 9..2).
    Quando o peso chegaria a 1, volta para 9.
    """
    w = length + 1 if kind is DocumentKind.CPF else length - 7
    out = []
    for _ in range(length):
        out.append(w)
        w -= 1
        if w == 1:
            w = 9
    return out

def _check_digit(digits: str, kind: DocumentKind) -> int:
    total = sum(int(d) * w for d, w in zip(digits, _weights(len(digits), kind)))
    r = total % 11
    return 0 if r < 2 else 11 - r

def compute_check_digits(base: str, kind: DocumentKind | str = DocumentKind.CPF) -> str:
    """
    Calcula os 2 dígitos verificadores para uma base de 9 (CPF) ou 12 (CNPJ) dígitos.

    >>> compute_check_digits("541560490", "CPF")
    '19'
    """
    k = DocumentKind.parse(kind)
    b = clean(base)
    if not is_digits(b) or len(b) != k.base_length:
        raise FormatError(f"Base de {k.value} deve ter {k.base_length} dígitos: {base!r}")
    d1 = _check_digit(b, k)
    d2 = _check_digit(f"{b}{d1}", k)
    return f"{d1}{d2}"

def _check(value: Any, kind: DocumentKind) -> bool:
    try:
        digits = _normalize(value, kind)
    except FormatError:
        return False
    if digits in _REPEATED:
        return False
    base = digits[: kind.base_length]
    return digits[kind.base_length:] == compute_check_digits(base, kind)

# ---------------- Classificação ----------------

def detect_kind(value: Any) -> DocumentKind | None:
    """CPF/CNPJ pela máscara ou pela quantidade de dígitos; None se não reconhece."""
    if not isinstance(value, str):
        return None
    s = value.strip()
    for kind, mask in _MASKS.items():
        if mask.fullmatch(s):
            return kind
    if is_digits(s):
        return DocumentKind.from_length(len(s))
    return None

def parse_document(value: Any, kind: DocumentKind | str | None = None) -> DocumentCandidate:
    """
    Normaliza e classifica sem validar os dígitos verificadores.
    Formato inválido -> DocumentCandidate com digits=None e kind=None.
    kind vazio (None, "") -> detecta pela máscara/tamanho.
    Só levanta InvalidKind (kind desconhecido).
    """
    k = DocumentKind.parse(kind) if kind else detect_kind(value)
    raw = value if isinstance(value, str) else clean(value)
    if k is None:
        return DocumentCandidate(raw=raw)
    try:
        digits = _normalize(value, k)
    except FormatError:
        return DocumentCandidate(raw=raw)
    return DocumentCandidate(raw=raw, digits=digits, kind=k)

# ---------------- CPF ----------------

def is_valid_cpf(cpf: Any) -> bool:
    """
    Valida CPF com cálculo de dígitos verificadores.
    Aceita só dígitos ou a máscara 000.000.000-00.
    """
    return _check(cpf, DocumentKind.CPF)

def format_cpf(cpf: str) -> str:
    n = only_digits(cpf)
    if len(n) != 11:
        return cpf
    return f"{n[0:3]}.{n[3:6]}.{n[6:9]}-{n[9:11]}"

# ---------------- CNPJ ----------------

def is_valid_cnpj(cnpj: Any) -> bool:
    """
    Valida CNPJ com dígitos verificadores.
    Aceita só dígitos ou a máscara 00.000.000/0000-00.
    """
    return _check(cnpj, DocumentKind.CNPJ)

def format_cnpj(cnpj: str) -> str:
    n = only_digits(cnpj)
    if len(n) != 14:
        return cnpj
    return f"{n[0:2]}.{n[2:5]}.{n[5:8]}/{n[8:12]}-{n[12:14]}"

# ---------------- Genéricos ----------------

def validate(value: Any, kind: DocumentKind | str | None = DocumentKind.CPF) -> bool:
    """
    Valida `value` como CPF (padrão) ou CNPJ.
    Formato inválido -> False. Tipo desconhecido -> InvalidKind.
    """
    k = DocumentKind.parse(kind) if kind else DocumentKind.CPF
    return _check(value, k)

def is_valid_document(value: Any) -> bool:
    """Detecta o tipo pela máscara/tamanho e valida."""
    kind = detect_kind(value)
    return kind is not None and _check(value, kind)

def format_document(value: str, kind: DocumentKind | str | None = None) -> str:
    if kind is None:
        kind = DocumentKind.from_length(len(only_digits(value)))
        if kind is None:
            return value
    k = DocumentKind.parse(kind)
    return format_cpf(value) if k is DocumentKind.CPF else format_cnpj(value)

# aliases camelCase
isValidCPF = is_valid_cpf
isValidCNPJ = is_valid_cnpj


class DocumentValidator:
    """
    Fachada sem estado sobre as funções do módulo.
    Pode ser instanciada à vontade e compartilhada entre threads.
    """

    def is_valid_cpf(self, value: Any) -> bool:
        return is_valid_cpf(value)

    def is_valid_cnpj(self, value: Any) -> bool:
        return is_valid_cnpj(value)

    def validate(self, value: Any, kind: DocumentKind | str | None = DocumentKind.CPF) -> bool:
        return validate(value, kind)

    def is_valid_document(self, value: Any) -> bool:
        return is_valid_document(value)

    def parse(self, value: Any, kind: DocumentKind | str | None = None) -> DocumentCandidate:
        return parse_document(value, kind)

    isValidCPF = is_valid_cpf
    isValidCNPJ = is_valid_cnpj
