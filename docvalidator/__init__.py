"""Validação de CPF e CNPJ (formato + dígitos verificadores módulo 11)."""
from .errors import DocumentError, FormatError, InvalidKind
from .models import DocumentKind, DocumentCandidate, ValidationResult
from .utils.validators_br import (
    DocumentValidator,
    compute_check_digits,
    detect_kind,
    parse_document,
    is_valid_cpf, is_valid_cnpj, is_valid_document, validate,
    format_cpf, format_cnpj, format_document,
    isValidCPF, isValidCNPJ,
)

__version__ = "0.1.0"

__all__ = [
    "DocumentError", "FormatError", "InvalidKind",
    "DocumentKind", "DocumentCandidate", "ValidationResult",
    "DocumentValidator", "compute_check_digits", "detect_kind", "parse_document",
    "is_valid_cpf", "is_valid_cnpj", "is_valid_document", "validate",
    "format_cpf", "format_cnpj", "format_document",
    "isValidCPF", "isValidCNPJ",
]
