from .config import settings, set_settings, reset_settings, setting, log_level
from .text import only_digits, is_digits, clean
from .validators_br import (
    DocumentValidator,
    compute_check_digits,
    detect_kind,
    parse_document,
    is_valid_cpf, is_valid_cnpj, is_valid_document, validate,
    format_cpf, format_cnpj, format_document,
    isValidCPF, isValidCNPJ,
)

__all__ = [
    "settings", "set_settings", "reset_settings", "setting", "log_level",
    "only_digits", "is_digits", "clean",
    "DocumentValidator", "compute_check_digits", "detect_kind", "parse_document",
    "is_valid_cpf", "is_valid_cnpj", "is_valid_document", "validate",
    "format_cpf", "format_cnpj", "format_document",
    "isValidCPF", "isValidCNPJ",
]
