from __future__ import annotations


class DocumentError(ValueError):
    """Erro base do validador de documentos."""


class FormatError(DocumentError):
    """Documento com tamanho, caracteres ou máscara inválidos.

    Nunca escapa de is_valid_cpf / is_valid_cnpj / validate: vira ``False``.
    """


class InvalidKind(DocumentError):
    """Tipo de documento desconhecido (nem CPF, nem CNPJ). Erro de uso da API."""
