# docvalidator/etl/__init__.py
"""Validação em lote de planilhas (CSV/XLSX).

Use como módulo:
    python -m docvalidator.etl.validate_documents --src clientes.csv --column cpf_cnpj
"""
__all__ = []
