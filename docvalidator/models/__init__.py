from .document import DocumentKind, DocumentCandidate, ValidationResult

__all__ = [
    "DocumentKind",
    "DocumentCandidate",
    "ValidationResult",
]
