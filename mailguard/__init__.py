"""Offline email address syntax validation: quick guard, RFC 5321/5322 structure, known TLD."""

from .verifier import (
    EmailValidationResult,
    EmailValidator,
    TldRegistry,
    validate,
    is_valid,
    is_known_tld,
)

__version__ = "0.1.0"

__all__ = [
    "EmailValidationResult",
    "EmailValidator",
    "TldRegistry",
    "validate",
    "is_valid",
    "is_known_tld",
]
