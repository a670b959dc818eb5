# mailguard/verifier/__init__.py

from .syntax_engine import (
    normalize_email,
    passes_quick_guard,
    passes_rfc_validation,
)

from .result import EmailValidationResult
from .tld_registry import TldRegistry
from .email_validator import (
    EmailValidator,
    get_default_validator,
    reset_default_validator,
    validate,
    is_valid,
    is_known_tld,
)

__all__ = [
    "normalize_email",
    "passes_quick_guard",
    "passes_rfc_validation",
    "EmailValidationResult",
    "TldRegistry",
    "EmailValidator",
    "get_default_validator",
    "reset_default_validator",
    "validate",
    "is_valid",
    "is_known_tld",
]
