# mailguard/verifier/email_validator.py
import logging
from typing import Optional

from ..config import settings
from .result import EmailValidationResult
from .syntax_engine import passes_quick_guard, passes_rfc_validation, split_address
from .tld_registry import TldRegistry, extract_tld

logger = logging.getLogger("mailguard.verifier")


class EmailValidator:
    """
    Three-step offline email validator:
      1. quick guard (one @, no whitespace, a dot in the domain)
      2. RFC 5321/5322 structural validation
      3. TLD check against the injected registry
    The first failing step decides the result.
    """

    def __init__(self, registry: TldRegistry):
        self.registry = registry

    def validate(self, email: Optional[str]) -> EmailValidationResult:
        if email is None or not passes_quick_guard(email):
            logger.debug("quick guard rejected %r", email)
            return EmailValidationResult.invalid_format

        if not passes_rfc_validation(email):
            logger.debug("rfc validation rejected %r", email)
            return EmailValidationResult.rfc_violation

        _, domain = split_address(email)
        if not self.is_known_tld(domain):
            logger.debug("unknown tld for %r", email)
            return EmailValidationResult.invalid_tld

        return EmailValidationResult.valid

    def is_valid(self, email: Optional[str]) -> bool:
        return self.validate(email) is EmailValidationResult.valid

    def is_known_tld(self, domain: Optional[str]) -> bool:
        tld = extract_tld(domain)
        if tld is None:
            return False
        return self.registry.contains(tld)


# ---------------------------------------------------------
# Lazy process-wide default validator
# ---------------------------------------------------------
_default_validator: Optional[EmailValidator] = None


def get_default_validator() -> EmailValidator:
    """Build the default validator on first use (bundled TLDs unless TLD_FILE is set)."""
    global _default_validator
    if _default_validator is None:
        if settings.TLD_FILE:
            registry = TldRegistry.from_file(settings.TLD_FILE)
        else:
            registry = TldRegistry.load_default()
        _default_validator = EmailValidator(registry)
    return _default_validator


def reset_default_validator() -> None:
    global _default_validator
    _default_validator = None


def validate(email: Optional[str]) -> EmailValidationResult:
    return get_default_validator().validate(email)


def is_valid(email: Optional[str]) -> bool:
    return get_default_validator().is_valid(email)


def is_known_tld(domain: Optional[str]) -> bool:
    return get_default_validator().is_known_tld(domain)
