# mailguard/verifier/result.py
import enum


class EmailValidationResult(str, enum.Enum):
    """Outcome of a validation run. Exactly one per address, no payload."""

    valid = "valid"
    invalid_format = "invalid_format"
    rfc_violation = "rfc_violation"
    invalid_tld = "invalid_tld"

    @property
    def message(self) -> str:
        return _MESSAGES[self]


_MESSAGES = {
    EmailValidationResult.valid: "Valid email address.",
    EmailValidationResult.invalid_format: (
        "Invalid format (must contain one @, no spaces, and a dot in the domain)."
    ),
    EmailValidationResult.rfc_violation: (
        "RFC 5321/5322 violation (illegal characters, dot positions, or length exceeded)."
    ),
    EmailValidationResult.invalid_tld: "Unrecognized top-level domain.",
}
