# mailguard/verifier/syntax_engine.py
import re
import string
from typing import Optional

# Quick guard: one @, no whitespace, at least one dot after the @
EMAIL_REGEX = re.compile(r"[^@\s]+@[^@\s]+\.[^@\s]+", re.IGNORECASE)

# RFC 5321 path limit (256) minus the angle brackets
MAX_ADDRESS_LENGTH = 254
MAX_LOCAL_PART_LENGTH = 64
MAX_DOMAIN_LENGTH = 253
MAX_LABEL_LENGTH = 63

# RFC 5322 atext (unquoted local part). "_" is included.
ATEXT = frozenset(string.ascii_letters + string.digits + "!#$%&'*+-/=?^_`{|}~")
LDH = frozenset(string.ascii_letters + string.digits + "-")


def passes_quick_guard(addr: Optional[str]) -> bool:
    if not addr or addr.isspace():
        return False
    return EMAIL_REGEX.fullmatch(addr) is not None


def passes_rfc_validation(addr: str) -> bool:
    """
    Structural checks on an address that already passed the quick guard:
      - total length <= 254
      - exactly one @, with something on both sides
      - local part and domain valid on their own
    """
    if len(addr) > MAX_ADDRESS_LENGTH:
        return False

    at = addr.rfind("@")
    if at <= 0 or at == len(addr) - 1:
        return False

    # more than one unquoted @
    if addr.find("@") != at:
        return False

    return is_valid_local_part(addr[:at]) and is_valid_domain(addr[at + 1:])


def is_valid_local_part(local: str) -> bool:
    if not local or len(local) > MAX_LOCAL_PART_LENGTH:
        return False
    if local[0] == "." or local[-1] == ".":
        return False

    prev_dot = False
    for c in local:
        if c == ".":
            if prev_dot:
                return False
            prev_dot = True
        else:
            if c not in ATEXT:
                return False
            prev_dot = False
    return True


def is_valid_domain(domain: str) -> bool:
    """
    Labels separated by dots, each 1-63 chars of letters, digits and hyphens,
    not starting or ending with a hyphen. At least two labels.
    """
    if not domain or len(domain) > MAX_DOMAIN_LENGTH:
        return False
    if domain[0] == "." or domain[-1] == ".":
        return False

    labels = domain.split(".")
    if len(labels) < 2:
        return False
    return all(_is_valid_label(label) for label in labels)


def _is_valid_label(label: str) -> bool:
    if not label or len(label) > MAX_LABEL_LENGTH:
        return False
    if label[0] == "-" or label[-1] == "-":
        return False
    return all(c in LDH for c in label)


def split_address(addr: str) -> tuple:
    """Return (local, domain) split on the last @, or (addr, "") when there is none."""
    local, sep, domain = addr.rpartition("@")
    if not sep:
        return addr, ""
    return local, domain


def normalize_email(addr: Optional[str]) -> str:
    if not addr:
        return ""
    return addr.strip().lower()
