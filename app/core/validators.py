"""Input format checks shared by the API schemas and the services."""

import re
from typing import Optional

# local-part@domain.tld, no whitespace anywhere (trailing newline included)
EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


def is_valid_email(email: Optional[str]) -> bool:
    """Syntactic check only: no MX lookup, no deliverability guarantee."""
    if not email:
        return False
    return EMAIL_RE.fullmatch(email) is not None


def normalize_email(email: Optional[str]) -> str:
    return (email or "").strip().lower()
