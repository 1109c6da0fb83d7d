# app/formflow/sanitizer.py
import re

_ANGLE_BRACKETS = re.compile(r"[<>]")


def trim(raw) -> str:
    """Choice fields (gender, city, dates) only get their whitespace trimmed."""
    return str(raw or "").strip()


def sanitize(raw) -> str:
    """
    Strip surrounding whitespace and drop every '<' and '>'.
    Stripping again after the removal keeps sanitize(sanitize(x)) == sanitize(x).
    """
    return _ANGLE_BRACKETS.sub("", trim(raw)).strip()


def normalize_email(raw) -> str:
    return sanitize(raw).lower()
