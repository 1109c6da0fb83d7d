# app/formflow/predicates.py
import re
from datetime import date, datetime
from typing import Optional

# local@domain.tld, no whitespace and a single '@', tld at least 2 chars
EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]{2,}$")
# optional +966 / 966 / 0 prefix, then 5 and eight ASCII digits
MOBILE_KSA_RE = re.compile(r"^(\+?966|0)?5\d{8}$", re.ASCII)
# 00:00 - 23:59
TIME_24H_RE = re.compile(r"^([01]\d|2[0-3]):[0-5]\d$", re.ASCII)
# ASCII letters only, 2-100 chars
ALPHA_NAME_RE = re.compile(r"^[A-Za-z]{2,100}$")


def is_email(s) -> bool:
    return bool(EMAIL_RE.match(str(s or "").strip()))


def is_mobile_ksa(s) -> bool:
    return bool(MOBILE_KSA_RE.match(str(s or "").strip()))


def is_time_24h(s) -> bool:
    return bool(TIME_24H_RE.match(str(s or "").strip()))


def is_alpha_name(s) -> bool:
    return bool(ALPHA_NAME_RE.match(str(s or "").strip()))


def within(s: str, min_len: int, max_len: int) -> bool:
    return min_len <= len(s) <= max_len


def parse_date(s) -> Optional[date]:
    """YYYY-MM-DD with ASCII digits, nothing else."""
    text = str(s or "").strip()
    if not text.isascii():
        return None
    try:
        return datetime.strptime(text, "%Y-%m-%d").date()
    except ValueError:
        return None


def parse_int(s) -> Optional[int]:
    """Whole numbers only; "3" and "3.0" give 3, "3.5" and "" give None."""
    text = str(s if s is not None else "").strip()
    if not text or not text.isascii():
        return None
    try:
        return int(text)
    except ValueError:
        pass
    try:
        value = float(text)
    except ValueError:
        return None
    if not value.is_integer():
        return None
    return int(value)


def is_not_past(date_str, today: Optional[date] = None) -> bool:
    """Compared at day granularity against the local calendar: today is valid."""
    d = parse_date(date_str)
    if d is None:
        return False
    today = today or date.today()
    return d >= today


def age_from_dob(dob_str, today: Optional[date] = None) -> Optional[int]:
    """Calendar age in whole years, or None when the date does not parse."""
    dob = parse_date(dob_str)
    if dob is None:
        return None
    today = today or date.today()
    age = today.year - dob.year
    if (today.month, today.day) < (dob.month, dob.day):
        age -= 1
    return age
