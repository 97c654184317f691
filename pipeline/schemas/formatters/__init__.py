"""Display formatters for MNI scalar encodings — dates, money, CPF/CNPJ, CEP.

Every function here is total: malformed input never raises, it comes back
either verbatim or as the ``"N/A"`` / ``"0 B"`` sentinel.
"""

from __future__ import annotations

import re
from datetime import date, datetime
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any, Optional

NOT_AVAILABLE = "N/A"

# Compact MNI 2.2 timestamps: YYYYMMDD with an optional HHMMSS tail.
_COMPACT_RE = re.compile(r"^\d{8,14}$")

_NON_DIGIT_RE = re.compile(r"[^\d]")

_SIZE_UNITS = ("B", "KB", "MB", "GB")

_CENTS = Decimal("0.01")


def _digits(value: Any) -> str:
    """Strip formatting characters, keep only digits."""
    return _NON_DIGIT_RE.sub("", str(value))


def _text(value: Any) -> str:
    if value is None:
        return ""
    return str(value).strip()


def _is_iso(text: str) -> bool:
    return "T" in text or "-" in text


def _parse_iso(text: str) -> Optional[datetime]:
    """Parse an ISO-8601 date or timestamp, keeping its wall-clock fields."""
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        pass
    try:
        d = date.fromisoformat(text[:10])
    except ValueError:
        return None
    return datetime(d.year, d.month, d.day)


# -------------------------------------------------------------------- #
# Dates                                                                 #
# -------------------------------------------------------------------- #


def parse_date(value: Any) -> Optional[date]:
    """Return the calendar date of an ISO-8601 or compact MNI value, else None."""
    text = _text(value)
    if not text:
        return None
    if _is_iso(text):
        parsed = _parse_iso(text)
        return parsed.date() if parsed else None
    if _COMPACT_RE.match(text):
        try:
            return date(int(text[0:4]), int(text[4:6]), int(text[6:8]))
        except ValueError:
            return None
    return None


def to_compact_timestamp(value: Any) -> str:
    """Convert a timestamp to the canonical ``YYYYMMDDHHMMSS`` encoding.

    Compact values are returned as-is; ISO-8601 values are rendered from
    their wall-clock fields with the UTC offset dropped; a date-only ISO
    value becomes ``YYYYMMDD`` like its compact spelling.  Anything else
    is returned verbatim so it still sorts deterministically.
    """
    text = _text(value)
    if not text or _COMPACT_RE.match(text):
        return text
    if _is_iso(text):
        parsed = _parse_iso(text)
        if parsed is not None:
            if "T" not in text:
                return parsed.strftime("%Y%m%d")
            return parsed.strftime("%Y%m%d%H%M%S")
    return text


def format_date(value: Any) -> str:
    """Render ``DD/MM/YYYY`` from ISO-8601 or compact ``YYYYMMDD[HHMMSS]``.

    >>> format_date("2025-11-23T08:11:02-03:00")
    '23/11/2025'
    >>> format_date("20251123")
    '23/11/2025'
    """
    if isinstance(value, (date, datetime)):
        return value.strftime("%d/%m/%Y")
    text = _text(value)
    if not text:
        return NOT_AVAILABLE
    if "/" in text:
        return text
    if _is_iso(text):
        parsed = _parse_iso(text)
        if parsed is None:
            return text
        return parsed.strftime("%d/%m/%Y")
    if _COMPACT_RE.match(text):
        return f"{text[6:8]}/{text[4:6]}/{text[0:4]}"
    return text


def format_datetime(value: Any) -> str:
    """Render ``DD/MM/YYYY HH:MM``; date-only input renders the date alone."""
    if isinstance(value, datetime):
        return value.strftime("%d/%m/%Y %H:%M")
    if isinstance(value, date):
        return value.strftime("%d/%m/%Y")
    text = _text(value)
    if not text:
        return NOT_AVAILABLE
    if "/" in text:
        return text
    if _is_iso(text):
        parsed = _parse_iso(text)
        if parsed is None:
            return text
        if "T" not in text:
            return parsed.strftime("%d/%m/%Y")
        return parsed.strftime("%d/%m/%Y %H:%M")
    if _COMPACT_RE.match(text):
        rendered = f"{text[6:8]}/{text[4:6]}/{text[0:4]}"
        if len(text) == 14:
            rendered += f" {text[8:10]}:{text[10:12]}"
        return rendered
    return text


# -------------------------------------------------------------------- #
# Identifiers                                                           #
# -------------------------------------------------------------------- #


def format_document(value: Any, is_legal_entity: bool) -> str:
    """Mask a CPF (11 digits) or CNPJ (14 digits); anything else passes through.

    Args:
        value: Document number, raw digits or already formatted.
        is_legal_entity: True for CNPJ masking, False for CPF masking.
    """
    text = _text(value)
    if not text or text == NOT_AVAILABLE:
        return NOT_AVAILABLE
    digits = _digits(text)
    if is_legal_entity and len(digits) == 14:
        return f"{digits[0:2]}.{digits[2:5]}.{digits[5:8]}/{digits[8:12]}-{digits[12:14]}"
    if not is_legal_entity and len(digits) == 11:
        return f"{digits[0:3]}.{digits[3:6]}.{digits[6:9]}-{digits[9:11]}"
    return text


def format_postal_code(value: Any) -> str:
    text = _text(value)
    if not text:
        return NOT_AVAILABLE
    digits = _digits(text)
    if len(digits) == 8:
        return f"{digits[0:5]}-{digits[5:8]}"
    return text


def format_process_number(value: Any) -> str:
    """Render a 20-digit CNJ number as ``NNNNNNN-DD.AAAA.J.TR.OOOO``."""
    text = _text(value)
    if not text:
        return NOT_AVAILABLE
    digits = _digits(text)
    if len(digits) != 20:
        return text
    return (
        f"{digits[0:7]}-{digits[7:9]}.{digits[9:13]}."
        f"{digits[13:14]}.{digits[14:16]}.{digits[16:20]}"
    )


# -------------------------------------------------------------------- #
# Numbers                                                               #
# -------------------------------------------------------------------- #


def parse_int(value: Any, default: int = 0) -> int:
    """Parse a non-negative integer, returning *default* on garbage."""
    if isinstance(value, bool):
        return default
    if isinstance(value, int):
        return value if value >= 0 else default
    text = _text(value)
    if not text:
        return default
    try:
        number = int(text)
    except ValueError:
        try:
            number = int(float(text))
        except (ValueError, OverflowError):
            return default
    return number if number >= 0 else default


def parse_decimal(value: Any) -> Decimal:
    """Parse a monetary amount rounded to cents, returning ``Decimal(0)`` on garbage."""
    if isinstance(value, Decimal):
        amount = value
    else:
        text = _text(value)
        if not text or isinstance(value, bool):
            return Decimal(0)
        try:
            amount = Decimal(text)
        except InvalidOperation:
            return Decimal(0)
    if not amount.is_finite():
        return Decimal(0)
    try:
        return amount.quantize(_CENTS)
    except InvalidOperation:
        return Decimal(0)


def format_currency(value: Any) -> str:
    """Render an amount in pt-BR reais, e.g. ``R$ 1.234,56``."""
    amount = parse_decimal(value)
    rendered = f"{amount:,.2f}"
    return "R$ " + rendered.replace(",", "_").replace(".", ",").replace("_", ".")


def format_byte_size(value: Any) -> str:
    """Scale a byte count over B/KB/MB/GB (base 1024, two decimals).

    >>> format_byte_size(1536)
    '1.5 KB'
    """
    size = parse_int(value)
    if size <= 0:
        return "0 B"
    index = 0
    scaled = Decimal(size)
    while scaled >= 1024 and index < len(_SIZE_UNITS) - 1:
        scaled /= 1024
        index += 1
    try:
        rounded = scaled.quantize(_CENTS, rounding=ROUND_HALF_UP)
    except InvalidOperation:
        rounded = scaled
    rendered = f"{rounded:.2f}".rstrip("0").rstrip(".")
    return f"{rendered} {_SIZE_UNITS[index]}"
