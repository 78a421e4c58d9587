"""Formatting and normalization helpers."""

import re
from decimal import Decimal

_NON_DIGITS = re.compile(r"\D")


def only_digits(value: str | None) -> str:
    """Strip everything but digits ("123.456.789-01" -> "12345678901")."""
    if not value:
        return ""
    return _NON_DIGITS.sub("", str(value))


def format_cpf(cpf: str) -> str:
    digits = only_digits(cpf)
    if len(digits) != 11:
        return cpf
    return f"{digits[:3]}.{digits[3:6]}.{digits[6:9]}-{digits[9:]}"


def format_phone(phone: str) -> str:
    """Brazilian display format: (41) 99999-0001 or (41) 3333-0001."""
    digits = only_digits(phone)
    if len(digits) == 11:
        return f"({digits[:2]}) {digits[2:7]}-{digits[7:]}"
    if len(digits) == 10:
        return f"({digits[:2]}) {digits[2:6]}-{digits[6:]}"
    return phone


def format_brl(value) -> str:
    """R$ with two decimals and comma separator (R$ 1.234,50)."""
    amount = Decimal(value).quantize(Decimal("0.01"))
    text = f"{amount:,.2f}"
    return "R$ " + text.replace(",", "_").replace(".", ",").replace("_", ".")
