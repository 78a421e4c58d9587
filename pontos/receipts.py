"""Thermal receipt for bonus withdrawals."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from django.utils import timezone

from pontos.conf import pontos_settings
from pontos.utils import format_brl


@dataclass(frozen=True)
class WithdrawalReceipt:
    """Everything printed on a withdrawal slip."""

    client_name: str
    identifier: str
    amount: Decimal
    remaining_bonus: Decimal
    remaining_points: int
    issued_at: datetime

    @property
    def issued_at_display(self) -> str:
        return timezone.localtime(self.issued_at).strftime("%d/%m/%Y %H:%M")

    def as_dict(self) -> dict:
        return {
            "client_name": self.client_name,
            "identifier": self.identifier,
            "amount": str(self.amount),
            "remaining_bonus": str(self.remaining_bonus),
            "remaining_points": self.remaining_points,
            "issued_at": self.issued_at.isoformat(),
            "issued_at_display": self.issued_at_display,
        }


def _pair(label: str, value: str, width: int) -> str:
    gap = width - len(label) - len(value)
    if gap < 1:
        return f"{label}\n{value.rjust(width)}"
    return f"{label}{' ' * gap}{value}"


def render_receipt(receipt: WithdrawalReceipt, width: int | None = None) -> str:
    """Fixed-width text for an ESC/POS style thermal printer."""
    width = width or pontos_settings.RECEIPT_WIDTH
    rule = "-" * width

    lines = [
        pontos_settings.STORE_NAME.center(width).rstrip(),
        "COMPROVANTE DE RETIRADA".center(width).rstrip(),
        rule,
        "Cliente:",
        receipt.client_name[:width],
        _pair("CPF/Código:", receipt.identifier, width),
        rule,
        _pair("Valor retirado:", format_brl(receipt.amount), width),
        _pair("Saldo restante:", format_brl(receipt.remaining_bonus), width),
        _pair("Pontos restantes:", str(receipt.remaining_points), width),
        rule,
        receipt.issued_at_display.center(width).rstrip(),
        "",
        "_" * width,
        "Assinatura do cliente".center(width).rstrip(),
    ]
    return "\n".join(lines) + "\n"
