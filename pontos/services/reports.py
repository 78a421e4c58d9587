"""Reporting - dashboard aggregates, history and the daily withdrawal report."""

import csv
import io
from dataclasses import dataclass, field
from datetime import date, datetime, time, timedelta
from decimal import Decimal

from django.db.models import Count, Sum
from django.utils import timezone

from pontos.calculator import CENTS
from pontos.conf import pontos_settings
from pontos.models import Client, Promotion, Transaction, TransactionType


@dataclass
class DashboardStats:
    total_clients: int
    total_points: int
    total_bonus: Decimal
    active_promotions: int

    def as_dict(self) -> dict:
        return {
            "total_clients": self.total_clients,
            "total_points": self.total_points,
            "total_bonus": str(self.total_bonus),
            "active_promotions": self.active_promotions,
        }


@dataclass
class WithdrawalRow:
    created_at: datetime
    client_name: str
    client_code: str
    amount: Decimal

    @property
    def time_display(self) -> str:
        return timezone.localtime(self.created_at).strftime("%H:%M:%S")


@dataclass
class DailyWithdrawalReport:
    """Withdrawals of one local calendar day."""

    day: date
    rows: list[WithdrawalRow] = field(default_factory=list)

    HEADER = ("Hora", "Cliente", "Código", "Valor")

    @property
    def total(self) -> Decimal:
        return sum((row.amount for row in self.rows), Decimal("0.00"))

    @property
    def day_display(self) -> str:
        return self.day.strftime("%d/%m/%Y")

    @property
    def filename_stem(self) -> str:
        return f"saidas-{self.day.strftime('%d-%m-%Y')}"

    def table(self) -> list[tuple[str, str, str, str]]:
        return [
            (row.time_display, row.client_name, row.client_code, f"R$ {row.amount:.2f}")
            for row in self.rows
        ]

    def footer(self) -> tuple[str, str, str, str]:
        return ("", "", "TOTAL:", f"R$ {self.total:.2f}")

    def to_csv(self) -> str:
        buffer = io.StringIO()
        writer = csv.writer(buffer)
        writer.writerow(self.HEADER)
        writer.writerows(self.table())
        writer.writerow(self.footer())
        return buffer.getvalue()

    def to_text(self) -> str:
        lines = [
            pontos_settings.STORE_NAME,
            "Relatório de Saídas do Dia",
            f"Data: {self.day_display}",
            "",
        ]
        for row in self.table():
            lines.append("  ".join(row))
        lines.append(f"TOTAL: R$ {self.total:.2f}")
        return "\n".join(lines) + "\n"

    def as_dict(self) -> dict:
        return {
            "day": self.day.isoformat(),
            "rows": [
                {
                    "created_at": row.created_at.isoformat(),
                    "time": row.time_display,
                    "client_name": row.client_name,
                    "client_code": row.client_code,
                    "amount": str(row.amount),
                }
                for row in self.rows
            ],
            "total": str(self.total),
        }


def dashboard() -> DashboardStats:
    """Recomputed from full scans on every call."""
    totals = Client.objects.aggregate(
        count=Count("pk"),
        points=Sum("points"),
        bonus=Sum("bonus"),
    )
    return DashboardStats(
        total_clients=totals["count"] or 0,
        total_points=totals["points"] or 0,
        total_bonus=(totals["bonus"] or Decimal("0")).quantize(CENTS),
        active_promotions=Promotion.objects.filter(is_active=True).count(),
    )


def recent_transactions(limit: int | None = None) -> list[Transaction]:
    """Newest ledger entries with their client."""
    limit = limit or pontos_settings.HISTORY_LIMIT
    return list(
        Transaction.objects.select_related("client").order_by("-created_at", "-pk")[:limit]
    )


def _local_day_bounds(day: date) -> tuple[datetime, datetime]:
    tz = timezone.get_current_timezone()
    start = timezone.make_aware(datetime.combine(day, time.min), tz)
    end = timezone.make_aware(datetime.combine(day + timedelta(days=1), time.min), tz)
    return start, end


def daily_withdrawals(day: date | None = None) -> DailyWithdrawalReport:
    """
    Withdrawals whose local calendar day equals `day` (default: today).

    Rows are in chronological order.
    """
    day = day or timezone.localdate()
    start, end = _local_day_bounds(day)

    qs = (
        Transaction.objects.select_related("client")
        .filter(
            transaction_type=TransactionType.WITHDRAWAL,
            created_at__gte=start,
            created_at__lt=end,
        )
        .order_by("created_at", "pk")
    )

    return DailyWithdrawalReport(
        day=day,
        rows=[
            WithdrawalRow(
                created_at=tx.created_at,
                client_name=tx.client.name,
                client_code=tx.client.code,
                amount=tx.amount,
            )
            for tx in qs
        ],
    )
