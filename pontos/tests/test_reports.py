"""Tests for dashboard, history, daily report and exports."""

import csv
import io
from datetime import date, datetime, timedelta
from decimal import Decimal

import pytest
from django.utils import timezone

from pontos.models import Promotion, Transaction, TransactionType
from pontos.pdf import DailyWithdrawalPDF
from pontos.services import reports
from pontos.services import purchases as purchase_service
from pontos.services import withdrawals as withdrawal_service


pytestmark = pytest.mark.django_db


def _withdrawal(client, amount, created_at=None):
    tx = Transaction.objects.create(
        client=client,
        transaction_type=TransactionType.WITHDRAWAL,
        amount=Decimal(amount),
        points=-int(Decimal(amount) * 50),
    )
    if created_at:
        Transaction.objects.filter(pk=tx.pk).update(created_at=created_at)
    return tx


class TestDashboard:
    def test_empty(self, db):
        stats = reports.dashboard()

        assert stats.total_clients == 0
        assert stats.total_points == 0
        assert stats.total_bonus == Decimal("0.00")
        assert stats.active_promotions == 0
        assert stats.as_dict()["total_bonus"] == "0.00"

    def test_aggregates(self, client_ana, client_bruno, promotion_2x):
        client_ana.points = 120
        client_ana.save()
        Promotion.objects.create(name="Desligada", multiplier=3, is_active=False)

        stats = reports.dashboard()

        assert stats.total_clients == 2
        assert stats.total_points == 620
        assert stats.total_bonus == Decimal("10.00")
        assert stats.active_promotions == 1
        assert stats.as_dict()["total_bonus"] == "10.00"


class TestRecentTransactions:
    def test_newest_first_and_limited(self, client_ana):
        for amount in ("1", "2", "3"):
            purchase_service.register_purchase("1234", amount)

        txs = reports.recent_transactions(limit=2)

        assert [tx.points for tx in txs] == [3, 2]


class TestDailyWithdrawals:
    def test_only_todays_withdrawals(self, client_ana, client_bruno):
        purchase_service.register_purchase("1234", "50")
        withdrawal_service.withdraw_bonus("4321", "4")
        _withdrawal(client_bruno, "3", created_at=timezone.now() - timedelta(days=2))

        report = reports.daily_withdrawals()

        assert report.day == timezone.localdate()
        assert len(report.rows) == 1
        assert report.rows[0].client_code == "4321"
        assert report.total == Decimal("4.00")

    def test_local_calendar_day(self, client_bruno):
        tz = timezone.get_current_timezone()
        # 23:30 in Sao Paulo on Jan 10th is already Jan 11th in UTC
        late = timezone.make_aware(datetime(2024, 1, 10, 23, 30), tz)
        early = timezone.make_aware(datetime(2024, 1, 11, 0, 15), tz)
        _withdrawal(client_bruno, "2", created_at=late)
        _withdrawal(client_bruno, "5", created_at=early)

        jan_10 = reports.daily_withdrawals(date(2024, 1, 10))
        jan_11 = reports.daily_withdrawals(date(2024, 1, 11))

        assert jan_10.total == Decimal("2.00")
        assert jan_11.total == Decimal("5.00")
        assert jan_10.rows[0].time_display == "23:30:00"

    def test_csv_export(self, client_bruno):
        tz = timezone.get_current_timezone()
        _withdrawal(client_bruno, "2", created_at=timezone.make_aware(datetime(2024, 1, 10, 9, 0), tz))
        _withdrawal(client_bruno, "3.50", created_at=timezone.make_aware(datetime(2024, 1, 10, 10, 0), tz))

        report = reports.daily_withdrawals(date(2024, 1, 10))
        rows = list(csv.reader(io.StringIO(report.to_csv())))

        assert rows[0] == ["Hora", "Cliente", "Código", "Valor"]
        assert rows[1] == ["09:00:00", "Bruno Lima", "4321", "R$ 2.00"]
        assert rows[2] == ["10:00:00", "Bruno Lima", "4321", "R$ 3.50"]
        assert rows[-1] == ["", "", "TOTAL:", "R$ 5.50"]
        assert report.filename_stem == "saidas-10-01-2024"

    def test_text_export(self, db):
        report = reports.daily_withdrawals(date(2024, 1, 10))
        text = report.to_text()

        assert "FERRAGENS NATAL" in text
        assert "Data: 10/01/2024" in text
        assert "TOTAL: R$ 0.00" in text


class TestDailyWithdrawalPDF:
    def test_render(self, client_bruno):
        for _ in range(60):
            _withdrawal(client_bruno, "1")

        report = reports.daily_withdrawals()
        pdf = DailyWithdrawalPDF(report)
        content = pdf.render()

        assert content.startswith(b"%PDF")
        assert pdf.filename == f"{report.filename_stem}.pdf"

    def test_response(self, db):
        response = DailyWithdrawalPDF(reports.daily_withdrawals(date(2024, 1, 10))).generate_response()

        assert response["Content-Type"] == "application/pdf"
        assert 'filename="saidas-10-01-2024.pdf"' in response["Content-Disposition"]
