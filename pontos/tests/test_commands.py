"""Tests for the pontos_daily_report management command."""

from io import StringIO

import pytest
from django.core.management import call_command
from django.core.management.base import CommandError

from pontos.services import withdrawals as withdrawal_service


pytestmark = pytest.mark.django_db


def test_text_to_stdout(client_bruno):
    withdrawal_service.withdraw_bonus("4321", "5")
    out = StringIO()

    call_command("pontos_daily_report", stdout=out)

    output = out.getvalue()
    assert "Relatório de Saídas do Dia" in output
    assert "Bruno Lima" in output
    assert "1 withdrawals" in output


def test_csv_to_file(client_bruno, tmp_path):
    withdrawal_service.withdraw_bonus("4321", "5")
    target = tmp_path / "saidas.csv"

    call_command("pontos_daily_report", "--format", "csv", "--output", str(target), stdout=StringIO())

    assert "TOTAL:,R$ 5.00" in target.read_text(encoding="utf-8")


def test_pdf_requires_output(db):
    with pytest.raises(CommandError):
        call_command("pontos_daily_report", "--format", "pdf", stdout=StringIO())


def test_pdf_to_file(db, tmp_path):
    target = tmp_path / "saidas.pdf"

    call_command(
        "pontos_daily_report",
        "--date",
        "2024-01-10",
        "--format",
        "pdf",
        "--output",
        str(target),
        stdout=StringIO(),
    )

    assert target.read_bytes().startswith(b"%PDF")


def test_invalid_date(db):
    with pytest.raises(CommandError):
        call_command("pontos_daily_report", "--date", "10/01/2024", stdout=StringIO())
