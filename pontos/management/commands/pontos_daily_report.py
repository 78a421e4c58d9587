"""Management command to export the daily withdrawal report."""

from pathlib import Path

from django.core.management.base import BaseCommand, CommandError
from django.utils.dateparse import parse_date

from pontos.pdf import DailyWithdrawalPDF
from pontos.services import reports


class Command(BaseCommand):
    help = "Export the withdrawals of a day (default: today) as text, CSV or PDF"

    def add_arguments(self, parser):
        parser.add_argument(
            "--date",
            default=None,
            help="Day to report (YYYY-MM-DD), defaults to today",
        )
        parser.add_argument(
            "--format",
            choices=["text", "csv", "pdf"],
            default="text",
        )
        parser.add_argument(
            "--output",
            default=None,
            help="Write to this path instead of stdout (required for pdf)",
        )

    def handle(self, *args, **options):
        day = None
        if options["date"]:
            try:
                day = parse_date(options["date"])
            except ValueError:
                day = None
            if day is None:
                raise CommandError(f"Invalid date: {options['date']}")

        report = reports.daily_withdrawals(day)
        export = options["format"]
        output = options["output"]

        if export == "pdf":
            if not output:
                raise CommandError("--output is required for pdf")
            Path(output).write_bytes(DailyWithdrawalPDF(report).render())
        else:
            content = report.to_csv() if export == "csv" else report.to_text()
            if output:
                Path(output).write_text(content, encoding="utf-8")
            else:
                self.stdout.write(content, ending="")

        self.stdout.write(
            self.style.SUCCESS(
                f"{len(report.rows)} withdrawals on {report.day_display}, total R$ {report.total:.2f}."
            )
        )
