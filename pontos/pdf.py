"""PDF export of the daily withdrawal report."""

from io import BytesIO

from django.http import HttpResponse
from reportlab.lib.pagesizes import A4
from reportlab.lib.units import cm
from reportlab.pdfgen import canvas

from pontos.conf import pontos_settings
from pontos.services.reports import DailyWithdrawalReport

# Column x positions: Hora, Cliente, Código, Valor
_COLUMNS = (2 * cm, 5 * cm, 13 * cm, 16 * cm)
_ROW_HEIGHT = 0.6 * cm
_BOTTOM_MARGIN = 2.5 * cm


class DailyWithdrawalPDF:
    """
    A4 report: store header, title, date, table and TOTAL footer.

    Long reports continue on new pages with the column headers repeated.
    """

    def __init__(self, report: DailyWithdrawalReport) -> None:
        self.report = report
        self.buffer = BytesIO()
        self.canvas = canvas.Canvas(self.buffer, pagesize=A4)
        self.width, self.height = A4

    @property
    def filename(self) -> str:
        return f"{self.report.filename_stem}.pdf"

    def render(self) -> bytes:
        """Build the document and return the PDF bytes."""
        self._render_header()
        y = self._render_table_headers(self.height - 4 * cm)

        self.canvas.setFont("Helvetica", 10)
        for row in self.report.table():
            if y < _BOTTOM_MARGIN:
                self.canvas.showPage()
                y = self._render_table_headers(self.height - 2 * cm)
                self.canvas.setFont("Helvetica", 10)
            self._draw_row(y, row)
            y -= _ROW_HEIGHT

        self.canvas.line(2 * cm, y + 0.4 * cm, 19 * cm, y + 0.4 * cm)
        self.canvas.setFont("Helvetica-Bold", 10)
        self._draw_row(y - 0.2 * cm, self.report.footer())

        self.canvas.showPage()
        self.canvas.save()
        return self.buffer.getvalue()

    def generate_response(self) -> HttpResponse:
        response = HttpResponse(self.render(), content_type="application/pdf")
        response["Content-Disposition"] = f'attachment; filename="{self.filename}"'
        return response

    def _render_header(self) -> None:
        center = self.width / 2
        self.canvas.setFont("Helvetica-Bold", 18)
        self.canvas.drawCentredString(center, self.height - 1.5 * cm, pontos_settings.STORE_NAME)
        self.canvas.setFont("Helvetica-Bold", 14)
        self.canvas.drawCentredString(center, self.height - 2.5 * cm, "Relatório de Saídas do Dia")
        self.canvas.setFont("Helvetica", 10)
        self.canvas.drawCentredString(
            center, self.height - 3.2 * cm, f"Data: {self.report.day_display}"
        )

    def _render_table_headers(self, y: float) -> float:
        self.canvas.setFont("Helvetica-Bold", 10)
        self._draw_row(y, self.report.HEADER)
        self.canvas.line(2 * cm, y - 0.2 * cm, 19 * cm, y - 0.2 * cm)
        return y - 0.8 * cm

    def _draw_row(self, y: float, row) -> None:
        for x, value in zip(_COLUMNS, row):
            self.canvas.drawString(x, y, str(value)[:40])
