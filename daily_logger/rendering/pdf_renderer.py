"""PDF renderer: styled HTML handed to a print engine."""

from __future__ import annotations

from daily_logger.rendering.base import ReportRenderer, ReportView
from daily_logger.rendering.html_renderer import DEFAULT_STYLE, HtmlReportRenderer
from daily_logger.rendering.print_engine import PrintEngine, WeasyPrintEngine


class PdfReportRenderer(ReportRenderer):
    output_format = "pdf"
    extension = "pdf"
    media_type = "application/pdf"

    def __init__(self, style: str = DEFAULT_STYLE, print_engine: PrintEngine | None = None) -> None:
        self._html = HtmlReportRenderer(style)
        super().__init__(self._html.style)
        self.print_engine = print_engine or WeasyPrintEngine()

    def render_view(self, view: ReportView) -> bytes:
        return self.print_engine.print_to_pdf(self._html.render_html(view))
