"""Report renderers and the output format registry."""

from __future__ import annotations

import logging

from daily_logger.core.exceptions import ValidationError

from .base import ReportRenderer, ReportView, build_report_view
from .docx_renderer import WordReportRenderer
from .html_renderer import DEFAULT_STYLE, HTML_STYLES, HtmlReportRenderer
from .pdf_renderer import PdfReportRenderer
from .print_engine import PrintEngine, WeasyPrintEngine

logger = logging.getLogger(__name__)

OUTPUT_FORMATS = ("pdf", "word")


def get_renderer(
    output_format: str,
    document_format: str = DEFAULT_STYLE,
    print_engine: PrintEngine | None = None,
) -> ReportRenderer:
    """Pick the renderer for an ``(output_format, document_format)`` pair.

    Unknown styles fall back to professional; unknown output formats are rejected.
    """
    style = (document_format or "").strip().lower()
    if style not in HTML_STYLES:
        logger.warning("Unknown document format %r; using %s", document_format, DEFAULT_STYLE)
        style = DEFAULT_STYLE

    normalized = (output_format or "").strip().lower()
    if normalized == "pdf":
        return PdfReportRenderer(style, print_engine=print_engine)
    if normalized == "word":
        return WordReportRenderer(style)
    raise ValidationError(f"Unsupported output format: {output_format!r}")


__all__ = [
    "OUTPUT_FORMATS",
    "HTML_STYLES",
    "DEFAULT_STYLE",
    "ReportRenderer",
    "ReportView",
    "build_report_view",
    "HtmlReportRenderer",
    "PdfReportRenderer",
    "WordReportRenderer",
    "PrintEngine",
    "WeasyPrintEngine",
    "get_renderer",
]
