"""HTML to PDF print engines."""

from __future__ import annotations

import logging

from daily_logger.core.exceptions import ExportError

logger = logging.getLogger(__name__)

# 日本語: US Letter (612x792pt) と 0.5in 余白 / English: US Letter (612x792pt) with 0.5in margins
PAGE_SIZE = "letter"
PAGE_MARGIN = "0.5in"


class PrintEngine:
    """Turns print-ready HTML into PDF bytes."""

    def print_to_pdf(self, html: str) -> bytes:
        raise NotImplementedError


class WeasyPrintEngine(PrintEngine):
    def __init__(self, base_url: str | None = None) -> None:
        self.base_url = base_url

    def print_to_pdf(self, html: str) -> bytes:
        try:
            from weasyprint import CSS, HTML
        except ModuleNotFoundError as exc:
            raise RuntimeError("weasyprint is required for PDF export. Install dependencies first.") from exc

        page_css = CSS(string=f"@page {{ size: {PAGE_SIZE}; margin: {PAGE_MARGIN}; }}")
        try:
            return HTML(string=html, base_url=self.base_url).write_pdf(stylesheets=[page_css])
        except Exception as exc:
            logger.exception("Print engine failed")
            raise ExportError("Failed to print report to PDF.") from exc
