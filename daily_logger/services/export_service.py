"""Report export orchestration: aggregate, render, write the file."""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Sequence

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

from daily_logger.core.config import get_export_dir
from daily_logger.core.exceptions import EntityNotFoundError, ExportError, ValidationError
from daily_logger.rendering import get_renderer
from daily_logger.rendering.print_engine import PrintEngine
from daily_logger.schemas import ExportOptions, ExportResult, KeyContribution
from daily_logger.services.date_format_service import format_short_date, parse_date
from daily_logger.services.report_service import build_report

logger = logging.getLogger(__name__)

FILE_EXTENSIONS = {"pdf": "pdf", "word": "docx"}
_NON_ALPHANUMERIC = re.compile(r"[^A-Za-z0-9]")


def generate_file_name(user_name: str, start, end, output_format: str) -> str:
    """``{name}_Report_{Jul_01_2025}_to_{Jul_31_2025}.{ext}``"""
    sanitized = _NON_ALPHANUMERIC.sub("", user_name or "") or "User"
    extension = FILE_EXTENSIONS.get((output_format or "").lower())
    if extension is None:
        raise ValidationError(f"Unsupported output format: {output_format!r}")
    start_short = format_short_date(parse_date(start))
    end_short = format_short_date(parse_date(end))
    return f"{sanitized}_Report_{start_short}_to_{end_short}.{extension}"


def generate_report(
    db: Session,
    user_id: int,
    start,
    end,
    options: ExportOptions,
    responsibilities: str | None = None,
    key_contributions: Sequence[KeyContribution] = (),
    conclusions: str | None = None,
    *,
    export_dir: Path | None = None,
    print_engine: PrintEngine | None = None,
) -> ExportResult:
    try:
        document = build_report(
            db,
            user_id,
            start,
            end,
            options,
            responsibilities=responsibilities,
            key_contributions=key_contributions,
            conclusions=conclusions,
        )
    except EntityNotFoundError:
        logger.error("Error: User not found. user_id=%s", user_id)
        return ExportResult(success=False, error="User not found.")
    except SQLAlchemyError:
        logger.exception("Error reading report data for user %s", user_id)
        return ExportResult(success=False, error="Failed to generate report.")

    try:
        renderer = get_renderer(options.output_format, options.document_format, print_engine=print_engine)
        file_name = generate_file_name(document.user_name, start, end, renderer.output_format)
        target_dir = Path(export_dir) if export_dir is not None else get_export_dir()
        file_path = renderer.write(document, options, target_dir / file_name)
    except (ExportError, ValidationError, RuntimeError, OSError):
        logger.exception("Error generating report for user %s", user_id)
        return ExportResult(success=False, error="Failed to generate report.")

    logger.info("Report generated successfully: %s", file_path)
    return ExportResult(
        success=True,
        file_path=str(file_path),
        file_name=file_name,
        media_type=renderer.media_type,
    )
