import datetime

import pytest
from docx import Document
from sqlalchemy.exc import SQLAlchemyError

from daily_logger.core.exceptions import ExportError, ValidationError
from daily_logger.rendering import WordReportRenderer
from daily_logger.schemas import ActivityInput, DayTimes, ExportOptions, SignUpRequest
from daily_logger.services import export_service
from daily_logger.services.export_service import generate_file_name, generate_report
from daily_logger.services.reconcile_service import reconcile_day
from daily_logger.services.user_service import sign_up_user

JULY_1 = datetime.date(2025, 7, 1)
JULY_31 = datetime.date(2025, 7, 31)


@pytest.fixture()
def user_id(db):
    response = sign_up_user(
        db,
        SignUpRequest(name="Amani O'Tieno", email="amani@example.com", password="secret-pass", roles=["Intern"]),
    )
    return response.id


def test_generate_file_name_strips_punctuation_and_uses_extension():
    assert generate_file_name("Amani O'Tieno", JULY_1, JULY_31, "pdf") == "AmaniOTieno_Report_Jul_01_2025_to_Jul_31_2025.pdf"
    assert generate_file_name("Amani", JULY_1, JULY_31, "word").endswith(".docx")


def test_generate_file_name_falls_back_for_empty_name():
    assert generate_file_name("!!!", JULY_1, JULY_31, "pdf").startswith("User_Report_")


def test_generate_file_name_rejects_unknown_format():
    with pytest.raises(ValidationError):
        generate_file_name("Amani", JULY_1, JULY_31, "odt")


def test_generate_pdf_report_writes_file(db, user_id, tmp_path, print_engine):
    reconcile_day(db, datetime.date(2025, 7, 7), DayTimes(time_in="07:30"), [ActivityInput(content="Orientation")])

    result = generate_report(
        db,
        user_id,
        JULY_1,
        JULY_31,
        ExportOptions(output_format="pdf", document_format="monotone"),
        conclusions="Good month.",
        export_dir=tmp_path,
        print_engine=print_engine,
    )

    assert result.success is True
    assert result.file_name == "AmaniOTieno_Report_Jul_01_2025_to_Jul_31_2025.pdf"
    assert result.media_type == "application/pdf"
    assert (tmp_path / result.file_name).read_bytes().startswith(b"%PDF")
    assert "Orientation" in print_engine.printed[0]


def test_generate_word_report_writes_docx(db, user_id, tmp_path):
    result = generate_report(
        db,
        user_id,
        JULY_1,
        JULY_31,
        ExportOptions(output_format="word"),
        export_dir=tmp_path,
    )

    assert result.success is True
    assert result.file_name.endswith(".docx")
    assert (tmp_path / result.file_name).stat().st_size > 0


def test_unknown_user_reports_error(db, tmp_path, print_engine):
    result = generate_report(db, 404, JULY_1, JULY_31, ExportOptions(), export_dir=tmp_path, print_engine=print_engine)

    assert result.success is False
    assert result.error == "User not found."
    assert list(tmp_path.iterdir()) == []


def test_unknown_output_format_reports_failure(db, user_id, tmp_path):
    result = generate_report(db, user_id, JULY_1, JULY_31, ExportOptions(output_format="odt"), export_dir=tmp_path)

    assert result.success is False
    assert result.error == "Failed to generate report."


def test_word_report_drops_control_characters_from_pasted_text(db, user_id, tmp_path):
    reconcile_day(
        db,
        datetime.date(2025, 7, 7),
        DayTimes(time_in="07:30"),
        [ActivityInput(content="Fixed cable\x0bswitcher", category="Studio\x07")],
    )

    result = generate_report(db, user_id, JULY_1, JULY_31, ExportOptions(output_format="word"), export_dir=tmp_path)

    assert result.success is True
    text = "\n".join(paragraph.text for paragraph in Document(str(tmp_path / result.file_name)).paragraphs)
    assert "Fixed cableswitcher (Studio)" in text


def test_renderer_failure_is_raised_as_export_error(db, user_id, monkeypatch):
    document = export_service.build_report(db, user_id, JULY_1, JULY_31, ExportOptions(output_format="word"))

    def _broken_view(self, view):
        raise ValueError("All strings must be XML compatible")

    monkeypatch.setattr(WordReportRenderer, "render_view", _broken_view)

    with pytest.raises(ExportError):
        WordReportRenderer().render(document, ExportOptions(output_format="word"))


def test_renderer_failure_reports_generic_error(db, user_id, tmp_path, monkeypatch):
    def _broken_view(self, view):
        raise ValueError("All strings must be XML compatible")

    monkeypatch.setattr(WordReportRenderer, "render_view", _broken_view)

    result = generate_report(db, user_id, JULY_1, JULY_31, ExportOptions(output_format="word"), export_dir=tmp_path)

    assert result.success is False
    assert result.error == "Failed to generate report."
    assert list(tmp_path.iterdir()) == []


def test_storage_failure_while_building_reports_generic_error(db, user_id, tmp_path, monkeypatch):
    def _broken_build(*args, **kwargs):
        raise SQLAlchemyError("database is locked")

    monkeypatch.setattr(export_service, "build_report", _broken_build)

    result = generate_report(db, user_id, JULY_1, JULY_31, ExportOptions(output_format="word"), export_dir=tmp_path)

    assert result.success is False
    assert result.error == "Failed to generate report."
