"""Word (.docx) renderer built with python-docx."""

from __future__ import annotations

import io
import re

from docx import Document
from docx.enum.text import WD_ALIGN_PARAGRAPH
from docx.oxml.ns import qn
from docx.shared import Inches, Pt, RGBColor

from daily_logger.rendering.base import SECTION_TITLES, ReportRenderer, ReportView
from daily_logger.rendering.html_renderer import DEFAULT_STYLE

# 日本語: XML 1.0で使えない制御文字 / English: Control characters XML 1.0 cannot carry
_XML_ILLEGAL = re.compile("[\x00-\x08\x0b\x0c\x0e-\x1f\ufffe\uffff]")

# 日本語: スタイルごとのフォントとアクセント色 / English: Per-style body font, heading font and accent colour
WORD_PALETTES = {
    "professional": {"body": "Times New Roman", "heading": "Times New Roman", "accent": "4CAF50", "text": "2C3E50"},
    "monotone": {"body": "Courier New", "heading": "Courier New", "accent": "000000", "text": "000000"},
    "simple": {"body": "Georgia", "heading": "Georgia", "accent": "333333", "text": "333333"},
    "creative": {"body": "Roboto", "heading": "Lora", "accent": "546E7A", "text": "263238"},
}


def _xml_safe(text) -> str:
    return _XML_ILLEGAL.sub("", text or "")


class WordReportRenderer(ReportRenderer):
    output_format = "word"
    extension = "docx"
    media_type = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"

    def __init__(self, style: str = DEFAULT_STYLE) -> None:
        super().__init__(style if style in WORD_PALETTES else DEFAULT_STYLE)
        self.palette = WORD_PALETTES[self.style]

    def _setup(self, doc) -> None:
        section = doc.sections[0]
        section.page_width = Inches(8.5)
        section.page_height = Inches(11)
        for side in ("top_margin", "bottom_margin", "left_margin", "right_margin"):
            setattr(section, side, Inches(0.5))

        normal = doc.styles["Normal"]
        normal.font.name = self.palette["body"]
        normal.font.size = Pt(11)
        normal.font.color.rgb = RGBColor.from_string(self.palette["text"])
        normal._element.rPr.rFonts.set(qn("w:eastAsia"), self.palette["body"])

    def _heading(self, doc, text: str, level: int = 1):
        heading = doc.add_heading(level=level)
        run = heading.add_run(_xml_safe(text))
        run.font.name = self.palette["heading"]
        run.font.color.rgb = RGBColor.from_string(self.palette["accent"])
        return heading

    def _multiline(self, doc, text: str) -> None:
        for line in _xml_safe(text).splitlines() or [""]:
            doc.add_paragraph(line)

    def _activity(self, doc, line, style: str = "List Bullet") -> None:
        paragraph = doc.add_paragraph(style=style)
        if line.prefix:
            paragraph.add_run(_xml_safe(line.prefix)).bold = True
        paragraph.add_run(_xml_safe(line.content))
        if line.category:
            paragraph.add_run(f" ({_xml_safe(line.category)})").italic = True

    def _header(self, doc, view: ReportView) -> None:
        title = doc.add_paragraph()
        title.alignment = WD_ALIGN_PARAGRAPH.CENTER
        run = title.add_run(_xml_safe(view.title))
        run.bold = True
        run.font.size = Pt(20)
        run.font.name = self.palette["heading"]
        run.font.color.rgb = RGBColor.from_string(self.palette["accent"])

        period = doc.add_paragraph(_xml_safe(f"Reporting Period: {view.reporting_period}"))
        period.alignment = WD_ALIGN_PARAGRAPH.CENTER
        generated = doc.add_paragraph(f"Generated on {view.generated_on}")
        generated.alignment = WD_ALIGN_PARAGRAPH.CENTER

    def _section(self, doc, view: ReportView, name: str) -> None:
        if name == "roles":
            paragraph = doc.add_paragraph()
            paragraph.add_run(f"{SECTION_TITLES['roles']}: ").bold = True
            paragraph.add_run(_xml_safe(view.roles))
            return

        self._heading(doc, SECTION_TITLES[name], level=1)
        if name == "work_schedule":
            for line in view.work_schedule:
                doc.add_paragraph(_xml_safe(line), style="List Bullet")
        elif name == "responsibilities":
            self._multiline(doc, view.responsibilities)
        elif name == "key_contributions":
            for index, contribution in enumerate(view.key_contributions, start=1):
                self._heading(doc, f"{index}. {contribution.title}", level=2)
                self._multiline(doc, contribution.content)
        elif name == "daily_log":
            for day in view.days:
                self._heading(doc, day.heading, level=2)
                doc.add_paragraph(f"Time In: {day.time_in} | Time Out: {day.time_out}")
                for line in day.activities:
                    self._activity(doc, line)
                if day.special_activities:
                    self._heading(doc, SECTION_TITLES["special_activities"], level=3)
                    for line in day.special_activities:
                        self._activity(doc, line)
        elif name == "conclusions":
            self._multiline(doc, view.conclusions)

    def _signature(self, doc, view: ReportView) -> None:
        doc.add_paragraph("")
        table = doc.add_table(rows=3, cols=2)
        table.cell(0, 0).text = "______________________________"
        table.cell(0, 1).text = "______________________________"
        table.cell(1, 0).text = _xml_safe(view.user_name)
        table.cell(1, 1).text = "Supervisor Signature"
        table.cell(2, 0).text = "Employee Signature"
        table.cell(2, 1).text = "Date: ________________"

    def build_document(self, view: ReportView):
        doc = Document()
        self._setup(doc)
        self._header(doc, view)
        for name in view.sections:
            self._section(doc, view, name)
        self._signature(doc, view)
        return doc

    def render_view(self, view: ReportView) -> bytes:
        buffer = io.BytesIO()
        self.build_document(view).save(buffer)
        return buffer.getvalue()
