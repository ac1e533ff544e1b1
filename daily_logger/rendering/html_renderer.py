"""Print-ready HTML in one of the four report styles."""

from __future__ import annotations

from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape
from markupsafe import Markup, escape

from daily_logger.rendering.base import SECTION_TITLES, ReportRenderer, ReportView

# 日本語: パッケージ同梱のレポート用テンプレート / English: Report templates bundled with the package
TEMPLATE_DIR = Path(__file__).resolve().parents[1] / "templates"

HTML_STYLES = ("professional", "monotone", "simple", "creative")
DEFAULT_STYLE = "professional"


def _nl2br(value) -> Markup:
    # 日本語: エスケープ後に改行を <br> へ / English: Escape first, then keep line breaks
    if value is None:
        return Markup("")
    return Markup("<br>").join(escape(line) for line in str(value).splitlines())


def build_environment() -> Environment:
    env = Environment(
        loader=FileSystemLoader(str(TEMPLATE_DIR)),
        autoescape=select_autoescape(["html", "j2"]),
        trim_blocks=True,
        lstrip_blocks=True,
    )
    env.filters["nl2br"] = _nl2br
    return env


_environment = build_environment()


class HtmlReportRenderer(ReportRenderer):
    output_format = "html"
    extension = "html"
    media_type = "text/html"

    def __init__(self, style: str = DEFAULT_STYLE) -> None:
        super().__init__(style if style in HTML_STYLES else DEFAULT_STYLE)

    def render_html(self, view: ReportView) -> str:
        template = _environment.get_template(f"report/{self.style}.html.j2")
        return template.render(report=view, titles=SECTION_TITLES)

    def render_view(self, view: ReportView) -> bytes:
        return self.render_html(view).encode("utf-8")
