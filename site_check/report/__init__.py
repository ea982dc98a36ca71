"""site_check.report: Сохранение отчётов о проверках (JSON и HTML)."""

from site_check.report.html_report import render_html
from site_check.report.json_report import render_json

__all__ = ["render_json", "render_html"]
