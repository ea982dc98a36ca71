# site_check/report/json_report.py

"""
Генерация JSON-отчёта для проекта SiteCheck.

Сериализация объекта CheckReport в файл.
"""
import json
from pathlib import Path

from site_check.aggregator import CheckReport


def render_json(report: CheckReport, output_path: Path | str, *, pretty: bool = True) -> Path:
    """
    Сохраняет отчёт report в формате JSON по указанному пути.

    :param report: объект CheckReport с результатами проверок
    :param output_path: путь к JSON-файлу
    :param pretty: отступ 2 вместо однострочного вывода
    :return: Path сохранённого файла
    """
    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)

    with output.open('w', encoding='utf-8') as f:
        json.dump(report.to_dict(), f, ensure_ascii=False, indent=2 if pretty else None)

    return output
