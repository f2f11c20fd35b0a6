# robots_validate/report/json_report.py

"""
Генерация JSON-отчёта по результатам проверки IP-адресов.
"""
import json
from pathlib import Path
from typing import Any, Dict, List


def render_json(entries: List[Dict[str, Any]], output_path: Path | str) -> Path:
    """
    Сохраняет результаты проверки в формате JSON по указанному пути.

    :param entries: список словарей ``{"ip_address": ..., "robot": {...} | None}``
    :param output_path: путь к JSON-файлу
    :return: Path сохранённого файла

    Пример:
    ```python
    from robots_validate.report import render_json
    report_path = render_json(entries, 'reports/robots.json')
    print(f"JSON report saved to: {report_path}")
    ```
    """
    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)

    with output.open('w', encoding='utf-8') as f:
        json.dump(entries, f, ensure_ascii=False, indent=2)

    return output
