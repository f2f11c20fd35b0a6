# File: robots_validate/report/__init__.py
"""robots_validate.report: сохранение результатов проверки, используется CLI."""

from .json_report import render_json

__all__ = ["render_json"]
