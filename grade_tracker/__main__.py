# grade_tracker/__main__.py
"""Запуск через python -m grade_tracker."""
import sys

from .main import main_cli

sys.exit(main_cli())
