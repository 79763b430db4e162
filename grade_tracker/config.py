# grade_tracker/config.py
"""Настройки приложения: тексты меню, разделители и параметры логирования."""
import logging

# --- КОНФИГУРАЦИЯ ---
MENU_TITLE = "--- Grade Tracker Menu ---"
MENU_OPTIONS = {
    1: "Add New Student",
    2: "Display Summary Report",
    0: "Exit",
}
MENU_PROMPT = "Enter your choice: "

REPORT_HEADER = "--- Student Grade Summary Report ---"
OVERALL_HEADER = "--- Overall Class Statistics ---"
STUDENT_SEPARATOR = "-" * 20
REPORT_FOOTER = "-" * 34

# Логи идут в stderr, чтобы не смешиваться с интерактивным выводом
LOG_LEVEL = logging.WARNING
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(level: int = LOG_LEVEL):
    """Один раз настраивает корневой логгер для консольного запуска."""
    logging.basicConfig(level=level, format=LOG_FORMAT)
