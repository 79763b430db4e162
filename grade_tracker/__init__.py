# grade_tracker/__init__.py
"""Консольный учет оценок студентов и статистика по группе."""
