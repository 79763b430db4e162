# grade_tracker/processing.py
"""Модуль для обработки данных: статистика по всей группе."""
import sys
from typing import List, Dict, Any, Optional

from .models import Student


def get_class_statistics(students: List[Student]) -> Optional[Dict[str, Any]]:
    """Рассчитывает общую статистику по группе студентов.

    Возвращает None для пустого списка. Если ни у кого нет оценок,
    overall_average, overall_highest и overall_lowest равны None.
    """
    if not students:
        return None

    overall_sum = 0.0
    grade_count = 0
    overall_highest = 0.0
    overall_lowest = sys.float_info.max

    for student in students:
        # Студент без оценок вернул бы 0.0 и испортил минимум
        if not student.has_grades:
            continue
        overall_sum += student.average * student.grade_count
        grade_count += student.grade_count
        overall_highest = max(overall_highest, student.highest)
        overall_lowest = min(overall_lowest, student.lowest)

    if grade_count == 0:
        return {
            "total_students": len(students),
            "grade_count": 0,
            "overall_average": None,
            "overall_highest": None,
            "overall_lowest": None,
        }

    return {
        "total_students": len(students),
        "grade_count": grade_count,
        "overall_average": overall_sum / grade_count,
        "overall_highest": overall_highest,
        "overall_lowest": overall_lowest,
    }
