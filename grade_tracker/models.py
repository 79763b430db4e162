# grade_tracker/models.py
"""Модуль, определяющий основную модель данных Student."""
import logging
import math
from decimal import Decimal, ROUND_HALF_UP
from typing import List

from .config import STUDENT_SEPARATOR

logger = logging.getLogger(__name__)


def format_score(value: float) -> str:
    """Форматирует балл с двумя знаками, округляя половину вверх (0.125 -> 0.13)."""
    if not math.isfinite(value):
        return f"{value:.2f}"
    # repr дает кратчайшую запись: Decimal(2.675) было бы 2.67499...
    return str(Decimal(repr(value)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


class Student:
    """Представляет студента с его именем и списком оценок.

    Оценки только добавляются, порядок ввода сохраняется.
    Отрицательные оценки не принимаются (см. add_grade).
    """
    def __init__(self, name: str):
        self._name = name
        self._grades: List[float] = []

    @property
    def name(self) -> str:
        """Имя задается один раз при создании."""
        return self._name

    @property
    def grades(self) -> List[float]:
        """Копия списка оценок, чтобы нельзя было обойти проверку add_grade."""
        return list(self._grades)

    @property
    def grade_count(self) -> int:
        return len(self._grades)

    @property
    def has_grades(self) -> bool:
        return bool(self._grades)

    def add_grade(self, grade: float) -> bool:
        """Добавляет оценку. Отрицательная оценка отклоняется с предупреждением.

        Возвращает True, если оценка добавлена.
        """
        # NaN тоже не проходит: сравнение с ним всегда ложно
        if not grade >= 0:
            print("Warning: Grade cannot be negative. Not added.")
            logger.warning("Rejected negative grade %s for student %r", grade, self._name)
            return False
        self._grades.append(float(grade))
        return True

    def calculate_average(self) -> float:
        """Рассчитывает средний балл. Возвращает 0.0, если оценок нет."""
        if not self._grades:
            return 0.0
        return sum(self._grades) / len(self._grades)

    def get_highest_grade(self) -> float:
        """Максимальная оценка или 0.0, если оценок нет."""
        if not self._grades:
            return 0.0
        highest = self._grades[0]
        for grade in self._grades:
            if grade > highest:
                highest = grade
        return highest

    def get_lowest_grade(self) -> float:
        """Минимальная оценка или 0.0, если оценок нет."""
        if not self._grades:
            return 0.0
        lowest = self._grades[0]
        for grade in self._grades:
            if grade < lowest:
                lowest = grade
        return lowest

    @property
    def average(self) -> float:
        return self.calculate_average()

    @property
    def highest(self) -> float:
        return self.get_highest_grade()

    @property
    def lowest(self) -> float:
        return self.get_lowest_grade()

    def display_summary(self):
        """Выводит блок с итогами по студенту."""
        grades_str = str(self._grades) if self._grades else "No grades entered"
        print(f"  Name: {self._name}")
        print(f"  Grades: {grades_str}")
        print(f"  Average Score: {format_score(self.average)}")
        print(f"  Highest Score: {format_score(self.highest)}")
        print(f"  Lowest Score: {format_score(self.lowest)}")
        print(STUDENT_SEPARATOR)

    def __repr__(self) -> str:
        """Возвращает строковое представление объекта для отладки."""
        return f"Student(name='{self._name}', grades={self._grades})"
