# tests/conftest.py
import pytest
from typing import List
from grade_tracker.models import Student


def _build_student(name: str, grades: List[float]) -> Student:
    student = Student(name)
    for grade in grades:
        student.add_grade(grade)
    return student


@pytest.fixture
def make_student():
    """Фабрика студентов с заранее добавленными оценками."""
    return _build_student


@pytest.fixture
def sample_students() -> List[Student]:
    """Фикстура, предоставляющая тестовый набор студентов."""
    return [
        _build_student("Alice", [80, 90]),
        _build_student("Bob", [70, 100]),
    ]


@pytest.fixture
def scripted_input():
    """Фабрика фиктивного input: отдает ответы по порядку и запоминает подсказки."""
    def factory(answers):
        answers = iter(answers)
        prompts = []

        def mock_input(prompt=""):
            prompts.append(prompt)
            try:
                return next(answers)
            except StopIteration:
                # Если ввод закончился раньше, чем программа завершилась,
                # возвращаем '0' (выход), чтобы не зависнуть.
                return "0"

        mock_input.prompts = prompts
        return mock_input

    return factory
