# grade_tracker/io_utils.py
"""Модуль для консольного ввода: разбор чисел и повтор запроса при ошибке."""
import logging
import math
from typing import Callable, Optional

from .errors import InvalidNumberError, OutOfRangeError

logger = logging.getLogger(__name__)

InputFunc = Callable[[str], str]


def parse_grade_count(text: str) -> int:
    """Преобразует строку в неотрицательное целое количество оценок."""
    try:
        count = int(text.strip())
    except ValueError:
        raise InvalidNumberError(f"Не число: {text!r}")
    if count < 0:
        raise OutOfRangeError(f"Отрицательное количество оценок: {count}")
    return count


def parse_grade(text: str) -> float:
    """Преобразует строку в неотрицательную оценку."""
    try:
        grade = float(text.strip())
    except ValueError:
        raise InvalidNumberError(f"Не число: {text!r}")
    if math.isnan(grade):
        raise InvalidNumberError(f"Не число: {text!r}")
    if grade < 0:
        raise OutOfRangeError(f"Отрицательная оценка: {grade}")
    return grade


def prompt_grade_count(name: str, read: Optional[InputFunc] = None) -> int:
    """Спрашивает количество оценок, пока не будет введено корректное значение."""
    read = read or input
    while True:
        # Вся строка читается целиком, поэтому мусор не попадет в следующий ввод
        text = read(f"Enter number of grades for {name}: ")
        try:
            return parse_grade_count(text)
        except InvalidNumberError as e:
            logger.debug("%s", e)
            print("Invalid input. Please enter a number.")
        except OutOfRangeError as e:
            logger.debug("%s", e)
            print("Number of grades cannot be negative. Please try again.")


def prompt_grade(name: str, index: int, read: Optional[InputFunc] = None) -> float:
    """Спрашивает оценку с номером index (с 1), пока она не станет >= 0."""
    read = read or input
    while True:
        text = read(f"Enter grade {index} for {name}: ")
        try:
            return parse_grade(text)
        except InvalidNumberError as e:
            logger.debug("%s", e)
            print("Invalid input. Please enter a number for the grade.")
        except OutOfRangeError as e:
            logger.debug("%s", e)
            print("Grade cannot be negative. Please enter a valid grade.")
