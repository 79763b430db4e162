# grade_tracker/errors.py
"""Модуль для определения пользовательских исключений приложения."""

class GradeTrackerError(Exception):
    """Базовый класс для всех исключений в этом приложении."""
    pass

class InputValidationError(GradeTrackerError):
    """Исключение, связанное с некорректным вводом пользователя."""
    pass

class InvalidNumberError(InputValidationError):
    """Исключение, когда вместо числа введен произвольный текст."""
    pass

class OutOfRangeError(InputValidationError):
    """Исключение, когда число введено, но оно отрицательное."""
    pass
