# grade_tracker/main.py
"""Главный модуль, реализующий консольный интерфейс (CLI) для учета оценок."""
import enum
import logging
import sys
from typing import List, Optional

from . import config, io_utils, processing, errors
from .models import Student, format_score

logger = logging.getLogger(__name__)


class MenuState(enum.Enum):
    RUNNING = "running"
    EXITING = "exiting"


class GradeTracker:
    """Сессия: владеет списком студентов и ведет диалог с пользователем."""

    def __init__(self, read: Optional[io_utils.InputFunc] = None):
        self.students: List[Student] = []
        self._read = read

    def _input(self, prompt: str) -> str:
        # input ищется в момент вызова, чтобы его можно было подменить в тестах
        read = self._read or input
        return read(prompt)

    def add_student(self) -> Student:
        """Запрашивает имя и оценки, добавляет нового студента в список."""
        name = self._input("Enter student name: ")
        student = Student(name)

        count = io_utils.prompt_grade_count(name, self._input)
        for i in range(1, count + 1):
            grade = io_utils.prompt_grade(name, i, self._input)
            student.add_grade(grade)

        self.students.append(student)
        logger.info("Added student %r with %d grades", name, student.grade_count)
        print(f"Student {name} added successfully!")
        return student

    def display_summary_report(self):
        """Выводит итоги по каждому студенту и общую статистику по группе."""
        if not self.students:
            print("\nNo students to display. Please add students first.")
            return

        print("\n" + config.REPORT_HEADER)
        for student in self.students:
            student.display_summary()

        stats = processing.get_class_statistics(self.students)

        print("\n" + config.OVERALL_HEADER)
        if stats["grade_count"] > 0:
            print(f"Overall Average Score: {format_score(stats['overall_average'])}")
            print(f"Overall Highest Score: {format_score(stats['overall_highest'])}")
            print(f"Overall Lowest Score: {format_score(stats['overall_lowest'])}")
        else:
            print("No grades entered across all students to calculate overall statistics.")
        print(config.REPORT_FOOTER)

    def print_menu(self):
        """Выводит на экран главное меню."""
        print("\n" + config.MENU_TITLE)
        for number, label in config.MENU_OPTIONS.items():
            print(f"{number}. {label}")

    def handle_choice(self, choice: str) -> MenuState:
        """Выполняет выбранный пункт меню и возвращает следующее состояние."""
        try:
            number = int(choice.strip())
        except ValueError:
            print("Invalid input. Please enter a number corresponding to the menu option.")
            return MenuState.RUNNING

        try:
            if number == 1:
                self.add_student()
            elif number == 2:
                self.display_summary_report()
            elif number == 0:
                print("Exiting Grade Tracker. Goodbye!")
                return MenuState.EXITING
            else:
                print("Invalid choice. Please try again.")
        except errors.GradeTrackerError as e:
            logger.warning("Menu action %d failed: %s", number, e)
            print(f"❌ Error: {e}")

        return MenuState.RUNNING

    def run(self):
        """Основной цикл: меню повторяется, пока пользователь не выберет выход."""
        state = MenuState.RUNNING
        while state is MenuState.RUNNING:
            self.print_menu()
            choice = self._input(config.MENU_PROMPT)
            state = self.handle_choice(choice)


def main_cli():
    """Точка входа консольного приложения."""
    config.setup_logging()
    tracker = GradeTracker()
    try:
        tracker.run()
    except KeyboardInterrupt:
        print("\nProgram stopped by user.")
    except EOFError:
        print("\nInput closed. Exiting Grade Tracker.")
    return 0


if __name__ == '__main__':
    sys.exit(main_cli())
