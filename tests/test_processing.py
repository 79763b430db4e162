# tests/test_processing.py
import pytest
from grade_tracker.models import Student
from grade_tracker.processing import get_class_statistics


def test_empty_list_has_no_statistics():
    assert get_class_statistics([]) is None


def test_get_class_statistics(sample_students):
    stats = get_class_statistics(sample_students)
    assert stats["total_students"] == 2
    assert stats["grade_count"] == 4
    assert stats["overall_average"] == pytest.approx(85.0)
    assert stats["overall_highest"] == 100.0
    assert stats["overall_lowest"] == 70.0


def test_ungraded_student_does_not_lower_minimum(make_student):
    students = [make_student("A", [70, 90]), Student("B")]
    stats = get_class_statistics(students)
    assert stats["overall_lowest"] == 70.0
    assert stats["overall_highest"] == 90.0
    assert stats["overall_average"] == pytest.approx(80.0)
    assert stats["total_students"] == 2


def test_ungraded_student_first_in_list(make_student):
    students = [Student("B"), make_student("A", [70, 90])]
    assert get_class_statistics(students)["overall_lowest"] == 70.0


def test_overall_average_weighted_by_grade_count(make_student):
    students = [make_student("A", [100]), make_student("B", [40, 50, 60])]
    stats = get_class_statistics(students)
    # (100 + 40 + 50 + 60) / 4
    assert stats["overall_average"] == pytest.approx(62.5)


def test_no_grades_anywhere():
    stats = get_class_statistics([Student("A"), Student("B")])
    assert stats["grade_count"] == 0
    assert stats["overall_average"] is None
    assert stats["overall_highest"] is None
    assert stats["overall_lowest"] is None
