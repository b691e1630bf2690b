"""Tests for core/gradebook.py"""

import pytest

from objlab.core.gradebook import GradeBook, Gradeable
from objlab.models.errors import NotFoundError
from objlab.models.types import GradeLookup


class TestGradeBook:
    def test_chaining_returns_same_instance(self):
        book = GradeBook()
        assert book.add_grade("A", 90) is book

    def test_chain_average(self):
        book = GradeBook().add_grade("A", 90).add_grade("B", 80)
        assert book.get_average() == 85.0
        assert f"{book.get_average():.2f}" == "85.00"

    def test_average_rounds_to_two_places(self):
        book = GradeBook().add_grade("A", 90).add_grade("B", 80).add_grade("C", 80)
        assert book.get_average() == 83.33

    def test_empty_average_is_zero(self):
        # unlike aggregator.average, which raises
        assert GradeBook().get_average() == 0

    def test_add_replaces(self):
        book = GradeBook().add_grade("A", 50).add_grade("A", 100)
        assert book.get_grade("A") == 100
        assert len(book) == 1

    def test_missing_grade_sentinel(self):
        assert GradeBook().get_grade("Nope") is GradeLookup.NO_GRADE
        assert GradeLookup.NO_GRADE == "No grade recorded"

    def test_zero_grade_is_recorded(self):
        assert GradeBook().add_grade("A", 0).get_grade("A") == 0

    def test_require_grade(self):
        book = GradeBook().add_grade("A", 90)
        assert book.require_grade("A") == 90
        with pytest.raises(NotFoundError):
            book.require_grade("B")

    def test_all_grades_is_a_copy(self):
        book = GradeBook().add_grade("JavaScript", 92).add_grade("Python", 88)
        grades = book.get_all_grades()
        assert grades == {"JavaScript": 92, "Python": 88}
        grades["JavaScript"] = 0
        grades["Rust"] = 100
        assert book.get_all_grades() == {"JavaScript": 92, "Python": 88}

    def test_is_gradeable(self):
        assert isinstance(GradeBook(), Gradeable)
