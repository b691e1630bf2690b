"""
GradeBook — chainable course -> grade builder.

    book = GradeBook().add_grade("JavaScript", 92).add_grade("Python", 88)
    book.get_average()   # 90.0

get_average() treats an empty book as 0 because it is a display value;
aggregator.average() raises on empty input because it is a statistic.
"""

from abc import ABC, abstractmethod

import numpy as np

from objlab.models.errors import NotFoundError
from objlab.models.types import GradeLookup, Record


class Gradeable(ABC):
    """Capability for records that accumulate per-course grades."""

    @abstractmethod
    def add_grade(self, course: str, grade: float) -> "Gradeable":
        ...

    @abstractmethod
    def get_grade(self, course: str) -> float | GradeLookup:
        ...

    @abstractmethod
    def get_average(self) -> float:
        ...

    @abstractmethod
    def get_all_grades(self) -> Record:
        ...


class GradeBook(Gradeable):
    def __init__(self):
        self._grades: Record = {}

    def add_grade(self, course: str, grade: float) -> "GradeBook":
        """Insert or replace a grade. Returns self so calls can be chained."""
        self._grades[course] = grade
        return self

    def get_grade(self, course: str) -> float | GradeLookup:
        """Recorded grade, or GradeLookup.NO_GRADE. A grade of 0 is still a grade."""
        if course in self._grades:
            return self._grades[course]
        return GradeLookup.NO_GRADE

    def require_grade(self, course: str) -> float:
        """Like get_grade, but raise NotFoundError instead of returning the sentinel."""
        if course not in self._grades:
            raise NotFoundError(f"No grade recorded for {course!r}")
        return self._grades[course]

    def get_average(self) -> float:
        if not self._grades:
            return 0
        return round(float(np.mean(list(self._grades.values()))), 2)

    def get_all_grades(self) -> Record:
        return dict(self._grades)

    def __len__(self):
        return len(self._grades)

    def __repr__(self):
        return f"GradeBook({self._grades!r})"
