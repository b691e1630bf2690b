"""Student record types.

Behavior is fixed per type instead of attached to instances at runtime:
Student carries the HasCourses capability, AdvancedStudent adds study and
graduation on top of it.
"""

from __future__ import annotations

import datetime
from dataclasses import dataclass, field

from objlab.core.registry import HasCourses
from objlab.models.types import Record, make_record


@dataclass
class Student(HasCourses):
    name: str
    age: int
    enrolled: bool = True
    courses: list[str] = field(default_factory=list)

    def _course_list(self) -> list[str]:
        return self.courses

    def display_info(self) -> str:
        return (
            f"Student: {self.name}, Age: {self.age}, "
            f"Enrolled: {'Yes' if self.enrolled else 'No'}"
        )

    def to_record(self) -> Record:
        """Data fields only. This is all that survives a JSON round trip."""
        return make_record(
            name=self.name,
            age=self.age,
            enrolled=self.enrolled,
            courses=list(self.courses),
        )


@dataclass
class AdvancedStudent(Student):
    graduation_date: str | None = None

    def study(self, hours: float) -> str:
        return f"{self.name} studied for {hours} hours"

    def graduate(self, on: datetime.date | None = None) -> str:
        """Mark the student as graduated on `on` (today by default)."""
        self.enrolled = False
        self.graduation_date = (on or datetime.date.today()).isoformat()
        return f"{self.name} graduated on {self.graduation_date}"

    def to_record(self) -> Record:
        record = super().to_record()
        if self.graduation_date is not None:
            record["graduation_date"] = self.graduation_date
        return record


def create_advanced_student(name: str, age: int) -> AdvancedStudent:
    """An enrolled student with no courses yet."""
    return AdvancedStudent(name=name, age=age)
