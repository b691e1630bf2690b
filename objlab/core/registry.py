"""
Course registry — the HasCourses capability and its standalone implementation.

Any record type that owns a list of course names can subclass HasCourses
and supply that list through _course_list(). Mutation is single-owner:
nothing here is safe to share across threads.
"""

import logging
from abc import ABC, abstractmethod

from objlab.models.types import AddResult, RemoveResult

logger = logging.getLogger(__name__)


class HasCourses(ABC):
    """Capability for records that keep an ordered, duplicate-free course list."""

    @abstractmethod
    def _course_list(self) -> list[str]:
        """Return the owned, mutable list backing this record."""
        ...

    def add_course(self, name: str) -> AddResult:
        """Append `name` unless an exact match is already present."""
        courses = self._course_list()
        if name in courses:
            logger.debug("Course %r already present", name)
            return AddResult.ALREADY_EXISTS
        courses.append(name)
        logger.debug("Added course %r (%d total)", name, len(courses))
        return AddResult.ADDED

    def remove_course(self, name: str) -> RemoveResult:
        """Remove the first exact match of `name`, if any."""
        courses = self._course_list()
        if name not in courses:
            return RemoveResult.NOT_FOUND
        courses.remove(name)
        logger.debug("Removed course %r (%d left)", name, len(courses))
        return RemoveResult.REMOVED

    def total_courses(self) -> int:
        return len(self._course_list())

    def courses_matching(self, substring: str) -> list[str]:
        """Courses containing `substring`, case-insensitively, in list order."""
        needle = substring.lower()
        return [c for c in self._course_list() if needle in c.lower()]


class CourseRegistry(HasCourses):
    """Standalone registry owning its own course list."""

    def __init__(self, courses=None):
        self._courses: list[str] = []
        for name in courses or []:
            self.add_course(name)

    def _course_list(self) -> list[str]:
        return self._courses

    @property
    def courses(self) -> list[str]:
        """A copy of the current course list."""
        return list(self._courses)

    def __len__(self):
        return len(self._courses)

    def __repr__(self):
        return f"CourseRegistry({self._courses!r})"
