#!/usr/bin/env python3
"""
Object Lab demo — runs every lab section once and reports each result.

Run it from the command line:
    python -m objlab.demo
    OBJLAB_SINK=memory OBJLAB_LOG_LEVEL=DEBUG objlab-demo

Sections, in order:
  1. Understanding and creating objects
  2. Working with JSON
  3. Destructuring
  4. Clone / merge / concat
  5. Course registry methods
  6. Bonus: averages and array analysis
  7. Additional features (enumeration, gradebook chaining, nested paths, advanced student)
  8. Completion summary

Any failure aborts the remaining sections. It is logged, reported once to
the sink as "Demo Failed", then re-raised. A bad configuration counts as a failure.
"""

import datetime
import logging
import sys
from typing import Optional

from objlab import config as lab_config
from objlab.config import LabConfig, load_config
from objlab.core.aggregator import average, score_summary, total
from objlab.core.gradebook import GradeBook
from objlab.core.sinks import EmitterSink, PresentationSink, create_sink
from objlab.core.student import Student, create_advanced_student
from objlab.core.transforms import (
    clone_with_overrides,
    concat_lists,
    destructure_nested,
    from_json,
    merge_records,
    pick,
    record_entries,
    record_keys,
    record_values,
    split_head,
    to_json,
)
from objlab.models.types import PickField, Record

logger = logging.getLogger(__name__)

SCORES = (85, 92, 78, 90, 88, 95)
NEW_COURSES = ("Machine Learning", "Cloud Computing", "Mobile Development")

COMPLETION_SUMMARY = {
    "Part 1 - Object Creation": "✅ Created student object with properties and methods",
    "Part 2 - JSON Operations": "✅ Converted to/from JSON and compared objects",
    "Part 3 - Destructuring": "✅ Destructured object properties and array elements",
    "Part 4 - Spread Operator": "✅ Cloned objects and merged arrays",
    "Part 5 - Object Methods": "✅ Added course management methods",
    "Bonus Task": "✅ Calculated average score",
    "Advanced Features": "✅ Demonstrated enumeration, chaining and nested destructuring",
    "Total Concepts Covered": "15+ object manipulation features and techniques",
}

COMPLEX_RECORD = {
    "user": {
        "id": 1,
        "profile": {
            "name": "John Doe",
            "settings": {"theme": "dark", "notifications": True},
        },
    },
    "courses": ["JS", "React", "Node"],
    "metadata": {"created": "2024", "updated": "2025"},
}


def build_student() -> Student:
    return Student(
        name="Alice Johnson",
        age=21,
        enrolled=True,
        courses=["JavaScript", "Python", "Data Structures", "Web Development"],
    )


# ═══════════════════════════════════════════════════════════
# Sections
# ═══════════════════════════════════════════════════════════

def _objects(sink: PresentationSink, student: Student):
    sink.section("PART 1: Understanding and Creating Objects")
    sink.report("Student Name", student.name)
    sink.report("Student Age", student.age)
    sink.report("Student Info Method Result", student.display_info())


def _json(sink: PresentationSink, student: Student):
    sink.section("PART 2: Working with JSON")
    text = to_json(student.to_record())
    sink.report("Student Object as JSON String", text)
    restored = from_json(text)
    sink.report("Object Converted Back from JSON", restored)
    sink.report("Comparison - Original vs Converted", {
        "Original object has display_info method": callable(getattr(student, "display_info", None)),
        "Converted object has display_info method": callable(getattr(restored, "display_info", None)),
        "Data fields equal": restored == student.to_record(),
        "Note": "Methods are lost during JSON conversion!",
    })


def _destructuring(sink: PresentationSink, record: Record):
    sink.section("PART 3: Using Destructuring Assignment")
    plain = pick(record, ["name", "courses"])
    sink.report("Destructured Name", plain["name"])
    sink.report("Destructured Courses", plain["courses"])

    (first_score, second_score), _ = split_head(SCORES, 2)
    sink.report("Array of Scores", list(SCORES))
    sink.report("First Two Scores (Destructured)", {
        "firstScore": first_score,
        "secondScore": second_score,
    })

    sink.report("Destructuring with Renaming", pick(record, [
        PickField("age", rename="studentAge"),
        PickField("enrolled", rename="isEnrolled"),
    ]))
    sink.report("Destructuring with Default Values", pick(record, [
        PickField("graduationYear", default=lab_config.DEFAULT_GRADUATION_YEAR),
        PickField("gpa", default=lab_config.DEFAULT_GPA),
    ]))


def _spread(sink: PresentationSink, record: Record):
    sink.section("PART 4: The Spread Operator")
    cloned = clone_with_overrides(record, {"graduationYear": 2025, "gpa": 3.8})
    sink.report("Original Student Object", record)
    sink.report("Cloned Student with New Properties", cloned)

    all_courses = concat_lists(record["courses"], NEW_COURSES)
    sink.report("Original Courses", record["courses"])
    sink.report("New Courses", list(NEW_COURSES))
    sink.report("All Courses Combined", all_courses)

    additional = {"major": "Computer Science", "semester": 6}
    sink.report("Student with Additional Info", merge_records(record, additional))


def _registry(sink: PresentationSink, student: Student):
    sink.section("PART 5: Object Methods")
    sink.report("Total Courses Before Adding", student.total_courses())
    added = student.add_course("Artificial Intelligence")
    sink.report("Adding New Course", added.message("Artificial Intelligence"))
    sink.report("Total Courses After Adding", student.total_courses())
    sink.report("Updated Courses List", list(student.courses))

    duplicate = student.add_course("JavaScript")
    sink.report("Adding Duplicate Course", duplicate.message("JavaScript"))

    missing = student.remove_course("Quantum Computing")
    sink.report("Removing Unknown Course", missing.message("Quantum Computing"))

    sink.report('Courses with "Data"', student.courses_matching("Data"))


def _averages(sink: PresentationSink, cfg: LabConfig):
    sink.section("BONUS TASK: Calculate Average Score")
    sink.report("All Scores", list(SCORES))
    sink.report("Total Score", total(SCORES))
    sink.report("Average Score", f"{average(SCORES):.2f}")
    sink.report("Advanced Array Analysis", score_summary(
        SCORES,
        high=cfg.high_score,
        low=cfg.low_score,
        passing=cfg.passing_score,
        exceptional=cfg.exceptional_score,
    ))


def _advanced(sink: PresentationSink, student: Student, today: Optional[datetime.date]):
    sink.section("ADDITIONAL ADVANCED FEATURES")
    record = student.to_record()
    sink.report("Object Keys", record_keys(record))
    sink.report("Object Values", record_values(record))
    sink.report("Object Entries (first 3)", record_entries(record, limit=3))

    book = (
        GradeBook()
        .add_grade("JavaScript", 92)
        .add_grade("Python", 88)
        .add_grade("Data Structures", 95)
        .add_grade("Web Development", 90)
    )
    sink.report("Method Chaining Result - All Grades", book.get_all_grades())
    sink.report("Grade Average", f"{book.get_average():.2f}")
    sink.report("Missing Grade Lookup", book.get_grade("Machine Learning").value)

    nested = destructure_nested(COMPLEX_RECORD, {
        "userName": ("user", "profile", "name"),
        "theme": ("user", "profile", "settings", "theme"),
        "notifications": ("user", "profile", "settings", "notifications"),
    })
    (first_course,), other_courses = split_head(COMPLEX_RECORD["courses"], 1)
    sink.report("Nested Destructuring", {
        **nested,
        "firstCourse": first_course,
        "otherCourses": other_courses,
    })

    advanced = create_advanced_student("Bob Smith", 22)
    sink.report("Advanced Student Study", advanced.study(3))
    sink.report("Advanced Student Graduation", advanced.graduate(on=today))


# ═══════════════════════════════════════════════════════════
# Orchestration
# ═══════════════════════════════════════════════════════════

def run_demo(
    sink: PresentationSink,
    cfg: Optional[LabConfig] = None,
    today: Optional[datetime.date] = None,
) -> Record:
    """Run every section in order against `sink`; return the completion summary.

    Raises whatever failed (config loading included), after reporting it
    once through sink.error() as "Demo Failed".
    """
    try:
        cfg = cfg or load_config()
        student = build_student()
        _objects(sink, student)
        _json(sink, student)
        # snapshot before Part 5 mutates the course list
        record = student.to_record()
        _destructuring(sink, record)
        _spread(sink, record)
        _registry(sink, student)
        _averages(sink, cfg)
        _advanced(sink, student, today)

        sink.section("LAB COMPLETION SUMMARY")
        summary = dict(COMPLETION_SUMMARY)
        sink.report("Lab Completion Status", summary)
    except Exception as e:
        logger.exception("Demo aborted")
        sink.error("Demo Failed", f"{type(e).__name__}: {e}")
        raise
    logger.info("Demo completed")
    return summary


def main() -> int:
    try:
        cfg = load_config()
    except ValueError as e:
        logging.basicConfig(level=logging.WARNING)
        logger.error("Invalid configuration: %s", e)
        return 1
    logging.basicConfig(
        level=cfg.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    sink = create_sink(cfg)
    try:
        run_demo(sink, cfg)
    except Exception:
        return 1
    if isinstance(sink, EmitterSink):
        print(f"Collected {len(sink.emitter.entries)} entries in the memory sink.")
    print("\n🎉 Object Lab Completed Successfully! 🎉")
    return 0


if __name__ == "__main__":
    sys.exit(main())
