"""Tests for demo.py -- the end-to-end run against an in-memory sink."""

import datetime

import pytest

from objlab import demo
from objlab.config import LabConfig
from objlab.core.sinks import ConsoleSink, EmitterSink
from objlab.models.events import EventType

TODAY = datetime.date(2025, 6, 1)


@pytest.fixture
def run():
    sink = EmitterSink()
    summary = demo.run_demo(sink, LabConfig(), today=TODAY)
    entries = {e.title: e.content for e in sink.emitter.entries}
    return sink, summary, entries


class TestRunDemo:
    def test_sections_in_order(self, run):
        sink, _, _ = run
        sections = [e.title for e in sink.emitter.events if e.event_type == EventType.SECTION_START]
        assert sections[0] == "PART 1: Understanding and Creating Objects"
        assert sections[-1] == "LAB COMPLETION SUMMARY"
        assert len(sections) == 8

    def test_summary_returned(self, run):
        _, summary, entries = run
        assert summary == demo.COMPLETION_SUMMARY
        assert entries["Lab Completion Status"] == summary

    def test_object_and_json_entries(self, run):
        _, _, entries = run
        assert entries["Student Info Method Result"] == "Student: Alice Johnson, Age: 21, Enrolled: Yes"
        comparison = entries["Comparison - Original vs Converted"]
        assert comparison["Original object has display_info method"] is True
        assert comparison["Converted object has display_info method"] is False
        assert comparison["Data fields equal"] is True

    def test_destructuring_entries(self, run):
        _, _, entries = run
        assert entries["First Two Scores (Destructured)"] == {"firstScore": 85, "secondScore": 92}
        assert entries["Destructuring with Renaming"] == {"studentAge": 21, "isEnrolled": True}
        assert entries["Destructuring with Default Values"] == {"graduationYear": 2025, "gpa": 3.5}

    def test_spread_does_not_touch_original(self, run):
        _, _, entries = run
        assert "gpa" not in entries["Original Student Object"]
        assert entries["Cloned Student with New Properties"]["gpa"] == 3.8
        assert len(entries["All Courses Combined"]) == 7
        assert entries["Student with Additional Info"]["major"] == "Computer Science"

    def test_registry_entries(self, run):
        _, _, entries = run
        assert entries["Total Courses Before Adding"] == 4
        assert entries["Total Courses After Adding"] == 5
        assert entries["Adding Duplicate Course"] == 'Course "JavaScript" already exists!'
        assert entries['Courses with "Data"'] == ["Data Structures"]

    def test_aggregate_entries(self, run):
        _, _, entries = run
        assert entries["Total Score"] == 528
        assert entries["Average Score"] == "88.00"
        assert entries["Advanced Array Analysis"]["High Scores (>=90)"] == [92, 90, 95]

    def test_advanced_entries(self, run):
        _, _, entries = run
        assert entries["Grade Average"] == "91.25"
        assert entries["Missing Grade Lookup"] == "No grade recorded"
        assert entries["Nested Destructuring"] == {
            "userName": "John Doe",
            "theme": "dark",
            "notifications": True,
            "firstCourse": "JS",
            "otherCourses": ["React", "Node"],
        }
        assert entries["Advanced Student Graduation"] == "Bob Smith graduated on 2025-06-01"
        assert entries["Object Entries (first 3)"][0] == ["name", "Alice Johnson"]


class TestDemoFailure:
    def test_failure_is_reported_once_and_raised(self, monkeypatch):
        def broken(*args, **kwargs):
            raise RuntimeError("scores unavailable")

        monkeypatch.setattr(demo, "total", broken)
        sink = EmitterSink()
        with pytest.raises(RuntimeError):
            demo.run_demo(sink, LabConfig())

        events = sink.emitter.events
        errors = [e for e in events if e.event_type == EventType.DEMO_ERROR]
        assert len(errors) == 1
        assert errors[0].title == "Demo Failed"
        assert errors[0].content == "RuntimeError: scores unavailable"
        assert events[-1] is errors[0]
        titles = [e.title for e in sink.emitter.entries]
        assert "Demo Failed" not in titles
        assert "Lab Completion Status" not in titles

    def test_console_sink_shows_failure(self, monkeypatch, capsys):
        monkeypatch.setattr(demo, "average", lambda xs: 1 / 0)
        with pytest.raises(ZeroDivisionError):
            demo.run_demo(ConsoleSink(), LabConfig())
        assert "=== Demo Failed ===\nZeroDivisionError" in capsys.readouterr().out

    def test_bad_config_is_reported(self, monkeypatch):
        monkeypatch.setenv("OBJLAB_JSON_INDENT", "abc")
        sink = EmitterSink()
        with pytest.raises(ValueError):
            demo.run_demo(sink)
        assert sink.emitter.failed
        assert "OBJLAB_JSON_INDENT" in sink.emitter.events[-1].content
        assert sink.emitter.entries == []


class TestMain:
    def test_main_console(self, monkeypatch, capsys):
        monkeypatch.setenv("OBJLAB_SINK", "console")
        assert demo.main() == 0
        out = capsys.readouterr().out
        assert "=== Lab Completion Status ===" in out
        assert "Completed Successfully" in out

    def test_main_memory_sink_reports_count(self, monkeypatch, capsys):
        monkeypatch.setenv("OBJLAB_SINK", "memory")
        assert demo.main() == 0
        out = capsys.readouterr().out
        assert "entries in the memory sink" in out
        assert "=== Lab Completion Status ===" not in out

    def test_main_failure_exit_code(self, monkeypatch):
        def broken(*args, **kwargs):
            raise RuntimeError("boom")

        monkeypatch.setenv("OBJLAB_SINK", "memory")
        monkeypatch.setattr(demo, "average", broken)
        assert demo.main() == 1

    def test_main_bad_config_exit_code(self, monkeypatch, caplog):
        monkeypatch.setenv("OBJLAB_JSON_INDENT", "abc")
        assert demo.main() == 1
        assert "Invalid configuration" in caplog.text
