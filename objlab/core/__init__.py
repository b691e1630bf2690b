# Module: core
# Depends on: models, config
#
# Pure transforms, numeric reductions, course/grade capabilities and presentation sinks.

from objlab.core.transforms import (
    clone_with_overrides,
    merge_records,
    pick,
    extract_path,
    destructure_nested,
    concat_lists,
    split_head,
    record_keys,
    record_values,
    record_entries,
    to_json,
    from_json,
)
from objlab.core.aggregator import (
    total,
    average,
    filter_by,
    all_satisfy,
    any_satisfy,
    score_summary,
)
from objlab.core.registry import HasCourses, CourseRegistry
from objlab.core.gradebook import Gradeable, GradeBook
from objlab.core.student import Student, AdvancedStudent, create_advanced_student
from objlab.core.sinks import (
    PresentationSink,
    ConsoleSink,
    EmitterSink,
    create_sink,
    format_content,
)
