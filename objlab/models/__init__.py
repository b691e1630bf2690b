# Module: models
# Depends on: (none — leaf module)
#
# Record schema, result enums, errors and report events shared by every module.

from objlab.models.types import (
    Record,
    RecordValue,
    make_record,
    validate_record,
    PickField,
    NO_DEFAULT,
    AddResult,
    RemoveResult,
    GradeLookup,
)
from objlab.models.errors import (
    ObjectLabError,
    EmptyInputError,
    NotFoundError,
    RecordSchemaError,
)
from objlab.models.events import ReportEvent, EventType, ReportEmitter
