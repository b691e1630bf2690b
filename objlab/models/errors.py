"""Exception hierarchy for the object lab.

Library functions are total wherever a sensible default exists; these are
raised only where none does.
"""


class ObjectLabError(Exception):
    """Base class for every error raised by objlab."""


class EmptyInputError(ObjectLabError, ValueError):
    """A reduction that has no meaningful value on empty input (e.g. average)."""


class NotFoundError(ObjectLabError, KeyError):
    """A strict lookup found nothing. The lenient lookups return a sentinel instead."""

    def __str__(self):
        # KeyError quotes its argument; keep the plain message
        return str(self.args[0]) if self.args else ""


class RecordSchemaError(ObjectLabError, TypeError):
    """A value outside the record schema was supplied at construction time."""

    def __init__(self, path: str, value: object):
        self.path = path
        self.value = value
        super().__init__(
            f"Unsupported record value at '{path or '<root>'}': "
            f"{type(value).__name__}"
        )
