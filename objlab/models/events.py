"""
Report events — what the demo sends to a presentation sink.

Event types:
  - SECTION_START: a new lab section banner
  - ENTRY: one (title, content) pair
  - DEMO_COMPLETE: the run finished
  - DEMO_ERROR: the run aborted; content carries the error text
"""

import json
import logging
import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Optional

logger = logging.getLogger(__name__)


class EventType(str, Enum):
    SECTION_START = "SECTION_START"
    ENTRY = "ENTRY"
    DEMO_COMPLETE = "DEMO_COMPLETE"
    DEMO_ERROR = "DEMO_ERROR"


@dataclass
class ReportEvent:
    event_type: EventType
    title: str
    content: Any = None
    section: Optional[str] = None
    sequence: int = 0
    timestamp: float = field(default_factory=time.time)

    def to_sse(self) -> str:
        """Format as Server-Sent Event string."""
        return f"data: {json.dumps(self.to_dict(), default=str)}\n\n"

    def to_dict(self) -> dict:
        return {
            "event_type": self.event_type.value,
            "title": self.title,
            "content": self.content,
            "section": self.section,
            "sequence": self.sequence,
            "timestamp": self.timestamp,
        }


class ReportEmitter:
    """
    Collects events during a demo run.
    The sink calls emitter.section() / emitter.entry() / emitter.complete() / emitter.error().
    The server reads .events and returns or streams them.
    """

    def __init__(self):
        self.events: list[ReportEvent] = []
        self._callbacks: list[Callable[[ReportEvent], Any]] = []
        self._section: Optional[str] = None

    def on_event(self, callback: Callable[[ReportEvent], Any]):
        """Register a callback for real-time delivery (e.g., SSE queue.put)."""
        self._callbacks.append(callback)

    def _emit(self, event: ReportEvent):
        event.sequence = len(self.events)
        self.events.append(event)
        for cb in self._callbacks:
            try:
                cb(event)
            except Exception:
                # delivery is fire-and-forget; the run continues
                logger.warning("Report callback %r failed", cb, exc_info=True)

    def section(self, name: str):
        self._section = name
        self._emit(ReportEvent(EventType.SECTION_START, title=name, section=name))

    def entry(self, title: str, content: Any):
        self._emit(ReportEvent(
            EventType.ENTRY,
            title=title,
            content=content,
            section=self._section,
        ))

    def complete(self, message: str = "Demo complete"):
        self._emit(ReportEvent(EventType.DEMO_COMPLETE, title=message, section=self._section))

    def error(self, title: str, message: str):
        self._emit(ReportEvent(
            EventType.DEMO_ERROR,
            title=title,
            content=message,
            section=self._section,
        ))

    @property
    def entries(self) -> list[ReportEvent]:
        return [e for e in self.events if e.event_type == EventType.ENTRY]

    @property
    def failed(self) -> bool:
        return any(e.event_type == EventType.DEMO_ERROR for e in self.events)
