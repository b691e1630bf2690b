"""
Presentation sinks — the ONLY way the demo shows anything.

The core never prints or renders; it hands (title, content) pairs to a
PresentationSink. Contract:
  - report() and section() are fire-and-forget; return values are ignored
  - content may be a scalar, a list or a Record; formatting is the sink's job
  - the demo never reads back from a sink

Override the default sink with OBJLAB_SINK=console|memory.
"""

import json
import logging
import sys
from abc import ABC, abstractmethod
from typing import Any, Optional, TextIO

from objlab.config import DEFAULT_JSON_INDENT, LabConfig, load_config
from objlab.models.events import ReportEmitter

logger = logging.getLogger(__name__)


def format_content(content: Any, indent: int = DEFAULT_JSON_INDENT) -> str:
    """Records and lists as pretty JSON, everything else via str()."""
    if isinstance(content, (dict, list, tuple)):
        return json.dumps(content, indent=indent, ensure_ascii=False, default=str)
    return str(content)


class PresentationSink(ABC):
    """Abstract interface for anything that displays demo output."""

    @abstractmethod
    def report(self, title: str, content: Any) -> None:
        """Display one titled result."""
        ...

    @abstractmethod
    def section(self, name: str) -> None:
        """Display a section banner."""
        ...

    def error(self, title: str, message: str) -> None:
        """Display the failure that aborted a run. Plain sinks show it like any entry."""
        self.report(title, message)


class ConsoleSink(PresentationSink):
    """Writes entries to a text stream (stdout by default)."""

    def __init__(self, stream: Optional[TextIO] = None, indent: int = DEFAULT_JSON_INDENT):
        self.stream = stream
        self.indent = indent

    def _write(self, text: str):
        print(text, file=self.stream or sys.stdout)

    def report(self, title: str, content: Any) -> None:
        self._write(f"\n=== {title} ===")
        self._write(format_content(content, self.indent))

    def section(self, name: str) -> None:
        self._write(f"\n\n🔸 {name} 🔸")


class EmitterSink(PresentationSink):
    """Forwards entries into a ReportEmitter (used by the server and tests)."""

    def __init__(self, emitter: Optional[ReportEmitter] = None):
        self.emitter = emitter or ReportEmitter()

    def report(self, title: str, content: Any) -> None:
        self.emitter.entry(title, content)

    def section(self, name: str) -> None:
        self.emitter.section(name)

    def error(self, title: str, message: str) -> None:
        self.emitter.error(title, message)


def create_sink(cfg: Optional[LabConfig] = None) -> PresentationSink:
    """Factory that returns the sink named by the config (OBJLAB_SINK)."""
    cfg = cfg or load_config()
    if cfg.sink == "memory":
        logger.info("Using in-memory presentation sink.")
        return EmitterSink()
    logger.info("Using console presentation sink.")
    return ConsoleSink(indent=cfg.json_indent)
