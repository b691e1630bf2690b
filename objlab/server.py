"""
FastAPI Server — serves the Object Lab demo over HTTP.

Each request runs the demo once into a fresh ReportEmitter:
  1. GET /api/health — liveness + version
  2. GET /api/demo — all entries as JSON (status "error" if the run aborted)
  3. GET /api/demo/stream — the same events as Server-Sent Events

The demo is synchronous and finishes in negligible time, so streaming
replays the collected events rather than running in the background.
"""

import json
from typing import Any, Optional

from fastapi import FastAPI
from fastapi.responses import StreamingResponse
from pydantic import BaseModel

from objlab.config import VERSION
from objlab.core.sinks import EmitterSink
from objlab.demo import run_demo
from objlab.models.events import ReportEmitter


# ═══════════════════════════════════════════════════════════
# App Setup
# ═══════════════════════════════════════════════════════════

app = FastAPI(
    title="ObjectLab",
    description="Record transforms, aggregation and builders, demonstrated end to end",
    version=VERSION,
)


# ═══════════════════════════════════════════════════════════
# Request/Response Models
# ═══════════════════════════════════════════════════════════

class HealthResponse(BaseModel):
    status: str
    version: str
    features: list[str]


class DemoEntry(BaseModel):
    sequence: int
    event_type: str
    title: str
    section: Optional[str] = None
    content: Any = None


class DemoResponse(BaseModel):
    status: str
    entry_count: int
    entries: list[DemoEntry]


# ═══════════════════════════════════════════════════════════
# Demo runs
# ═══════════════════════════════════════════════════════════

def collect_demo_events() -> ReportEmitter:
    """Run the demo once into a fresh emitter.

    run_demo reports its own failure through the sink as a DEMO_ERROR event,
    so a failed run is left as recorded and not raised.
    """
    emitter = ReportEmitter()
    sink = EmitterSink(emitter)
    try:
        run_demo(sink)
    except Exception:
        if not emitter.failed:
            raise
    else:
        emitter.complete()
    return emitter


# ═══════════════════════════════════════════════════════════
# API Endpoints
# ═══════════════════════════════════════════════════════════

@app.get("/api/health")
async def health():
    return HealthResponse(
        status="ok",
        version=VERSION,
        features=[
            "clone_with_overrides", "merge_records", "pick", "extract_path",
            "aggregation", "course_registry", "gradebook", "sse_streaming",
        ],
    )


@app.get("/api/demo")
async def get_demo():
    """Run the demo and return every event."""
    emitter = collect_demo_events()
    entries = [DemoEntry(**_serialize_event(e)) for e in emitter.events]
    return DemoResponse(
        status="error" if emitter.failed else "ok",
        entry_count=len(emitter.entries),
        entries=entries,
    )


@app.get("/api/demo/stream")
async def stream_demo():
    """SSE endpoint -- streams the demo's events."""
    emitter = collect_demo_events()

    async def event_generator():
        for event in emitter.events:
            yield event.to_sse()
        yield "data: {\"event_type\": \"STREAM_END\"}\n\n"

    return StreamingResponse(
        event_generator(),
        media_type="text/event-stream",
        headers={
            "Cache-Control": "no-cache",
            "Connection": "keep-alive",
            "X-Accel-Buffering": "no",
        },
    )


# ═══════════════════════════════════════════════════════════
# Serialization
# ═══════════════════════════════════════════════════════════

def _serialize_event(event) -> dict:
    out = event.to_dict()
    out.pop("timestamp", None)
    # content must survive JSON even when a sink got a non-JSON scalar
    out["content"] = json.loads(json.dumps(out["content"], default=str))
    return out


# ═══════════════════════════════════════════════════════════
# Run
# ═══════════════════════════════════════════════════════════

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
