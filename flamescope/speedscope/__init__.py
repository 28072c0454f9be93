from .builder import emit_events, spans_to_profile_document, spans_to_speedscope
from .codec import dump, load_speedscope, write_path, write_spans
from .interner import FrameInterner
from .model import (
    SCHEMA_URL,
    Event,
    EventType,
    Frame,
    Profile,
    Shared,
    SpeedscopeFile,
    ValueUnit,
)

__all__ = [
    "SCHEMA_URL",
    "Event",
    "EventType",
    "Frame",
    "FrameInterner",
    "Profile",
    "Shared",
    "SpeedscopeFile",
    "ValueUnit",
    "dump",
    "emit_events",
    "load_speedscope",
    "spans_to_profile_document",
    "spans_to_speedscope",
    "write_path",
    "write_spans",
]
