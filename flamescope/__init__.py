"""Flamescope: export recorded span trees to the speedscope profile format.

Profiles are derived from top-level spans, so wrap the whole run of a
program in one appropriately named span to get a single profile.
"""

__version__ = "0.1.0"

from .errors import (
    FlamescopeError,
    SchemaMismatchError,
    SpanMismatchError,
    UnsupportedProfileError,
)
from .tracing import Span, SpanRecorder
from .speedscope import (
    SCHEMA_URL,
    Event,
    EventType,
    Frame,
    FrameInterner,
    Profile,
    Shared,
    SpeedscopeFile,
    ValueUnit,
    dump,
    emit_events,
    load_speedscope,
    spans_to_profile_document,
    spans_to_speedscope,
    write_path,
    write_spans,
)
from .configs import ExportConfig, default_config

__all__ = [
    "__version__",
    "FlamescopeError",
    "SchemaMismatchError",
    "SpanMismatchError",
    "UnsupportedProfileError",
    "Span",
    "SpanRecorder",
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
    "ExportConfig",
    "default_config",
]
