from __future__ import annotations

import logging
from typing import Iterable, List, Tuple

from ..tracing.span import Span
from .interner import FrameInterner
from .model import SCHEMA_URL, Event, EventType, Profile, Shared, SpeedscopeFile, ValueUnit

logger = logging.getLogger(__name__)

_OPEN = 0
_CLOSE = 1


def emit_events(interner: FrameInterner, events: List[Event], span: Span) -> None:
    """Append the open/close events for ``span`` and its subtree to ``events``.

    Opens come out in depth-first pre-order, closes in post-order. Uses an
    explicit work stack so tree depth is bounded by memory, not the
    interpreter's recursion limit.
    """
    work: List[Tuple[int, Span, int]] = [(_OPEN, span, -1)]
    while work:
        action, current, frame = work.pop()
        if action == _CLOSE:
            events.append(Event(EventType.CLOSE_FRAME, current.end_ns, frame))
            continue
        frame = interner.intern(current.name)
        events.append(Event(EventType.OPEN_FRAME, current.start_ns, frame))
        work.append((_CLOSE, current, frame))
        for child in reversed(current.children):
            work.append((_OPEN, child, -1))


def spans_to_speedscope(spans: Iterable[Span]) -> SpeedscopeFile:
    """Convert root spans into a speedscope document, one evented profile per root."""
    interner = FrameInterner()
    profiles: List[Profile] = []
    for root in spans:
        events: List[Event] = []
        emit_events(interner, events, root)
        profiles.append(
            Profile(
                name=root.name,
                unit=ValueUnit.NANOSECONDS,
                start_value=root.start_ns,
                end_value=root.end_ns,
                events=events,
            )
        )
    logger.debug("converted %d profiles sharing %d frames", len(profiles), len(interner))
    return SpeedscopeFile(
        schema=SCHEMA_URL,
        profiles=profiles,
        shared=Shared(frames=interner.frames()),
    )


spans_to_profile_document = spans_to_speedscope
