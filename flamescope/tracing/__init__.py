from typing import ContextManager, List

from .recorder import SpanRecorder
from .span import Span

_default_recorder = SpanRecorder()


def default_recorder() -> SpanRecorder:
    return _default_recorder


def span(name: str) -> ContextManager[Span]:
    return _default_recorder.span(name)


def start(name: str) -> Span:
    return _default_recorder.start(name)


def end(name: str) -> Span:
    return _default_recorder.end(name)


def spans() -> List[Span]:
    return _default_recorder.spans()


def clear() -> None:
    _default_recorder.clear()


__all__ = [
    "Span",
    "SpanRecorder",
    "default_recorder",
    "span",
    "start",
    "end",
    "spans",
    "clear",
]
