from __future__ import annotations

import threading
import time
from contextlib import contextmanager
from typing import Iterator, List

from ..errors import SpanMismatchError
from .span import Span


class SpanRecorder:
    """Collects nested spans per thread.

    Spans opened while another span is open become its children. A span
    that closes with nothing open above it is a finished root and shows up
    in ``spans()``.
    """

    def __init__(self) -> None:
        self._local = threading.local()

    def _state(self):
        local = self._local
        if not hasattr(local, "roots"):
            local.roots = []
            local.stack = []
        return local

    def start(self, name: str) -> Span:
        state = self._state()
        span = Span(name=name, start_ns=time.perf_counter_ns(), end_ns=0)
        state.stack.append(span)
        return span

    def end(self, name: str) -> Span:
        state = self._state()
        if not state.stack:
            raise SpanMismatchError(f"cannot end {name!r}: no span is open")
        current = state.stack[-1]
        if current.name != name:
            raise SpanMismatchError(
                f"cannot end {name!r}: innermost open span is {current.name!r}"
            )
        return self._close(state)

    def _close(self, state) -> Span:
        span = state.stack.pop()
        span.end_ns = time.perf_counter_ns()
        if state.stack:
            state.stack[-1].children.append(span)
        else:
            state.roots.append(span)
        return span

    @contextmanager
    def span(self, name: str) -> Iterator[Span]:
        span = self.start(name)
        try:
            yield span
        finally:
            state = self._state()
            # spans left open inside the block are closed along with this one
            if any(item is span for item in state.stack):
                while state.stack[-1] is not span:
                    self._close(state)
                self._close(state)

    def spans(self) -> List[Span]:
        return list(self._state().roots)

    def open_depth(self) -> int:
        return len(self._state().stack)

    def clear(self) -> None:
        state = self._state()
        state.roots.clear()
        state.stack.clear()
