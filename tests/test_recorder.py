"""
Tests for the span recorder.
"""

import threading

import pytest

from flamescope import SpanMismatchError, SpanRecorder, tracing


class TestSpanRecorder:
    """Tree building from nested span scopes."""

    def test_nested_scopes_build_tree(self):
        recorder = SpanRecorder()
        with recorder.span("the main"):
            with recorder.span("foobar"):
                pass
        roots = recorder.spans()
        assert [root.name for root in roots] == ["the main"]
        assert [child.name for child in roots[0].children] == ["foobar"]
        child = roots[0].children[0]
        assert roots[0].start_ns <= child.start_ns <= child.end_ns <= roots[0].end_ns

    def test_sibling_roots_in_completion_order(self):
        recorder = SpanRecorder()
        with recorder.span("a"):
            pass
        with recorder.span("b"):
            pass
        assert [root.name for root in recorder.spans()] == ["a", "b"]

    def test_open_spans_are_not_reported(self):
        recorder = SpanRecorder()
        recorder.start("pending")
        assert recorder.spans() == []
        assert recorder.open_depth() == 1

    def test_exception_closes_span(self):
        recorder = SpanRecorder()
        with pytest.raises(RuntimeError):
            with recorder.span("boom"):
                raise RuntimeError("fail")
        assert [root.name for root in recorder.spans()] == ["boom"]
        assert recorder.open_depth() == 0

    def test_unclosed_inner_span_closed_with_outer(self):
        recorder = SpanRecorder()
        with recorder.span("outer"):
            recorder.start("inner")
        roots = recorder.spans()
        assert [child.name for child in roots[0].children] == ["inner"]
        assert recorder.open_depth() == 0

    def test_explicit_start_end(self):
        recorder = SpanRecorder()
        recorder.start("a")
        recorder.start("b")
        recorder.end("b")
        span = recorder.end("a")
        assert span.children[0].name == "b"
        assert recorder.spans() == [span]

    def test_end_wrong_name(self):
        recorder = SpanRecorder()
        recorder.start("a")
        with pytest.raises(SpanMismatchError):
            recorder.end("b")

    def test_end_with_nothing_open(self):
        recorder = SpanRecorder()
        with pytest.raises(SpanMismatchError):
            recorder.end("a")

    def test_clear(self):
        recorder = SpanRecorder()
        with recorder.span("a"):
            pass
        recorder.start("b")
        recorder.clear()
        assert recorder.spans() == []
        assert recorder.open_depth() == 0

    def test_spans_returns_copy(self):
        recorder = SpanRecorder()
        with recorder.span("a"):
            pass
        recorder.spans().clear()
        assert len(recorder.spans()) == 1

    def test_threads_record_separately(self):
        recorder = SpanRecorder()
        seen = {}

        def work():
            with recorder.span("worker"):
                pass
            seen["worker"] = [root.name for root in recorder.spans()]

        with recorder.span("main"):
            thread = threading.Thread(target=work)
            thread.start()
            thread.join()
        assert seen["worker"] == ["worker"]
        assert [root.name for root in recorder.spans()] == ["main"]


class TestDefaultRecorder:
    """Module-level helpers."""

    def test_module_functions_share_recorder(self):
        with tracing.span("main"):
            tracing.start("step")
            tracing.end("step")
        roots = tracing.spans()
        assert roots is not tracing.default_recorder().spans()
        assert [root.name for root in roots] == ["main"]
        assert roots[0].children[0].name == "step"
        tracing.clear()
        assert tracing.spans() == []
