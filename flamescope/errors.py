from __future__ import annotations


class FlamescopeError(Exception):
    pass


class SpanMismatchError(FlamescopeError):
    """Raised when a recorder is asked to close a span that is not the innermost open one."""


class SchemaMismatchError(FlamescopeError):
    pass


class UnsupportedProfileError(FlamescopeError):
    """Raised when loading a profile variant this package does not produce."""
