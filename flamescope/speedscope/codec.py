from __future__ import annotations

import os
import tempfile
from typing import Iterable, Optional, TextIO

from .. import tracing
from ..configs import ExportConfig, default_config
from ..tracing.span import Span
from ..utils.serialization import JsonSerializer
from .builder import spans_to_speedscope
from .model import SpeedscopeFile


def write_spans(
    writer: TextIO, spans: Iterable[Span], config: Optional[ExportConfig] = None
) -> None:
    """Convert ``spans`` and write the JSON document to ``writer``.

    Encoding and write errors propagate to the caller unchanged.
    """
    config = config or default_config()
    document = spans_to_speedscope(spans)
    config.serializer().dump(document, writer)


def write_path(path: str, spans: Iterable[Span], config: Optional[ExportConfig] = None) -> None:
    directory = os.path.dirname(path) or "."
    os.makedirs(directory, exist_ok=True)
    fd, tmp_path = tempfile.mkstemp(prefix="speedscope-", suffix=".json", dir=directory)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as handle:
            write_spans(handle, spans, config)
        os.replace(tmp_path, path)
    except BaseException:
        if os.path.exists(tmp_path):
            os.remove(tmp_path)
        raise


def dump(writer: TextIO, config: Optional[ExportConfig] = None) -> None:
    """Write every span finished so far on this thread's default recorder."""
    write_spans(writer, tracing.spans(), config)


def load_speedscope(reader: TextIO) -> SpeedscopeFile:
    return SpeedscopeFile.from_dict(JsonSerializer().load(reader))
