from __future__ import annotations

import json
from enum import Enum
from typing import Any, Dict, Optional, TextIO


class JsonSerializer:
    def __init__(self, indent: Optional[int] = None, ensure_ascii: bool = False) -> None:
        self.indent = indent
        self.ensure_ascii = ensure_ascii

    def dump(self, payload: Any, handle: TextIO) -> None:
        json.dump(self._normalize(payload), handle, indent=self.indent, ensure_ascii=self.ensure_ascii)

    def load(self, handle: TextIO) -> Dict[str, Any]:
        return json.load(handle)

    def _normalize(self, payload: Any) -> Any:
        if hasattr(payload, "to_dict"):
            return payload.to_dict()
        if isinstance(payload, Enum):
            return payload.value
        if isinstance(payload, dict):
            return {k: self._normalize(v) for k, v in payload.items()}
        if isinstance(payload, (list, tuple)):
            return [self._normalize(v) for v in payload]
        return payload
