from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..utils.serialization import JsonSerializer


@dataclass
class ExportConfig:
    indent: Optional[int] = None
    ensure_ascii: bool = False

    def serializer(self) -> JsonSerializer:
        return JsonSerializer(indent=self.indent, ensure_ascii=self.ensure_ascii)
