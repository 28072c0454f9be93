from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List


@dataclass
class Span:
    name: str
    start_ns: int
    end_ns: int
    children: List["Span"] = field(default_factory=list)

    @property
    def duration_ns(self) -> int:
        return self.end_ns - self.start_ns

    def walk(self) -> Iterator["Span"]:
        stack = [self]
        while stack:
            span = stack.pop()
            yield span
            stack.extend(reversed(span.children))

    def count(self) -> int:
        return sum(1 for _ in self.walk())
