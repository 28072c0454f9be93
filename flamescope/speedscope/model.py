from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

from ..errors import SchemaMismatchError, UnsupportedProfileError

SCHEMA_URL = "https://www.speedscope.app/file-format-schema.json"


class EventType(Enum):
    OPEN_FRAME = "O"
    CLOSE_FRAME = "C"


class ValueUnit(Enum):
    BYTES = "bytes"
    MICROSECONDS = "microseconds"
    MILLISECONDS = "milliseconds"
    NANOSECONDS = "nanoseconds"
    NONE = "none"
    SECONDS = "seconds"


@dataclass(frozen=True)
class Frame:
    name: str
    file: Optional[str] = None
    line: Optional[int] = None
    col: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "file": self.file, "line": self.line, "col": self.col}

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "Frame":
        return cls(
            name=payload["name"],
            file=payload.get("file"),
            line=payload.get("line"),
            col=payload.get("col"),
        )


@dataclass(frozen=True)
class Event:
    event_type: EventType
    at: int
    frame: int

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.event_type.value, "at": self.at, "frame": self.frame}

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "Event":
        return cls(
            event_type=EventType(payload["type"]),
            at=payload["at"],
            frame=payload["frame"],
        )


@dataclass
class Profile:
    """Evented profile: one per root span."""

    name: str
    start_value: int
    end_value: int
    events: List[Event] = field(default_factory=list)
    unit: ValueUnit = ValueUnit.NANOSECONDS

    @property
    def type(self) -> str:
        return "evented"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.type,
            "name": self.name,
            "unit": self.unit.value,
            "startValue": self.start_value,
            "endValue": self.end_value,
            "events": [event.to_dict() for event in self.events],
        }

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "Profile":
        kind = payload.get("type")
        if kind != "evented":
            raise UnsupportedProfileError(f"unsupported profile type: {kind!r}")
        return cls(
            name=payload["name"],
            unit=ValueUnit(payload["unit"]),
            start_value=payload["startValue"],
            end_value=payload["endValue"],
            events=[Event.from_dict(item) for item in payload["events"]],
        )


@dataclass
class Shared:
    frames: List[Frame] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {"frames": [frame.to_dict() for frame in self.frames]}

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "Shared":
        return cls(frames=[Frame.from_dict(item) for item in payload["frames"]])


@dataclass
class SpeedscopeFile:
    profiles: List[Profile] = field(default_factory=list)
    shared: Shared = field(default_factory=Shared)
    schema: str = SCHEMA_URL
    active_profile_index: Optional[int] = None
    exporter: Optional[str] = None
    name: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "$schema": self.schema,
            "profiles": [profile.to_dict() for profile in self.profiles],
            "shared": self.shared.to_dict(),
            "activeProfileIndex": self.active_profile_index,
            "exporter": self.exporter,
            "name": self.name,
        }

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "SpeedscopeFile":
        schema = payload.get("$schema")
        if schema != SCHEMA_URL:
            raise SchemaMismatchError(f"unexpected $schema: {schema!r}")
        return cls(
            schema=schema,
            profiles=[Profile.from_dict(item) for item in payload.get("profiles", [])],
            shared=Shared.from_dict(payload.get("shared", {"frames": []})),
            active_profile_index=payload.get("activeProfileIndex"),
            exporter=payload.get("exporter"),
            name=payload.get("name"),
        )
