from __future__ import annotations

from typing import Dict, List, Optional

from .model import Frame


class FrameInterner:
    """Assigns dense indices to frames in first-seen order."""

    def __init__(self) -> None:
        self._index: Dict[Frame, int] = {}
        self._frames: List[Frame] = []

    def intern(
        self,
        name: str,
        file: Optional[str] = None,
        line: Optional[int] = None,
        col: Optional[int] = None,
    ) -> int:
        frame = Frame(name=name, file=file, line=line, col=col)
        index = self._index.get(frame)
        if index is None:
            index = len(self._frames)
            self._index[frame] = index
            self._frames.append(frame)
        return index

    def index_of(self, frame: Frame) -> int:
        return self._index[frame]

    def frames(self) -> List[Frame]:
        return list(self._frames)

    def __contains__(self, frame: Frame) -> bool:
        return frame in self._index

    def __len__(self) -> int:
        return len(self._frames)
