"""Frame-table sprite animations."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class AnimationInfo:
    """One animation: image handles, the order to show them, and frames per image."""

    graph_handle: list[int] = field(default_factory=list)
    draw_tbl: list[int] = field(default_factory=list)
    tbl_num: int = 0
    frame_per_sheet: int = 0


class Animation:
    """A set of animations for one object, one of which is current."""

    def __init__(self, parent: Any) -> None:
        self.parent = parent
        self.infos: list[AnimationInfo] = []
        self.anim_index = 0
        self.anim_cnt = 0
        self._anim_end = False
        self.zoom = 1.0
        self.angle = 0.0
        # Drawn at the size of one map chip unless told otherwise.
        self.width = 64.0
        self.height = 64.0

    @property
    def _index_max(self) -> int:
        return len(self.infos) - 1

    def process(self) -> None:
        """Advance the frame counter; mark the end once the table has played through."""
        if self.anim_index <= self._index_max:
            self.anim_cnt += 1
            info = self.infos[self.anim_index]
            if info.frame_per_sheet * info.tbl_num <= self.anim_cnt:
                self.anim_cnt = 0
                self._anim_end = True

    def add_anim_info(self, info: AnimationInfo) -> None:
        """Add an animation, filling in a default draw table and frame count."""
        if not info.draw_tbl:
            info.draw_tbl = list(range(len(info.graph_handle)))
        info.tbl_num = len(info.draw_tbl)
        if info.frame_per_sheet == 0:
            info.frame_per_sheet = 1
        self.infos.append(info)

    def set_anim_index(self, index: int) -> None:
        """Switch animation; an index out of range is ignored."""
        if 0 <= index <= self._index_max and index != self.anim_index:
            self.anim_index = index
            self.anim_cnt = 0
            self._anim_end = False

    def is_end(self) -> bool:
        return self._anim_end

    def graph_handle(self) -> int | None:
        """Image handle to show now, or None if there is no current animation."""
        if self._index_max < self.anim_index:
            return None
        info = self.infos[self.anim_index]
        return info.graph_handle[info.draw_tbl[(self.anim_cnt // info.frame_per_sheet) % info.tbl_num]]

    def set_size(self, width: float, height: float) -> None:
        self.width = width
        self.height = height