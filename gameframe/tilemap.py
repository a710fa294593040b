"""Tile map of map chips, and the grid of game objects standing on it."""

from __future__ import annotations

import csv
import math
from dataclasses import dataclass
from enum import IntEnum
from pathlib import Path
from typing import Any, Mapping

from gameframe.animation import Animation, AnimationInfo
from gameframe.resources import ResourceServer
from gameframe.vector3 import Vector3

CHIP_W = 64
CHIP_H = 64
MAP_W = 30
MAP_H = 17

_CHIP_FOLDERS = ("res/Mapchip/base/", "res/Mapchip/wall/")
_CHIP_FRAME_PER_SHEET = 10


class ChipType(IntEnum):
    NONE = 0
    FLOOR = 1
    WALL = 2
    HOLE = 3


@dataclass(frozen=True)
class ChipInfo:
    """How to build the chip with a given id: its type, image file and frame count."""

    chip_type: ChipType
    file_name: str
    anim_num: int


class MapChip:
    """One tile of the map, placed in map-chip coordinates."""

    def __init__(self, mode: Any) -> None:
        self.mode = mode
        self.chip_type = ChipType.NONE
        self.pos = Vector3()
        self.draw_offset = Vector3()
        self.anim = Animation(self)

    def anim_process(self) -> None:
        self.anim.process()

    def add_anim_info(self, info: AnimationInfo) -> None:
        self.anim.add_anim_info(info)

    def debug_label(self) -> str:
        """Name of the chip type, as shown in the debug overlay."""
        return self.chip_type.name


def load_chip_csv(path: str | Path) -> dict[int, ChipInfo]:
    """Read the chip table: rows of id, type (0 base, 1 wall), image name, frame count.

    When an id appears twice the first row wins.
    """
    chips: dict[int, ChipInfo] = {}
    with open(path, newline="", encoding="utf-8") as stream:
        for row in csv.reader(stream):
            if not row:
                continue
            chip_id, kind, name, anim_num = row[0], int(row[1]), row[2], row[3]
            info = ChipInfo(
                chip_type=ChipType(kind + 1),
                file_name=_CHIP_FOLDERS[kind] + name + ".png",
                anim_num=int(anim_num),
            )
            chips.setdefault(int(chip_id), info)
    return chips


def load_map_data(layer: Mapping[str, Any]) -> list[int]:
    """Chip ids of a tile layer, row by row, padded with -1 to the full map size."""
    data = [int(value) for value in layer["data"]]
    size = MAP_W * MAP_H
    if len(data) > size:
        raise ValueError(f"layer holds {len(data)} chips, the map has room for {size}")
    return data + [-1] * (size - len(data))


def _index(x: int, y: int) -> int | None:
    if x < 0 or x >= MAP_W or y < 0 or y >= MAP_H:
        return None
    return y * MAP_W + x


class Map:
    """The map chips of a stage and which game object stands on each cell."""

    def __init__(self, mode: Any, resources: ResourceServer | None) -> None:
        self.mode = mode
        self.resources = resources
        self._chips: list[MapChip | None] = [None] * (MAP_W * MAP_H)
        self._objects: list[Any] = [None] * (MAP_W * MAP_H)

    def create_map(self, layer: Mapping[str, Any], chip_data: Mapping[int, ChipInfo]) -> None:
        """Build chips from a tile layer; id 0 is empty and unknown ids raise KeyError."""
        if self.resources is None:
            raise RuntimeError("a resource server is needed to build the map")
        for index, chip_id in enumerate(load_map_data(layer)):
            if chip_id == 0:
                continue
            info = chip_data[chip_id]
            y, x = divmod(index, MAP_W)
            chip = MapChip(self.mode)
            chip.pos = Vector3(x, y, 0)
            chip.chip_type = info.chip_type
            handles = self.resources.load_div_graph(
                info.file_name, info.anim_num, info.anim_num, 1, CHIP_W, CHIP_H
            )
            chip.add_anim_info(
                AnimationInfo(graph_handle=handles, frame_per_sheet=_CHIP_FRAME_PER_SHEET)
            )
            self._chips[index] = chip

    def process(self) -> None:
        for chip in self._chips:
            if chip is not None:
                chip.anim_process()

    def get_map_chip(self, x: int, y: int) -> MapChip | None:
        index = _index(x, y)
        return None if index is None else self._chips[index]

    def get_map_chip_at(self, pos: Vector3) -> MapChip | None:
        return self.get_map_chip(int(pos.x), int(pos.y))

    def get_game_object(self, x: int, y: int) -> Any:
        index = _index(x, y)
        return None if index is None else self._objects[index]

    def get_game_object_at(self, pos: Vector3) -> Any:
        return self.get_game_object(int(pos.x), int(pos.y))

    def set_game_object(self, obj: Any, x: int, y: int) -> None:
        """Move an object onto a cell; a cell outside the map is ignored."""
        index = _index(x, y)
        if index is None:
            return
        self.erase_game_object(obj)
        self._objects[index] = obj

    def set_game_object_at(self, obj: Any, pos: Vector3) -> None:
        self.set_game_object(obj, int(pos.x), int(pos.y))

    def erase_game_object(self, obj: Any) -> None:
        """Take an object off the grid, if it is on it."""
        for index, placed in enumerate(self._objects):
            if placed is obj:
                self._objects[index] = None
                break

    @staticmethod
    def conv_screen_pos_to_map_pos(screen_pos: Vector3) -> Vector3:
        """Map cell containing a screen position, with z set to 0."""
        return Vector3(
            float(math.floor(screen_pos.x / CHIP_W)),
            float(math.floor(screen_pos.y / CHIP_H)),
            0.0,
        )