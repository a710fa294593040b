"""Game objects that stand on the tile map, and the enemies built on them."""

from __future__ import annotations

from enum import Enum
from typing import Any, Iterable

from gameframe.animation import Animation, AnimationInfo
from gameframe.vector3 import Vector3


class ObjectType(Enum):
    NONE = 0
    PLAYER = 1
    MEATBOX = 2
    ENEMY = 3
    BEAM_STAND = 4
    BEAM_BODY = 5


class GameObject:
    """An object in map-chip coordinates, registered on the mode's map when placed.

    Objects with ``set_to_map`` turned off (effects, for instance) are never
    put on the map grid.
    """

    def __init__(self, mode: Any) -> None:
        self.mode = mode
        self.use = True
        self.map_data = mode.get_map_data() if mode is not None else None
        self.set_to_map = True
        self.object_type = ObjectType.NONE
        self.pos = Vector3()
        self.draw_offset = Vector3()
        self.anim = Animation(self)
        self.child_objects: list[GameObject] = []

    def destroy(self) -> None:
        """Ask the mode to remove this object and stop using it."""
        self.mode.remove_game_object(self)
        self.use = False

    def init(self) -> None:
        """Called once the object has been fully set up."""

    def process(self) -> None:
        """Per-frame update."""

    def process_child_objects(self) -> None:
        if not self.use:
            return
        for child in self.child_objects:
            child.process()

    def check_move(self, move: Vector3) -> bool:
        """Whether the object can be pushed by ``move``; plain objects cannot."""
        return False

    def anim_process(self) -> None:
        if self.use:
            self.anim.process()

    def set_use(self, use: bool) -> None:
        """Set whether the object is in use; either way it leaves the map grid."""
        self.use = use
        if self.map_data is not None and self.set_to_map:
            self.map_data.erase_game_object(self)

    def set_pos(self, pos: Vector3) -> None:
        self.pos = pos.copy()
        if self.map_data is not None and self.set_to_map:
            self.map_data.set_game_object_at(self, self.pos)

    def add_anim_info(self, info: AnimationInfo) -> None:
        self.anim.add_anim_info(info)

    def set_anim_index(self, index: int) -> None:
        self.anim.set_anim_index(index)

    def add_child_object(self, obj: GameObject) -> None:
        self.child_objects.append(obj)


class Enemy(GameObject):
    """An object the player must not walk into."""

    def __init__(self, mode: Any) -> None:
        super().__init__(mode)
        self.object_type = ObjectType.ENEMY


# Arrow animation indices: up, down, left, right; red arrows follow the four yellow ones.
_ARROW_UP, _ARROW_DOWN, _ARROW_LEFT, _ARROW_RIGHT = range(4)
_ARROW_RED = 4


class EnemyTomato(Enemy):
    """Enemy walking back and forth along a route, one cell every second player step.

    Its first child object is the arrow showing where it goes next; the arrow
    turns red when the tomato moves on the player's next step.
    """

    def __init__(self, mode: Any) -> None:
        super().__init__(mode)
        self.move_route: list[Vector3] = []
        self.route_index = 0
        self.move_order = 1
        self.next_pos = Vector3()

    def init(self) -> None:
        self._check_next_pos()

    def process(self) -> None:
        if not self.use:
            return
        self._move_process()

    def set_move_route(self, route: Iterable[Vector3]) -> None:
        self.move_route = [point.copy() for point in route]
        self.route_index = 0
        self.move_order = 1

    def _move_process(self) -> None:
        if not self.move_route:
            return

        if self.mode.get_player_step_cnt() == 2:
            blocker = self.map_data.get_game_object_at(self.next_pos)
            if blocker is not None:
                if blocker.object_type is ObjectType.PLAYER:
                    self.mode.set_game_over()
                else:
                    self.move_order *= -1
            else:
                self.route_index += self.move_order
                self.pos = self.next_pos.copy()
                self.map_data.set_game_object_at(self, self.pos)
            self._check_next_pos()

        self._set_arrow_effect()

    def _check_next_pos(self) -> None:
        """Turn around at either end of the route and pick the next cell."""
        if self.move_order == 1 and self.route_index >= len(self.move_route) - 1:
            self.move_order = -1
        elif self.move_order == -1 and self.route_index <= 0:
            self.move_order = 1
        self.next_pos = self.move_route[self.route_index + self.move_order].copy()

    def _set_arrow_effect(self) -> None:
        if not self.child_objects:
            return
        arrow = self.child_objects[0]
        arrow.set_pos(self.next_pos)

        direction = _ARROW_UP
        if self.pos.y > self.next_pos.y:
            direction = _ARROW_UP
        elif self.pos.y < self.next_pos.y:
            direction = _ARROW_DOWN
        elif self.pos.x > self.next_pos.x:
            direction = _ARROW_LEFT
        elif self.pos.x < self.next_pos.x:
            direction = _ARROW_RIGHT

        color = _ARROW_RED if self.mode.get_player_step_cnt() == 1 else 0
        arrow.set_anim_index(direction + color)