"""Layered game modes and the server that runs them each frame."""

from __future__ import annotations

import time
from itertools import chain
from typing import Any, Callable, Iterator

LAYER_TOP = 2**31 - 1


def _milliseconds() -> int:
    return int(time.monotonic() * 1000)


class ModeBase:
    """One screen or state of the game, run by a ModeServer on its layer.

    ``cnt_mode`` counts processed frames since the mode started, ``tm_mode`` is the
    time in milliseconds since it started and ``tm_step`` the time since the
    previous frame.  Callables in ``process_hooks`` and ``render_hooks`` run on
    every process() and render() of the base mode.
    """

    def __init__(self) -> None:
        self.name = ""
        self.uid = 1
        self.layer = 0
        self.server: ModeServer | None = None
        self.active = False

        self.cnt_mode = 0
        self.tm_mode = 0
        self.tm_step = 0
        self._tm_mode_base = 0
        self._tm_pause_base = 0
        self._tm_pause_step = 0
        self._tm_old_frame = 0

        # How often process() should be called, and how many times per call.
        self.call_per_frame = 1
        self.call_of_count = 1

        self.process_hooks: list[Callable[[], Any]] = []
        self.render_hooks: list[Callable[[], Any]] = []

        # State behind the game hooks.
        self.map_data: Any = None
        self.objects_to_add: list[Any] = []
        self.objects_to_remove: list[Any] = []
        self.player_step_cnt = 0
        self.game_over = False

    def initialize(self) -> bool:
        """Called once when the mode becomes active, before its first process()."""
        self.active = True
        return True

    def terminate(self) -> bool:
        """Called once when the mode is removed from the server."""
        self.active = False
        return True

    def process(self) -> bool:
        """Per-frame update: runs the process hooks."""
        for hook in self.process_hooks:
            hook()
        return True

    def render(self) -> bool:
        """Per-frame drawing: runs the render hooks."""
        for hook in self.render_hooks:
            hook()
        return True

    def step_time(self, tm_now: int) -> None:
        """Advance the mode's clocks to ``tm_now`` milliseconds."""
        if self.cnt_mode == 0:
            self.tm_mode = 0
            self.tm_step = 0
            self._tm_mode_base = tm_now
            self._tm_pause_base = 0
            self._tm_pause_step = 0
        else:
            self.tm_mode = tm_now - self._tm_mode_base + self._tm_pause_step
            self.tm_step = tm_now - self._tm_old_frame
        self._tm_old_frame = tm_now

    def step_count(self) -> None:
        self.cnt_mode += 1

    # Hooks used by the game mode.

    def get_map_data(self) -> Any:
        """The mode's map, or None if it has none."""
        return self.map_data

    def add_game_object(self, obj: Any) -> None:
        """Reserve an object to be added to the mode."""
        self.objects_to_add.append(obj)

    def remove_game_object(self, obj: Any) -> None:
        """Reserve an object to be removed from the mode."""
        self.objects_to_remove.append(obj)

    def add_player_step_cnt(self) -> None:
        self.player_step_cnt += 1

    def get_player_step_cnt(self) -> int:
        return self.player_step_cnt

    def set_game_over(self) -> None:
        self.game_over = True


class ModeServer:
    """Keeps modes ordered by layer; additions and removals take effect at process_init().

    Processing runs from the top layer down, rendering from the bottom layer up.
    ``clock`` returns the current time in milliseconds.
    """

    def __init__(self, clock: Callable[[], int] | None = None) -> None:
        self._clock = clock or _milliseconds
        self._modes: list[ModeBase] = []
        self._uid_count = 1
        self._to_add: list[ModeBase] = []
        self._to_delete: list[ModeBase] = []
        self._now_mode: ModeBase | None = None
        self._skip_process_mode: ModeBase | None = None
        self._skip_render_mode: ModeBase | None = None
        self._pause_process_mode: ModeBase | None = None

    @property
    def modes(self) -> list[ModeBase]:
        """Active modes from the bottom layer to the top."""
        return list(self._modes)

    def add(self, mode: ModeBase, layer: int, name: str) -> int:
        """Reserve a mode for activation and return its uid.

        Raises ValueError if an active mode already has this name.
        """
        if self.search(name):
            raise ValueError(f"a mode named {name!r} is already active")
        self._to_add.append(mode)
        mode.uid = self._uid_count
        self._uid_count += 1
        mode.layer = layer
        mode.name = name
        mode.server = self
        return mode.uid

    def remove(self, mode_or_name: ModeBase | str) -> None:
        """Reserve a mode for removal; an unknown name raises KeyError."""
        if isinstance(mode_or_name, str):
            mode = self.get(mode_or_name)
            if mode is None:
                raise KeyError(mode_or_name)
        else:
            mode = mode_or_name
        self._to_delete.append(mode)

    def _is_del_regist(self, mode: ModeBase) -> bool:
        return any(m is mode for m in self._to_delete)

    def _live(self) -> Iterator[ModeBase]:
        return (m for m in chain(self._modes, self._to_add) if not self._is_del_regist(m))

    def _is_added(self, mode: ModeBase) -> bool:
        return any(m is mode for m in self._live())

    def get(self, key: int | str) -> ModeBase | None:
        """Active or pending mode by uid or name, unless it is reserved for removal."""
        if isinstance(key, str):
            return next((m for m in self._live() if m.name == key), None)
        return next((m for m in self._live() if m.uid == key), None)

    def get_id(self, mode_or_name: ModeBase | str | None) -> int | None:
        mode = self.get(mode_or_name) if isinstance(mode_or_name, str) else mode_or_name
        if mode is not None and self._is_added(mode):
            return mode.uid
        return None

    def get_name(self, mode_or_uid: ModeBase | int | None) -> str | None:
        mode = self.get(mode_or_uid) if isinstance(mode_or_uid, int) else mode_or_uid
        if mode is not None and self._is_added(mode):
            return mode.name
        return None

    def clear(self) -> None:
        """Terminate every active mode (top first) and every pending one."""
        for mode in reversed(self._modes):
            mode.terminate()
        for mode in self._to_add:
            mode.terminate()
        self._modes.clear()
        self._to_add.clear()
        self._to_delete.clear()

    def search(self, name: str) -> bool:
        """True if an active mode has this name."""
        return any(m.name == name for m in self._modes)

    def change_layer(self, mode_name: str, layer_num: int) -> None:
        """Move a mode to another layer and reorder the active modes."""
        mode = self.get(mode_name)
        if mode is None:
            return
        mode.layer = layer_num
        modes = self._modes
        count = len(modes)
        for i in range(count):
            for j in range(count):
                if modes[i].layer < modes[j].layer:
                    modes[i], modes[j] = modes[j], modes[i]

    def is_above_layer(self, mode: ModeBase) -> bool:
        """True if some active mode lies on a higher layer than ``mode``."""
        return any(m.layer > mode.layer for m in self._modes)

    def _release(self, mode: ModeBase) -> None:
        kept = []
        for m in self._modes:
            if m is mode:
                m.terminate()
            else:
                kept.append(m)
        self._modes = kept

    def process_init(self) -> None:
        """Apply reserved removals and additions, then clear skip and pause marks."""
        for mode in self._to_delete:
            self._release(mode)
        self._to_delete.clear()

        if self._to_add:
            for mode in self._to_add:
                mode.initialize()
                self._modes.append(mode)
            self._to_add.clear()
            self._modes.sort(key=lambda m: m.layer)

        self._skip_process_mode = None
        self._skip_render_mode = None
        self._pause_process_mode = None

    def process(self) -> None:
        """Process modes from the top layer down."""
        now = self._clock()
        pause = False
        for mode in list(reversed(self._modes)):
            if not self._is_del_regist(mode):
                self._now_mode = mode
                if not pause:
                    mode.step_time(now)
                mode.process()
                if not self._modes:
                    break
                if not pause:
                    mode.step_count()
            if self._skip_process_mode is mode:
                break
            if self._pause_process_mode is mode:
                pause = True
        self._now_mode = None

    def render(self) -> None:
        """Render modes from the bottom layer up."""
        for mode in list(self._modes):
            if self._skip_render_mode is not None and self._skip_render_mode is not mode:
                continue
            self._skip_render_mode = None
            if not self._is_del_regist(mode):
                self._now_mode = mode
                mode.render()
        self._now_mode = None

    def skip_process_under_layer(self) -> None:
        """Modes below the one being processed are not processed this frame."""
        self._skip_process_mode = self._now_mode

    def skip_render_under_layer(self) -> None:
        """Modes below the one being processed are not rendered this frame."""
        self._skip_render_mode = self._now_mode

    def pause_process_under_layer(self) -> None:
        """Modes below the one being processed do not advance their clocks this frame."""
        self._pause_process_mode = self._now_mode