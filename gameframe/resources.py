"""Caching of loaded images and sounds by file name."""

from __future__ import annotations

from typing import Protocol


class _ResourceLoader(Protocol):
    def load_graph(self, file_name: str) -> int: ...

    def load_div_graph(
        self, file_name: str, all_num: int, x_num: int, y_num: int, x_size: int, y_size: int
    ) -> list[int]: ...

    def load_sound_mem(self, file_name: str) -> int: ...

    def delete_graph(self, handle: int) -> None: ...

    def delete_sound_mem(self, handle: int) -> None: ...


class ResourceServer:
    """Loads each image, split image and sound once and hands out the cached handles.

    A failed split-image load raises from the loader and is not cached.
    """

    def __init__(self, loader: _ResourceLoader) -> None:
        self._loader = loader
        self._graphs: dict[str, int] = {}
        self._div_graphs: dict[str, list[int]] = {}
        self._sounds: dict[str, int] = {}

    def load_graph(self, file_name: str) -> int:
        if file_name not in self._graphs:
            self._graphs[file_name] = self._loader.load_graph(file_name)
        return self._graphs[file_name]

    def load_div_graph(
        self, file_name: str, all_num: int, x_num: int, y_num: int, x_size: int, y_size: int
    ) -> list[int]:
        """Handles of an image cut into ``all_num`` pieces; a cached entry keeps its own count."""
        cached = self._div_graphs.get(file_name)
        if cached is None:
            handles = list(
                self._loader.load_div_graph(file_name, all_num, x_num, y_num, x_size, y_size)
            )
            self._div_graphs[file_name] = handles
            cached = handles
        return list(cached)

    def load_sound_mem(self, file_name: str) -> int:
        if file_name not in self._sounds:
            self._sounds[file_name] = self._loader.load_sound_mem(file_name)
        return self._sounds[file_name]

    def clear(self) -> None:
        """Release every cached handle through the loader and forget them."""
        for handle in self._graphs.values():
            self._loader.delete_graph(handle)
        self._graphs.clear()
        for handles in self._div_graphs.values():
            for handle in handles:
                self._loader.delete_graph(handle)
        self._div_graphs.clear()
        for handle in self._sounds.values():
            self._loader.delete_sound_mem(handle)
        self._sounds.clear()