import pytest

from gameframe.resources import ResourceServer
from gameframe.tilemap import (
    MAP_H,
    MAP_W,
    ChipInfo,
    ChipType,
    Map,
    MapChip,
    load_chip_csv,
    load_map_data,
)
from gameframe.vector3 import Vector3


class FakeLoader:
    def __init__(self):
        self.div_calls = []

    def load_graph(self, file_name):
        return 1

    def load_div_graph(self, file_name, all_num, x_num, y_num, x_size, y_size):
        self.div_calls.append((file_name, all_num, x_num, y_num, x_size, y_size))
        return list(range(100, 100 + all_num))

    def load_sound_mem(self, file_name):
        return 2

    def delete_graph(self, handle):
        pass

    def delete_sound_mem(self, handle):
        pass


CHIPS = {
    1: ChipInfo(ChipType.FLOOR, "res/Mapchip/base/floor.png", 2),
    2: ChipInfo(ChipType.WALL, "res/Mapchip/wall/brick.png", 1),
}


def make_layer(cells):
    data = [0] * (MAP_W * MAP_H)
    for (x, y), chip in cells.items():
        data[y * MAP_W + x] = chip
    return {"data": data}


def test_load_chip_csv(tmp_path):
    path = tmp_path / "MapChip.csv"
    path.write_text("1,0,floor,2\n2,1,brick,1\n", encoding="utf-8")
    chips = load_chip_csv(path)
    assert chips[1] == ChipInfo(ChipType.FLOOR, "res/Mapchip/base/floor.png", 2)
    assert chips[2] == ChipInfo(ChipType.WALL, "res/Mapchip/wall/brick.png", 1)


def test_load_chip_csv_keeps_first_duplicate(tmp_path):
    path = tmp_path / "MapChip.csv"
    path.write_text("1,0,floor,2\n1,1,brick,1\n", encoding="utf-8")
    chips = load_chip_csv(path)
    assert chips[1].chip_type is ChipType.FLOOR
    assert len(chips) == 1


def test_load_map_data_pads_with_minus_one():
    data = load_map_data({"data": [5, 6]})
    assert len(data) == MAP_W * MAP_H
    assert data[:2] == [5, 6]
    assert set(data[2:]) == {-1}


def test_load_map_data_rejects_too_much():
    with pytest.raises(ValueError):
        load_map_data({"data": [1] * (MAP_W * MAP_H + 1)})


def test_load_map_data_needs_data_key():
    with pytest.raises(KeyError):
        load_map_data({})


def test_create_map_builds_chips():
    loader = FakeLoader()
    game_map = Map(None, ResourceServer(loader))
    game_map.create_map(make_layer({(0, 0): 1, (3, 1): 2}), CHIPS)

    floor = game_map.get_map_chip(0, 0)
    wall = game_map.get_map_chip(3, 1)
    assert floor.chip_type is ChipType.FLOOR
    assert floor.pos == Vector3(0, 0, 0)
    assert wall.chip_type is ChipType.WALL
    assert wall.pos == Vector3(3, 1, 0)
    assert game_map.get_map_chip(1, 0) is None
    assert ("res/Mapchip/base/floor.png", 2, 2, 1, 64, 64) in loader.div_calls
    assert floor.anim.infos[0].graph_handle == [100, 101]
    assert floor.anim.infos[0].frame_per_sheet == 10


def test_create_map_unknown_chip_raises():
    game_map = Map(None, ResourceServer(FakeLoader()))
    with pytest.raises(KeyError):
        game_map.create_map(make_layer({(0, 0): 9}), CHIPS)


def test_create_map_without_resources_raises():
    game_map = Map(None, None)
    with pytest.raises(RuntimeError):
        game_map.create_map(make_layer({}), CHIPS)


def test_get_map_chip_out_of_bounds():
    game_map = Map(None, ResourceServer(FakeLoader()))
    game_map.create_map(make_layer({(0, 0): 1}), CHIPS)
    assert game_map.get_map_chip(-1, 0) is None
    assert game_map.get_map_chip(MAP_W, 0) is None
    assert game_map.get_map_chip(0, MAP_H) is None


def test_get_map_chip_at_truncates():
    game_map = Map(None, ResourceServer(FakeLoader()))
    game_map.create_map(make_layer({(3, 1): 2}), CHIPS)
    assert game_map.get_map_chip_at(Vector3(3.7, 1.2, 0)) is game_map.get_map_chip(3, 1)


def test_process_advances_chip_animations():
    game_map = Map(None, ResourceServer(FakeLoader()))
    game_map.create_map(make_layer({(0, 0): 1}), CHIPS)
    chip = game_map.get_map_chip(0, 0)
    before = chip.anim.anim_cnt
    game_map.process()
    assert chip.anim.anim_cnt == before + 1


def test_set_game_object_moves_object():
    game_map = Map(None, None)
    obj = object()
    game_map.set_game_object(obj, 1, 1)
    game_map.set_game_object(obj, 2, 2)
    assert game_map.get_game_object(1, 1) is None
    assert game_map.get_game_object(2, 2) is obj


def test_set_game_object_out_of_bounds_is_ignored():
    game_map = Map(None, None)
    obj = object()
    game_map.set_game_object_at(obj, Vector3(4, 5, 0))
    game_map.set_game_object(obj, MAP_W, 0)
    assert game_map.get_game_object_at(Vector3(4, 5, 0)) is obj
    assert game_map.get_game_object(MAP_W, 0) is None


def test_erase_game_object():
    game_map = Map(None, None)
    obj = object()
    game_map.set_game_object(obj, 6, 7)
    game_map.erase_game_object(obj)
    assert game_map.get_game_object(6, 7) is None


def test_conv_screen_pos_to_map_pos():
    assert Map.conv_screen_pos_to_map_pos(Vector3(130, 64, 5)) == Vector3(2, 1, 0)
    assert Map.conv_screen_pos_to_map_pos(Vector3(-1, -1, 0)) == Vector3(-1, -1, 0)


def test_map_chip_debug_label():
    chip = MapChip(None)
    assert chip.debug_label() == "NONE"
    chip.chip_type = ChipType.WALL
    assert chip.debug_label() == "WALL"