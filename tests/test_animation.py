from gameframe.animation import Animation, AnimationInfo


def make_info(handles, table=None, frames=0):
    return AnimationInfo(graph_handle=list(handles), draw_tbl=list(table or []), frame_per_sheet=frames)


def test_add_anim_info_fills_defaults():
    anim = Animation(parent=None)
    info = make_info([10, 11, 12])
    anim.add_anim_info(info)
    assert info.draw_tbl == [0, 1, 2]
    assert info.tbl_num == len(info.graph_handle)
    assert info.frame_per_sheet == 1


def test_add_anim_info_keeps_given_table():
    anim = Animation(parent=None)
    table = [0, 1, 2, 2, 2, 1]
    info = make_info([10, 11, 12], table, 10)
    anim.add_anim_info(info)
    assert info.draw_tbl == table
    assert info.tbl_num == len(table)
    assert info.frame_per_sheet == 10


def test_graph_handle_follows_draw_table():
    anim = Animation(parent=None)
    anim.add_anim_info(make_info([10, 11, 12], [0, 1, 2, 2, 2, 1], 10))
    seen = []
    for _ in range(60):
        seen.append(anim.graph_handle())
        anim.process()
    assert seen[0] == 10
    assert seen[10] == 11
    assert seen[20] == 12
    assert seen[50] == 11
    assert set(seen) == {10, 11, 12}


def test_animation_ends_after_full_table():
    anim = Animation(parent=None)
    anim.add_anim_info(make_info([1, 2], frames=3))
    for _ in range(5):
        anim.process()
    assert anim.is_end() is False
    anim.process()
    assert anim.is_end() is True
    assert anim.anim_cnt == 0
    assert anim.graph_handle() == 1


def test_graph_handle_without_animation_is_none():
    anim = Animation(parent=None)
    anim.process()
    assert anim.graph_handle() is None
    assert anim.anim_cnt == 0


def test_set_anim_index_out_of_range_is_ignored():
    anim = Animation(parent=None)
    anim.add_anim_info(make_info([5]))
    anim.set_anim_index(3)
    assert anim.anim_index == 0
    anim.set_anim_index(-1)
    assert anim.anim_index == 0


def test_set_anim_index_resets_counter_and_end():
    anim = Animation(parent=None)
    anim.add_anim_info(make_info([5, 6], frames=2))
    anim.add_anim_info(make_info([7, 8], frames=2))
    for _ in range(4):
        anim.process()
    anim.process()
    assert anim.is_end() is True
    anim.set_anim_index(1)
    assert anim.anim_index == 1
    assert anim.anim_cnt == 0
    assert anim.is_end() is False
    assert anim.graph_handle() == 7


def test_set_same_index_keeps_counter():
    anim = Animation(parent=None)
    anim.add_anim_info(make_info([5, 6], frames=4))
    anim.process()
    anim.process()
    anim.set_anim_index(0)
    assert anim.anim_cnt == 2


def test_set_size_and_defaults():
    anim = Animation(parent="owner")
    assert anim.zoom == 1.0
    assert anim.width == 64.0
    anim.set_size(32, 48)
    assert (anim.width, anim.height) == (32, 48)
    assert anim.parent == "owner"