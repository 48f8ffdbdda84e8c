from reid_viewer.core.cursor import DualCursor, Side


def test_initial_state():
    assert DualCursor.initial(0) == DualCursor(0, -1, -1)
    assert DualCursor.initial(1) == DualCursor(1, 0, -1)
    assert DualCursor.initial(5) == DualCursor(5, 0, 1)


def test_select_in_and_out_of_bounds():
    cursor = DualCursor.initial(3)
    assert cursor.select(Side.TARGET, 2).target_index == 2
    assert cursor.select(Side.REFERENCE, 2).reference_index == 2
    assert cursor.select(Side.TARGET, 3) == cursor
    assert cursor.select(Side.REFERENCE, -1) == cursor


def test_navigate_does_not_wrap():
    cursor = DualCursor.initial(3)
    assert cursor.navigate(Side.REFERENCE, -1) == cursor
    last = cursor.select(Side.TARGET, 2)
    assert last.navigate(Side.TARGET, 1) == last
    assert last.navigate(Side.TARGET, -1).target_index == 1


def test_sides_are_independent():
    cursor = DualCursor.initial(4).navigate(Side.REFERENCE, 1)
    assert cursor.reference_index == 1
    assert cursor.target_index == 1


def test_can_navigate():
    cursor = DualCursor.initial(2)
    assert not cursor.can_navigate(Side.REFERENCE, -1)
    assert cursor.can_navigate(Side.REFERENCE, 1)
    assert not cursor.can_navigate(Side.TARGET, 1)
