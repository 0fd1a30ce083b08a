from woodblock.game import COLORS
from woodblock.visualization.human_play import EMPTY_COLOR, cell_at_pixel, color_for_tag, select_or_rotate


def test_cell_at_pixel():
    assert cell_at_pixel(20, 20, 48, 20, 8) == (0, 0)
    assert cell_at_pixel(20 + 48 * 3 + 5, 20 + 48 * 2, 48, 20, 8) == (2, 3)
    assert cell_at_pixel(10, 30, 48, 20, 8) is None
    assert cell_at_pixel(20 + 48 * 8, 30, 48, 20, 8) is None


def test_every_palette_tag_has_a_color():
    assert color_for_tag(None) == EMPTY_COLOR
    assert len({color_for_tag(tag) for tag in COLORS}) == len(COLORS)


def test_tap_selected_slot_rotates():
    assert select_or_rotate(None, 1) == (1, False)
    assert select_or_rotate(0, 1) == (1, False)
    assert select_or_rotate(1, 1) == (1, True)
