import pytest

from rushmatch.shapes import (
    RUSH_STYLES,
    RUSH_TYPES,
    count_matching_lines,
    matching_rush_types,
)


def _row(left, middle, right, width):
    if width == 1:
        return left
    return left + middle * (width - 2) + right


def draw(style, width, height):
    rows = [_row(style.upper_left, style.horizontal, style.upper_right, width)]
    if height > 1:
        rows += [_row(style.vertical, " ", style.vertical, width)] * (height - 2)
        rows.append(_row(style.lower_left, style.horizontal, style.lower_right, width))
    return "".join(row + "\n" for row in rows)


@pytest.mark.parametrize("rush_type", range(RUSH_TYPES))
@pytest.mark.parametrize("size", [(1, 1), (1, 3), (3, 1), (5, 4), (2, 2)])
def test_drawn_box_matches_its_style(rush_type, size):
    width, height = size
    text = draw(RUSH_STYLES[rush_type], width, height)
    assert rush_type in matching_rush_types(text, width, height)
    assert count_matching_lines(text, width, height, rush_type) == height


def test_rush00_square_is_unique():
    text = draw(RUSH_STYLES[0], 3, 3)
    assert matching_rush_types(text, 3, 3) == [0]


def test_single_cell_matches_three_styles():
    assert matching_rush_types("A\n", 1, 1) == [2, 3, 4]


def test_single_column_distinguishes_lower_left():
    assert matching_rush_types("A\nB\nC\n", 1, 3) == [2, 4]


def test_broken_row_stops_count():
    width, height, broken = 4, 5, 2
    rows = draw(RUSH_STYLES[1], width, height).splitlines(keepends=True)
    rows[broken] = "*xx*\n"
    text = "".join(rows)
    assert count_matching_lines(text, width, height, 1) == broken
    assert 1 not in matching_rush_types(text, width, height)


def test_zero_length_matches_everything():
    assert matching_rush_types("", 0, 0) == list(range(RUSH_TYPES))


def test_first_line_accepts_end_of_text():
    assert RUSH_STYLES[0].first_line_matches("o-o", 3) is True
    assert RUSH_STYLES[0].last_line_matches("o-o", 3) is False


def test_middle_line_requires_spaces():
    assert RUSH_STYLES[0].middle_line_matches("| |\n", 3) is True
    assert RUSH_STYLES[0].middle_line_matches("|x|\n", 3) is False
    assert count_matching_lines("o-o\n| |\no-o\n", 3, 3, 0) == 3
    assert count_matching_lines("o-o\n|x|\no-o\n", 3, 3, 0) == 1


def test_wrong_line_width_fails():
    text = "o-o\n| \no-o\n"
    assert 0 not in matching_rush_types(text, 3, 3)


@pytest.mark.parametrize("rush_type", [-1, RUSH_TYPES])
def test_unknown_rush_type_raises(rush_type):
    with pytest.raises(ValueError):
        count_matching_lines("A\n", 1, 1, rush_type)