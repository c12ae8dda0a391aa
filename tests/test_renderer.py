import pytest

from bytehist.errors import EmptyInputError
from bytehist.renderer import (
    SCREEN_COLUMNS,
    bar_length,
    histogram_lines,
    render,
    summarize,
    summary_line,
)


def _table(counts: dict) -> tuple:
    return tuple(counts.get(value, 0) for value in range(256))


def _row(lines, value):
    # Line 0 is the summary; row for byte value b follows at index b + 1.
    return lines[value + 1]


def test_four_byte_example():
    table = _table({0x00: 2, 0x01: 1, 0xFF: 1})
    summary = summarize(table, 4)

    assert summary.frequency_max == 2
    assert summary.frequency_min == 0
    assert summary.normalizer == 2.0
    assert bar_length(table[0x00], summary.frequency_max) == 72
    assert bar_length(table[0x01], summary.frequency_max) == 36
    assert bar_length(table[0xFF], summary.frequency_max) == 36

    lines = render(table, 4).splitlines()
    assert lines[0] == "(range: 0.00% - 50.00%, distribution: 50.00pt.)"
    assert _row(lines, 0x00) == "00 |" + "*" * 72 + "|50.00%"
    assert _row(lines, 0x01) == "01 |" + "*" * 36 + " " * 36 + "|25.00%"
    assert _row(lines, 0x02) == "02 |" + " " * 72 + "| 0.00%"


def test_single_byte_input():
    table = _table({0x41: 1})
    summary = summarize(table, 1)

    assert summary.percentage_min == 0.0
    assert summary.percentage_max == 100.0
    lines = render(table, 1).splitlines()
    assert lines[0] == "(range: 0.00% - 100.00%, distribution: 100.00pt.)"
    assert _row(lines, 0x41) == "41 |" + "*" * 72 + "|100.00%"
    assert _row(lines, 0x40) == "40 |" + " " * 72 + "| 0.00%"


def test_uniform_input():
    table = tuple([1] * 256)
    summary = summarize(table, 256)

    assert summary.normalizer == 1.0
    assert summary.percentage_min == summary.percentage_max
    assert summary_line(summary) == "(range: 0.39% - 0.39%, distribution: 0.00pt.)"
    for line in render(table, 256).splitlines()[1:]:
        assert line[4:4 + SCREEN_COLUMNS] == "*" * SCREEN_COLUMNS
        assert line.endswith("| 0.39%")


def test_output_shape_and_order():
    table = _table({0x20: 5, 0x61: 3, 0x0A: 1})
    text = render(table, 9)

    assert text.endswith("\n")
    lines = text.splitlines()
    assert len(lines) == 257
    assert [line[:2] for line in lines[1:]] == [f"{value:02x}" for value in range(256)]
    for line in lines[1:]:
        assert line[2:4] == " |"
        assert line[4 + SCREEN_COLUMNS] == "|"


def test_max_frequency_fills_the_bar():
    table = _table({0x20: 5, 0x61: 3, 0x0A: 1})
    lines = render(table, 9).splitlines()

    assert _row(lines, 0x20)[4:4 + SCREEN_COLUMNS] == "*" * SCREEN_COLUMNS
    # floor(72 * 3/9 * 9/5) == 43
    assert _row(lines, 0x61)[4:4 + SCREEN_COLUMNS].count("*") == 43


def test_render_is_deterministic():
    table = _table({0x00: 7, 0x80: 13, 0xFE: 2})

    assert render(table, 22) == render(table, 22)


def test_custom_columns_and_fill():
    table = _table({0x00: 2, 0x01: 1, 0xFF: 1})
    lines = render(table, 4, columns=10, fill="#").splitlines()

    assert _row(lines, 0x00) == "00 |##########|50.00%"
    assert _row(lines, 0x01) == "01 |#####     |25.00%"
    assert _row(lines, 0x02) == "02 |          | 0.00%"


def test_empty_input_is_refused():
    with pytest.raises(EmptyInputError):
        render(tuple([0] * 256), 0)
    with pytest.raises(ValueError):
        summarize(tuple([0] * 256), 0)


@pytest.mark.parametrize("kwargs", [
    {"columns": 0},
    {"columns": -3},
    {"fill": ""},
    {"fill": "**"},
])
def test_rejects_bad_options(kwargs):
    with pytest.raises(ValueError):
        list(histogram_lines(tuple([1] * 256), 256, **kwargs))


def test_rejects_wrong_table_size():
    with pytest.raises(ValueError):
        render((1, 2, 3), 6)


@pytest.mark.parametrize("data", [
    b"\x00\x00\x00\x01\x01\x02\x02\x03\x03\x04\x05",
    b"\x00" * 6 + b"\x01\x01\x02\x02\x03",
    b"\x00" * 11 + b"\x01\x02\x03\x04",
    b"\x00" * 7 + b"\x01" * 5 + b"\x02" * 3 + b"\x03\x04",
    b"\x10" * 3 + b"\x20" * 2 + b"\x30" * 2,
])
def test_max_frequency_fills_the_bar_for_odd_totals(data):
    counts = {}
    for value in data:
        counts[value] = counts.get(value, 0) + 1
    table = _table(counts)
    frequency_max = max(table)
    lines = render(table, len(data)).splitlines()

    for value, count in counts.items():
        bar = _row(lines, value)[4:4 + SCREEN_COLUMNS]
        assert bar.count("*") == SCREEN_COLUMNS * count // frequency_max
        if count == frequency_max:
            assert bar == "*" * SCREEN_COLUMNS


def test_eleven_byte_row():
    table = _table({0x00: 3, 0x01: 2, 0x02: 2, 0x03: 2, 0x04: 1, 0x05: 1})
    lines = render(table, 11).splitlines()

    assert _row(lines, 0x00) == "00 |" + "*" * 72 + "|27.27%"
    assert _row(lines, 0x01) == "01 |" + "*" * 48 + " " * 24 + "|18.18%"
    assert _row(lines, 0x04) == "04 |" + "*" * 24 + " " * 48 + "| 9.09%"
