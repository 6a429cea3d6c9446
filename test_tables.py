"""
Tests for box table rendering.
"""

from cronmenu.tables import render_table, numbered_rows


def test_plain_table_has_aligned_borders():
    table = render_table(["#", "Cron Job"], [[1, "0 * * * * echo hi"], [2, "x"]], color=False)
    lines = table.splitlines()

    assert lines[0].startswith("┌") and lines[0].endswith("┐")
    assert lines[-1].startswith("└") and lines[-1].endswith("┘")
    assert len({len(line) for line in lines}) == 1
    assert "│ 1 │ 0 * * * * echo hi │" in lines


def test_title_bar_spans_table():
    table = render_table(["#", "Cron Job"], [[1, "a"]], title="Current Cron Jobs", color=False)
    lines = table.splitlines()

    assert "Current Cron Jobs" in lines[1]
    assert len({len(line) for line in lines}) == 1


def test_headerless_table():
    table = render_table(None, [["min", "hour"], ["*", "*"]], color=False)

    assert "│ min │ hour │" in table
    assert "┼" not in table


def test_color_codes_only_when_enabled():
    plain = render_table(["a"], [["b"]], title="t", style='green', color=False)
    colored = render_table(["a"], [["b"]], title="t", style='green', color=True)

    assert "\033[" not in plain
    assert "\033[" in colored


def test_numbered_rows():
    assert numbered_rows(["a", "b"], "none") == [[1, "a"], [2, "b"]]
    assert numbered_rows([], "none") == [["-", "none"]]
