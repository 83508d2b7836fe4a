import pytest

from adventsolve.day02 import (
    count_safe,
    is_safe,
    is_safe_dampened,
    main,
    parse_report,
)

EXAMPLE = """7 6 4 2 1
1 2 7 8 9
9 7 6 2 1
1 3 2 4 5
8 6 4 4 1
1 3 6 7 9
"""


def _reports():
    return [parse_report(line) for line in EXAMPLE.splitlines()]


def test_parse_report_skips_junk():
    assert parse_report("1 2  x 3") == [1, 2, 3]


def test_example_counts():
    assert count_safe(_reports()) == (2, 4)


def test_decreasing_by_small_steps_is_safe():
    assert is_safe([7, 6, 4, 2, 1])


def test_large_jump_is_unsafe():
    assert not is_safe([1, 2, 7, 8, 9])
    assert not is_safe_dampened([1, 2, 7, 8, 9])


def test_repeated_level_is_unsafe():
    assert not is_safe([8, 6, 4, 4, 1])


def test_direction_change_is_unsafe():
    assert not is_safe([1, 3, 2, 4, 5])


def test_dampener_removes_one_bad_level():
    assert is_safe_dampened([1, 3, 2, 4, 5])
    assert is_safe_dampened([8, 6, 4, 4, 1])


@pytest.mark.parametrize("levels", _reports())
def test_safety_is_reversal_invariant(levels):
    assert is_safe(levels) == is_safe(list(reversed(levels)))
    assert is_safe_dampened(levels) == is_safe_dampened(list(reversed(levels)))


@pytest.mark.parametrize("levels", _reports())
def test_safe_implies_dampened_safe(levels):
    assert not is_safe(levels) or is_safe_dampened(levels)


def test_dampened_does_not_modify_input():
    levels = [1, 3, 2, 4, 5]
    is_safe_dampened(levels)
    assert levels == [1, 3, 2, 4, 5]


def test_short_reports_are_safe():
    assert is_safe([5])
    assert is_safe([])


def test_main_prints_counts(tmp_path, capsys):
    path = tmp_path / "input"
    path.write_text(EXAMPLE)
    main([str(path)])
    lines = capsys.readouterr().out.splitlines()
    safe, dampened = count_safe(_reports())
    assert lines[0].endswith(str(safe))
    assert lines[1].endswith(str(dampened))