from adventsolve.day08 import find_antinodes, main, parse_antennas

EXAMPLE = """............
........0...
.....0......
.......0....
....0.......
......A.....
............
............
........A...
.........A..
............
............
"""

SMALL = """....
.a..
..a.
....
"""


def test_example_part1():
    grid, antennas = parse_antennas(EXAMPLE)
    assert len(find_antinodes(grid, antennas, False)) == 14


def test_example_part2():
    grid, antennas = parse_antennas(EXAMPLE)
    assert len(find_antinodes(grid, antennas, True)) == 34


def test_parse_antennas():
    grid, antennas = parse_antennas(SMALL)
    assert len(grid) == 16
    assert antennas == {"a": [(1, 1), (2, 2)]}
    assert grid[(1, 1)] == "a"
    assert grid[(0, 0)] == "."


def test_small_pair_part1():
    grid, antennas = parse_antennas(SMALL)
    assert find_antinodes(grid, antennas, False) == {(0, 0), (3, 3)}


def test_small_pair_resonant_adds_antennas():
    grid, antennas = parse_antennas(SMALL)
    plain = find_antinodes(grid, antennas, False)
    assert find_antinodes(grid, antennas, True) == plain | set(antennas["a"])


def test_antinodes_stay_inside_grid():
    grid, antennas = parse_antennas(EXAMPLE)
    for resonant in (False, True):
        assert find_antinodes(grid, antennas, resonant) <= set(grid)


def test_resonant_is_superset():
    grid, antennas = parse_antennas(EXAMPLE)
    plain = find_antinodes(grid, antennas, False)
    resonant = find_antinodes(grid, antennas, True)
    assert plain <= resonant
    for positions in antennas.values():
        assert set(positions) <= resonant


def test_lone_antenna_casts_nothing():
    grid, antennas = parse_antennas("...\n.b.\n...")
    assert find_antinodes(grid, antennas, False) == set()
    assert find_antinodes(grid, antennas, True) == set()


def test_main_prints_counts(tmp_path, capsys):
    path = tmp_path / "input2"
    path.write_text(EXAMPLE)
    main([str(path)])
    grid, antennas = parse_antennas(EXAMPLE)
    out = capsys.readouterr().out.splitlines()
    assert out[0].split()[-1] == str(len(find_antinodes(grid, antennas, False)))
    assert out[1].split()[-1] == str(len(find_antinodes(grid, antennas, True)))