# adventsolve

Solvers for nine days of programming puzzles. Each day is a module of its own.
You can use it as a library, or run it as a command that reads a puzzle input
file and prints the answers.

| Module | Puzzle |
| --- | --- |
| `adventsolve.day01` | Distance and similarity between two lists of numbers |
| `adventsolve.day02` | Safe reports, with and without the problem dampener |
| `adventsolve.day03` | Summing `mul(x,y)` instructions in corrupted memory, with `do()` / `don't()` switches |
| `adventsolve.day04` | Counting `XMAS` in a word search, and `MAS` crossed in an X |
| `adventsolve.day05` | Page ordering rules: middles of ordered updates and of repaired ones |
| `adventsolve.day05v2` | The same puzzle, solved with a rule-based comparison sort |
| `adventsolve.day06` | A guard's patrol: visited cells, and obstruction spots that cause loops |
| `adventsolve.day07` | Calibration equations with add, multiply and concatenate |
| `adventsolve.day08` | Antinodes of same-frequency antennas, plain and resonant |
| `adventsolve.day09` | Compacting a disk map block by block and computing its checksum |

## Installation

```
pip install .
```

The package needs Python 3.10 or later and uses only the standard library. To
run the tests:

```
pip install .[test]
pytest
```

## Commands

Each day has a command. Each command takes one optional argument, the path of
the puzzle input:

```
adventsolve-day01 input.txt
adventsolve-day02 input.txt
adventsolve-day03 input.txt
adventsolve-day04 input.txt
adventsolve-day05 input.txt
adventsolve-day05v2 input.txt
adventsolve-day06 input.txt
adventsolve-day07 input.txt
adventsolve-day08 input.txt
adventsolve-day09 input.txt
```

If you leave out the path, the command reads a file from the current
directory. Days 01–05 and 09 read `input`. Days 05v2 and 06–08 read `input2`.
The commands print their answers to standard output.

## Library use

Each command is built on plain functions. They take the puzzle text or values
already parsed from it:

```python
from adventsolve import day01, day03, day09

text = "3   4\n4   3\n2   5\n1   3\n3   9\n3   3\n"
left, right = day01.parse_lists(text)
day01.total_distance(left, right)
day01.similarity_score(left, right)

memory = "xmul(2,4)&mul[3,7]!^don't()_mul(5,5)+mul(32,64](mul(11,8)undo()?mul(8,5))"
day03.sum_multiplications(memory)
day03.sum_enabled_multiplications(memory)

day09.build_blocks("12345")        # file ids, with None for free blocks
day09.compact_checksum("2333133121414131402")
```

Other entry points, by day:

- `day02`: `parse_report`, `is_safe`, `is_safe_dampened`, `count_safe`. `count_safe` returns the safe count and the count with the dampener.
- `day04`: `parse_grid`, `count_xmas`, `count_x_mas`
- `day05`: `parse_input`, `is_ordered`, `fix_order`, `middle`, `sum_middles`,
  `alternative_answer`
- `day05v2`: `solve(text, ordered)`
- `day06`: `parse_map`, `patrol`, `count_visited`, `count_loop_positions`. `patrol` returns `None` when the guard loops.
- `day07`: the `Operator` enum, `evaluate`, `calibration_value`, `total_calibration`. The `operator_count` argument is 2 for add and multiply, or 3 to include concatenation.
- `day08`: `parse_antennas`, `find_antinodes`

## Limitations

- The package does not fetch puzzle inputs. You supply them as files or text.
- `day09` solves only the block-by-block compaction. It does not move whole files.