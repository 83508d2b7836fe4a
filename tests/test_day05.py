import pytest

from adventsolve.day05 import (
    alternative_answer,
    fix_order,
    is_ordered,
    middle,
    parse_input,
    sum_middles,
)

EXAMPLE = """47|53
97|13
97|61
97|47
75|29
61|13
75|53
29|13
97|29
53|29
61|53
97|53
61|29
47|13
75|47
97|75
47|61
75|61
47|29
75|13
53|13

75,47,61,53,29
97,61,53,29,13
75,29,13
75,97,47,61,53
61,13,29
97,13,75,29,47
"""


@pytest.fixture
def example():
    return parse_input(EXAMPLE)


def test_parse_input_collects_rules_and_updates():
    rules, updates = parse_input("47|53\n47|13\n\n75,47,61\n")
    assert rules == {47: [53, 13]}
    assert updates == [[75, 47, 61]]


def test_parse_input_unparsable_page_reads_as_zero():
    _, updates = parse_input("1|2\n\n5,x,7\n")
    assert updates == [[5, 0, 7]]


def test_parse_input_example_counts(example):
    rules, updates = example
    assert len(updates) == 6
    assert sum(len(after) for after in rules.values()) == 21


def test_middle_picks_centre():
    assert middle([1, 2, 3]) == 2
    assert middle([4, 5, 6, 7]) == 6


def test_is_ordered_on_example(example):
    rules, updates = example
    assert [is_ordered(u, rules) for u in updates] == [True, True, True, False, False, False]


def test_fix_order_produces_ordered_permutation(example):
    rules, updates = example
    for update in updates:
        fixed = fix_order(update, rules)
        assert sorted(fixed) == sorted(update)
        assert is_ordered(fixed, rules)


def test_fix_order_leaves_input_unchanged(example):
    rules, updates = example
    original = list(updates[3])
    fix_order(updates[3], rules)
    assert updates[3] == original


def test_fix_order_keeps_ordered_update(example):
    rules, updates = example
    assert fix_order(updates[0], rules) == updates[0]


def test_sum_middles_example(example):
    rules, updates = example
    assert sum_middles(rules, updates) == (143, 123)


def test_alternative_answer_agrees(example):
    rules, updates = example
    assert alternative_answer(rules, updates) == sum_middles(rules, updates)


def test_no_rules_means_everything_ordered():
    updates = [[3, 1, 2], [9, 8, 7]]
    assert sum_middles({}, updates) == (1 + 8, 0)