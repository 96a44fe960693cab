import pytest

from hunstem.data.aff import RuleSet
from hunstem.algo.decompose import break_word, MAX_BREAK_DEPTH


@pytest.mark.parametrize('text', ['', 'foo', 'foo-bar', 'new york'])
def test_whole_word_first(text):
    for rules in [RuleSet(BREAK=[]), RuleSet(), RuleSet(BREAK=[' '])]:
        assert next(break_word(rules, text)) == [text]


def test_no_patterns():
    assert [*break_word(RuleSet(BREAK=[]), 'foo-bar')] == [['foo-bar']]


def test_space():
    rules = RuleSet(BREAK=[' '])

    assert [*break_word(rules, 'new york')] == [['new york'], ['new', 'york']]


def test_default_patterns():
    rules = RuleSet()

    assert [*break_word(rules, 'pre-processed-meat')] == [
        ['pre-processed-meat'],
        ['pre', 'processed-meat'],
        ['pre', 'processed', 'meat'],
        ['pre-processed', 'meat'],
    ]

    assert [*break_word(rules, '-foo')] == [['-foo'], ['', 'foo']]
    assert [*break_word(rules, 'foo-')] == [['foo-'], ['foo', '']]


def test_patterns_order():
    rules = RuleSet(BREAK=['-', ' '])

    assert [*break_word(rules, 'a b-c')] == [
        ['a b-c'],
        ['a b', 'c'],
        ['a', 'b-c'],
        ['a', 'b', 'c'],
    ]


def test_depth():
    # Pattern is applicable on each level of recursion
    rules = RuleSet(BREAK=['^a'])
    result = [*break_word(rules, 'a' * 20)]

    assert len(result) == MAX_BREAK_DEPTH + 1
    assert max(len(parts) for parts in result) == MAX_BREAK_DEPTH + 1
    assert result[-1] == [''] * MAX_BREAK_DEPTH + ['a' * 10]

    assert [*break_word(rules, 'aaa', depth=MAX_BREAK_DEPTH + 1)] == []
