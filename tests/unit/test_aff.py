import re

import pytest

from hunstem.data.aff import Affix, BreakPattern, RuleSet, Kind


def test_suffix():
    suffix = Affix.suffix('S', crossproduct=False, strip='y', add='ies', condition='[^aeiou]y')

    assert suffix.kind == Kind.SUFFIX
    assert suffix.is_suffix and not suffix.is_prefix

    assert suffix.lookup_regexp.search('kitties')
    assert not suffix.lookup_regexp.search('boies')
    assert suffix.replace_regexp.sub(suffix.strip, 'kitties') == 'kitty'
    assert suffix.apply('kitty') == 'kitties'


def test_suffix_without_strip():
    suffix = Affix.suffix('S', add='s', condition='[^sxzhy]')

    assert suffix.lookup_regexp.search('cats')
    assert not suffix.lookup_regexp.search('buss')
    assert suffix.apply('cat') == 'cats'


def test_prefix():
    prefix = Affix.prefix('U', add='un')

    assert prefix.kind == Kind.PREFIX
    assert prefix.lookup_regexp.search('undo')
    assert not prefix.lookup_regexp.search('redo')
    assert prefix.replace_regexp.sub(prefix.strip, 'undo') == 'do'
    assert prefix.apply('do') == 'undo'


def test_prefix_with_strip():
    prefix = Affix.prefix('I', strip='e', add='i', condition='ex')

    # The "e" of the condition is stripped, only "x" should be checked in the affixed word
    assert prefix.lookup_regexp.search('ixact')
    assert not prefix.lookup_regexp.search('iyact')
    assert prefix.replace_regexp.sub(prefix.strip, 'ixact') == 'exact'
    assert prefix.apply('exact') == 'ixact'


def test_flags():
    suffix = Affix.suffix('S', add='s', flags={'A', 'B'})

    assert suffix.flags == frozenset({'A', 'B'})
    # immutable and usable as a key
    assert {suffix: 1}[Affix.suffix('S', add='s', flags=['B', 'A'])] == 1
    with pytest.raises(AttributeError):
        suffix.add = 'es'


def test_repr():
    assert repr(Affix.suffix('S', crossproduct=False, add='s', condition='[^sxzhy]')) == \
        'Suffix(s: S, on [[^sxzhy]]$)'
    assert repr(Affix.prefix('U', add='un', flags={'B', 'A'})) == 'Prefix(un: U×/A,B, on ^[.])'


def test_invalid():
    with pytest.raises(ValueError):
        Affix.suffix('S', add='s', condition='[^sx')

    with pytest.raises(re.error):
        Affix.suffix('S', add='s', condition='(')

    with pytest.raises(ValueError):
        Affix('suffix', 'S', add='s')

    with pytest.raises(ValueError):
        BreakPattern('')


@pytest.mark.parametrize('pattern,text,breaks', [
    ('-', 'left-right', [(4, 5)]),
    ('-', '-right', []),
    ('-', 'left-', []),
    ('^-', '-right', [(0, 1)]),
    ('-$', 'left-', [(4, 5)]),
    ('.', 'a.b', [(1, 2)]),
])
def test_break_pattern(pattern, text, breaks):
    regexp = BreakPattern(pattern).regexp
    assert [m.span(1) for m in regexp.finditer(text)] == breaks


def test_rule_set_defaults():
    rules = RuleSet()

    assert [pat.pattern for pat in rules.BREAK] == ['-', '^-', '-$']
    assert not rules.COMPLEXPREFIXES
    assert rules.prefixes_index.segments('anything') is None
    assert rules.suffixes_index.segments('gnihtyna') is None
    assert rules.flags == frozenset()


def test_rule_set_indexes():
    ing = Affix.suffix('G', add='ing', flags={'G'})
    s = Affix.suffix('S', add='s')
    un = Affix.prefix('U', add='un', flags={'X'})

    rules = RuleSet(BREAK=[' '], PFX={'U': [un]}, SFX={'G': [ing], 'S': [s]})

    assert [pat.pattern for pat in rules.BREAK] == [' ']
    assert rules.prefixes_index.segments('undo') == [[un]]
    assert rules.suffixes_index.segments('gniklaw') == [[ing]]
    assert rules.suffixes_index.segments('sklaw') == [[s]]
    assert rules.flags == frozenset({'G', 'X'})


def test_rule_set_misplaced_affix():
    with pytest.raises(ValueError):
        RuleSet(PFX={'S': [Affix.suffix('S', add='s')]})

    with pytest.raises(ValueError):
        RuleSet(SFX={'U': [Affix.prefix('U', add='un')]})
