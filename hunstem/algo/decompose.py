"""
Word decomposition: all the ways the word might be split into parts (by break patterns), and all
the ways each part might be split into stem and affixes.

Everything here is a *hypothesis generator*: no dictionary is consulted, so most of the produced
forms are nonsense (``"lens" = "l" + "ens"``). Choosing the forms with the stem present in the
dictionary is the caller's job (see :class:`Lookup <hunstem.algo.lookup.Lookup>`). That's why all
the functions are generators: the caller typically needs just the first good form, and stops
iterating when it is found.

.. autofunction:: break_word

.. autoclass:: AffixForm
    :members:

.. autoclass:: DecomposeOptions
    :members:

.. autofunction:: is_good_affix
.. autofunction:: desuffix
.. autofunction:: deprefix
.. autofunction:: affix_forms
"""

import logging
import dataclasses

from dataclasses import dataclass, field
from typing import Iterator, List, Optional, FrozenSet

from hunstem.data.aff import Affix, RuleSet

logger = logging.getLogger(__name__)

#: How deep :func:`break_word` recurses (e.g. the word would be broken in at most 11 parts).
MAX_BREAK_DEPTH = 10


@dataclass(frozen=True)
class AffixForm:
    """
    AffixForm is a hypothesis of how some word might be split into stem, suffixes and prefixes.
    It always has full text and stem, and may have up to two suffixes, and up to two prefixes.
    (Affix form without any affix is also valid.)

    ``prefix``/``suffix`` are the ones adjacent to the stem, ``prefix2``/``suffix2`` are "outer"
    ones, so if the word has only one suffix, it is stored in ``suffix`` and ``suffix2`` is ``None``.
    The following is always true (if we consider absent affixes just empty strings, and ignore
    ``strip``)::

        prefix2 + prefix + stem + suffix + suffix2 = text

    Forms are never changed after being produced: :meth:`replace` makes a copy.
    """

    text: str

    stem: str

    prefix: Optional[Affix] = None
    suffix: Optional[Affix] = None
    prefix2: Optional[Affix] = None
    suffix2: Optional[Affix] = None

    def replace(self, **changes) -> 'AffixForm':
        return dataclasses.replace(self, **changes)

    def has_affixes(self):
        return bool(self.suffix or self.prefix)

    def is_base(self):
        return not self.has_affixes()

    def flags(self) -> FrozenSet[str]:
        return frozenset().union(*(affix.flags for affix in self.all_affixes()))

    def all_affixes(self) -> List[Affix]:
        return [*filter(None, [self.prefix2, self.prefix, self.suffix, self.suffix2])]

    def rebuild(self) -> str:
        """
        Applies all the affixes to the stem, innermost first. For any form produced by this module,
        the result is equal to :attr:`text`.
        """
        result = self.stem
        for affix in filter(None, [self.suffix, self.suffix2, self.prefix, self.prefix2]):
            result = affix.apply(result)
        return result

    def __repr__(self):
        if self.is_base():
            return f'AffixForm({self.text})'

        result = f'AffixForm({self.text} = '
        if self.prefix2:
            result += f'{self.prefix2!r} + '
        if self.prefix:
            result += f'{self.prefix!r} + '
        result += self.stem
        if self.suffix:
            result += f' + {self.suffix!r}'
        if self.suffix2:
            result += f' + {self.suffix2!r}'
        result += ')'
        return result


@dataclass(frozen=True)
class DecomposeOptions:
    """
    Per-call settings of :func:`desuffix`/:func:`deprefix`. Never mutated: recursive calls receive
    a new object made with :meth:`nest`.
    """

    #: Every flag of the affix should be in this set for affix to be chosen.
    required: FrozenSet[str] = field(default_factory=frozenset)
    #: None of the flags of the affix should be in this set.
    forbidden: FrozenSet[str] = field(default_factory=frozenset)
    #: Whether we are already chopping the second affix.
    nested: bool = False
    #: Allows suffixes that are not marked as cross-productable. Is set when there is no prefix
    #: that the suffix should combine with.
    crossproduct: bool = False

    def __post_init__(self):
        object.__setattr__(self, 'required', frozenset(self.required))
        object.__setattr__(self, 'forbidden', frozenset(self.forbidden))

    def nest(self, affix: Affix) -> 'DecomposeOptions':
        """
        Options for looking up the second affix after ``affix`` was chopped off: flags of the outer
        affix become allowed for the inner one.
        """
        return dataclasses.replace(self, required=self.required | affix.flags, nested=True)


def break_word(rules: RuleSet, text: str, depth: int = 0) -> Iterator[List[str]]:
    """
    Recursively produce all possible lists of word breaking by break patterns (like dashes). For
    example, if we are checking the word "pre-processed-meat", we'll have ["pre-processed-meat"],
    ["pre", "processed-meat"], ["pre", "processed", "meat"] and so on.

    This is necessary (instead of just breaking the word by all breakpoints, and checking ["pre",
    "processed", "meat"]), because the dictionary might contain word "pre-processed" as a separate
    entity, so ["pre-processed", "meat"] would be considered correct, and the other two would not, if
    there is no separate entry on "pre".

    The unbroken ``[text]`` is always produced first. Anchored patterns (``^-``) can produce empty
    parts, it is up to the caller to skip them.
    """
    if depth > MAX_BREAK_DEPTH:
        logger.debug('break_word: depth %d exceeded on %r', MAX_BREAK_DEPTH, text)
        return

    yield [text]
    for pat in rules.BREAK:
        for m in pat.regexp.finditer(text):
            start = text[:m.start(1)]
            rest = text[m.end(1):]
            for breaking in break_word(rules, rest, depth=depth+1):
                yield [start, *breaking]


def is_good_affix(affix: Affix, word: str, options: DecomposeOptions) -> bool:
    """
    Whether the affix might be chopped off the word under these options: suffix should be
    cross-productable (unless ``options.crossproduct`` allows any), all of the affix flags should be
    required and none forbidden, and the word should look like having this affix.
    """
    if affix.is_suffix and not (options.crossproduct or affix.crossproduct):
        return False

    if any(flag in options.forbidden or flag not in options.required for flag in affix.flags):
        return False

    return bool(affix.lookup_regexp.search(word))


def desuffix(rules: RuleSet, word: str, options: DecomposeOptions) -> Iterator[AffixForm]:
    """
    For given word, produces :class:`AffixForm` with suffix(es) split of the stem: one suffix, and
    (if not ``options.nested``), two suffixes.

        >>> [*desuffix(rules, 'walking', DecomposeOptions(required={'G'}))]
        [AffixForm(walking = walk + Suffix(ing: G×/G, on [.]$))]

    Args:
        rules: rule set with suffixes index
        word: word to chop suffixes of
        options: flags and recursion settings
    """

    # Suffixes are indexed by reversed text, so all suffixes the word might end with could be found
    # in one pass.
    segments = rules.suffixes_index.segments(word[::-1])
    if not segments:
        return

    possible_suffixes = (
        suffix
        for group in segments
        for suffix in group
        if is_good_affix(suffix, word, options)
    )

    for suffix in possible_suffixes:
        # stem is produced by removing the suffix, and, optionally, adding the part of the
        # stem (named ``strip``). For example, suffix might be declared as ``(strip=y, add=ier)``,
        # then to restore the original stem from word "prettier" we must remove "ier" and add back "y"
        stem = suffix.replace_regexp.sub(suffix.strip, word)

        yield AffixForm(word, stem, suffix=suffix)

        # Try to remove one more suffix, only one level depth
        if not options.nested:
            for form2 in desuffix(rules, stem, options.nest(suffix)):
                yield form2.replace(text=word, suffix2=suffix)


def deprefix(rules: RuleSet, word: str, options: DecomposeOptions) -> Iterator[AffixForm]:
    """
    Everything is the same as for :func:`desuffix`, but from the beginning of the word. Second
    prefix is tried only with :attr:`RuleSet.COMPLEXPREFIXES`.
    """

    segments = rules.prefixes_index.segments(word)
    if not segments:
        return

    possible_prefixes = (
        prefix
        for group in segments
        for prefix in group
        if is_good_affix(prefix, word, options)
    )

    for prefix in possible_prefixes:
        stem = prefix.replace_regexp.sub(prefix.strip, word)

        yield AffixForm(word, stem, prefix=prefix)

        # Like with suffixes, the nested call is marked as such: there are only two slots for
        # prefixes in AffixForm.
        if not options.nested and rules.COMPLEXPREFIXES:
            for form2 in deprefix(rules, stem, options.nest(prefix)):
                yield form2.replace(text=word, prefix2=prefix)


def affix_forms(rules: RuleSet, word: str, options: DecomposeOptions) -> Iterator[AffixForm]:
    """
    Produces all possible affix forms: the word as is, the word with suffixes chopped off, the word
    with prefixes chopped off, and (if the prefix is cross-productable) with both.

        >>> for form in affix_forms(rules, 'unsaved', DecomposeOptions()):
        ...     print(form)
        AffixForm(unsaved)
        AffixForm(unsaved = unsave + Suffix(d: D×, on [e]$))
        AffixForm(unsaved = Prefix(un: U×, on ^[.]) + saved)
        AffixForm(unsaved = Prefix(un: U×, on ^[.]) + save + Suffix(d: D×, on [e]$))

    With :attr:`RuleSet.COMPLEXPREFIXES` (right-to-left languages), prefixes are tried before
    suffixes.
    """

    # "Whole word" is always existing option.
    yield AffixForm(text=word, stem=word)

    # Nothing is chopped off from the other side, so cross-product doesn't matter
    suffixed = desuffix(rules, word, dataclasses.replace(options, crossproduct=True))
    prefixed = _deprefix_crossproduct(rules, word, options)

    for forms in ((prefixed, suffixed) if rules.COMPLEXPREFIXES else (suffixed, prefixed)):
        yield from forms


def _deprefix_crossproduct(rules: RuleSet, word: str, options: DecomposeOptions) -> Iterator[AffixForm]:
    for form in deprefix(rules, word, options):
        yield form

        # ...and, IF the prefixes (both of them, if there are two) allowed to be combined with
        # suffixes, also with prefix AND suffix split out
        if all(prefix.crossproduct for prefix in filter(None, [form.prefix, form.prefix2])):
            for form2 in desuffix(rules, form.stem, dataclasses.replace(options, crossproduct=False)):
                yield form2.replace(text=word, prefix=form.prefix, prefix2=form.prefix2)
