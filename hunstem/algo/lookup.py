"""
The "is this word correct?" driver on top of :mod:`decompose <hunstem.algo.decompose>`.

The dictionary itself is not part of hunstem: it is represented by ``accept`` callable, which
receives a candidate :class:`AffixForm <hunstem.algo.decompose.AffixForm>` and decides whether its
stem is known and compatible with its affixes. Lookup just feeds candidates to it, lazily, and stops
at the first accepted one.

.. autoclass:: Lookup
"""

import logging
import itertools

from typing import Callable, Iterator, Optional

from hunstem.data.aff import RuleSet
from hunstem.algo.decompose import AffixForm, DecomposeOptions, affix_forms, break_word

logger = logging.getLogger(__name__)


class Lookup:
    """
    Usage::

        >>> stems = {'walk', 'york', 'new'}
        >>> lookup = Lookup(rules, accept=lambda form: form.stem in stems)
        >>> lookup('walking')
        True
        >>> lookup('new-york')
        True
        >>> [*lookup.good_forms('walking')]
        [AffixForm(walking = walk + Suffix(ing: G×/G, on [.]$))]

    Args:
        rules: affixes and break patterns
        accept: external check of the candidate form
        options: options for affix decomposition; by default, all flags used by ``rules`` are
                 allowed, and none forbidden

    .. automethod:: __call__
    .. automethod:: forms
    .. automethod:: good_forms
    """

    def __init__(self, rules: RuleSet, accept: Callable[[AffixForm], bool],
                 options: Optional[DecomposeOptions] = None):
        self.rules = rules
        self.accept = accept
        self.options = options if options is not None else DecomposeOptions(required=rules.flags)

    def __call__(self, word: str, *, allow_break: bool = True) -> bool:
        """
        Whether the word has at least one good form; if it has not, whether it can be broken
        (see :func:`break_word <hunstem.algo.decompose.break_word>`) into parts that all have
        good forms. Empty parts (produced by anchored break patterns) are skipped.
        """
        if self.is_correct(word):
            return True

        if not allow_break:
            return False

        # The first breaking is always the whole word, which we just checked
        for parts in itertools.islice(break_word(self.rules, word), 1, None):
            parts = [part for part in parts if part]
            if parts and all(self.is_correct(part) for part in parts):
                logger.debug('lookup: %r accepted as %r', word, parts)
                return True

        return False

    def is_correct(self, word: str) -> bool:
        return any(True for _ in self.good_forms(word))

    def forms(self, word: str) -> Iterator[AffixForm]:
        """
        All hypotheses about the word's stem and affixes, see
        :func:`affix_forms <hunstem.algo.decompose.affix_forms>`.
        """
        return affix_forms(self.rules, word, self.options)

    def good_forms(self, word: str) -> Iterator[AffixForm]:
        """
        Forms that passed ``accept`` check.
        """
        for form in self.forms(word):
            if self.accept(form):
                logger.debug('lookup: %r accepted as %r, flags %s', word, form, sorted(form.flags()))
                yield form
