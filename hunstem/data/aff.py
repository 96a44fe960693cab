"""
The module represents the rule set the decomposition algorithms work against: break patterns,
prefixes and suffixes, and a couple of settings changing how deep the affix analysis goes.

In Hunspell, all of this is read from the ``*.aff`` file. Reading it is not this package's business:
rule sets are built in code (or by some external reader) from the classes below, and are treated as
read-only afterwards.

.. code-block:: text

    # what the data corresponds to in .aff-file terms
    BREAK 1
    BREAK -

    SFX G Y 1
    SFX G   0 ing .

``RuleSet``
-----------

.. autoclass:: RuleSet

``Affix``
---------

.. autoclass:: Affix
    :members:

.. autodata:: Kind

Helper pattern-alike classes
----------------------------

.. autoclass:: BreakPattern
"""

import re
import itertools

from collections import defaultdict
from enum import Enum

from dataclasses import dataclass, field
from typing import List, Set, Dict

from hunstem.algo.trie import Trie


#: Which end of the word the affix is attached to.
Kind = Enum('Kind', 'PREFIX SUFFIX')


@dataclass
class BreakPattern:
    """
    Contents of the :attr:`RuleSet.BREAK` directive, pattern for splitting the word, compiled to regexp.

    Directives look this way:

    .. code-block:: text

        BREAK 3
        BREAK -
        BREAK ^-
        BREAK -$

    (That's also the default value of ``BREAK``.) While checking "left-right", "left" and "right" are
    checked separately; "-" at the beginning and end of the word is split off too (second and third
    lines). Note that ``BREAK -`` without any special chars will NOT split "-" at the beginning/end:
    non-anchored pattern requires at least one char on both sides of it.

    The compiled :attr:`regexp` always has the break itself as its first group, that's where the text
    is cut.
    """
    pattern: str

    def __post_init__(self):
        if not self.pattern:
            raise ValueError('Empty break pattern')

        # special chars like #, -, * etc should be escaped, but ^ and $ should be treated as in regexps
        pattern = re.escape(self.pattern).replace('\\^', '^').replace('\\$', '$')
        if pattern.startswith('^') or pattern.endswith('$'):
            self.regexp = re.compile(f"({pattern})")
        else:
            self.regexp = re.compile(f".({pattern}).")


@dataclass(frozen=True)
class Affix:
    """
    One prefix or suffix. In ``.aff`` file, affixes are stored in tables looking this way:

    .. code-block:: text

        SFX N Y 3
        SFX N   e     ion        e
        SFX N   y     ication    y
        SFX N   0     en         [^ey]

    The table header means: suffix (``PFX`` for prefix) designated by flag ``N``, cross-productable,
    3 forms below. Each row is: strip, add (with optional ``/flags``), condition. So the table
    describes:

    * removes "e" and adds "ion" for words ending with "e" (animate => animation)
    * removes "y" and adds "ication" for words ending with "y" (amplify => amplification)
    * removes nothing and adds "en" for words ending with neither (befall => befallen)

    Prefixes and suffixes are the same class, distinguished by :attr:`kind`; construct them with
    :meth:`prefix` and :meth:`suffix`::

        >>> Affix.suffix(flag='N', strip='y', add='ication', condition='y')
        Suffix(ication: N×, on [y]y$)

    On creation, two regexps are compiled:

    * ``lookup_regexp`` checks whether the affix could be present in the (already affixed) word,
      taking into account the condition (adjusted for ``strip``);
    * ``replace_regexp`` matches the ``add`` part to be replaced with ``strip`` to restore the stem.

    Invalid ``condition`` fails here (with ``ValueError`` or ``re.error``), not at lookup time.
    """

    kind: Kind
    #: Flag this affix is declared under. Several affixes can share the flag.
    flag: str
    #: What is stripped from the stem when the affix is applied
    strip: str = ''
    #: What is added when the affix is applied
    add: str = ''
    #: Condition against which stem should be checked to understand whether this affix is relevant
    condition: str = '.'
    #: Whether this affix is compatible with opposite affix (matters for suffixes: whether the
    #: suffix may be chopped off a word which already had its prefix chopped off)
    crossproduct: bool = True
    #: Flags this affix carries; all of them should be allowed by the lookup for the affix to be chosen
    flags: Set[str] = field(default_factory=frozenset)

    @classmethod
    def prefix(cls, flag: str, **kwargs) -> 'Affix':
        return cls(Kind.PREFIX, flag, **kwargs)

    @classmethod
    def suffix(cls, flag: str, **kwargs) -> 'Affix':
        return cls(Kind.SUFFIX, flag, **kwargs)

    def __post_init__(self):
        if not isinstance(self.kind, Kind):
            raise ValueError(f'Unknown affix kind {self.kind!r}')

        object.__setattr__(self, 'flags', frozenset(self.flags))

        # "-" does NOT have a special regex-meaning, while might happen as a regular word char (for ex., hu_HU)
        condition = self.condition.replace('-', '\\-')
        cond_parts = re.findall(r'(\[.+?\]|[^\[])', condition)
        if ''.join(cond_parts) != condition:
            raise ValueError(f'Unparseable condition {self.condition!r}')
        add = re.escape(self.add)

        if self.kind == Kind.PREFIX:
            # The part of the condition that is covered by strip isn't in the affixed word anymore
            cond_parts = cond_parts[len(self.strip):]
            cond = '(?=' + ''.join(cond_parts) + ')' if cond_parts and cond_parts != ['.'] else ''

            object.__setattr__(self, 'lookup_regexp', re.compile('^' + add + cond))
            object.__setattr__(self, 'replace_regexp', re.compile('^' + add))
        else:
            if self.strip:
                cond_parts = cond_parts[:-len(self.strip)]
            cond = '(' + ''.join(cond_parts) + ')' if cond_parts and cond_parts != ['.'] else ''

            object.__setattr__(self, 'lookup_regexp', re.compile(cond + add + '$'))
            object.__setattr__(self, 'replace_regexp', re.compile(add + '$'))

    @property
    def is_prefix(self) -> bool:
        return self.kind == Kind.PREFIX

    @property
    def is_suffix(self) -> bool:
        return self.kind == Kind.SUFFIX

    def apply(self, stem: str) -> str:
        """
        Produces affixed form from the stem (the reverse of what lookup does): ``strip`` is removed
        from the corresponding end of the stem, and ``add`` is attached there.
        """
        if self.kind == Kind.PREFIX:
            return self.add + stem[len(self.strip):]
        if self.strip:
            return stem[:-len(self.strip)] + self.add
        return stem + self.add

    def __repr__(self):
        flags = f"/{','.join(sorted(self.flags))}" if self.flags else ''
        cross = '×' if self.crossproduct else ''
        if self.kind == Kind.PREFIX:
            return f"Prefix({self.add}: {self.flag}{cross}{flags}, on ^{self.strip}[{self.condition}])"
        return f"Suffix({self.add}: {self.flag}{cross}{flags}, on [{self.condition}]{self.strip}$)"


@dataclass
class RuleSet:
    """
    The class contains all the rules the decomposition consults. Attribute names are the same as
    Hunspell's directives they correspond to (upper-case, which is un-Pythonic, but allows to relate
    them unambiguously).

    .. autoattribute:: BREAK
    .. autoattribute:: COMPLEXPREFIXES
    .. autoattribute:: PFX
    .. autoattribute:: SFX

    **Derived attributes**

    .. py:attribute:: prefixes_index
        :type: hunstem.algo.trie.Trie

        Trie of all :attr:`PFX` affixes, keyed by ``add``.

    .. py:attribute:: suffixes_index
        :type: hunstem.algo.trie.Trie

        Trie of all :attr:`SFX` affixes, keyed by reversed ``add`` (so it can be searched with
        reversed word, from its end).

    .. py:attribute:: flags
        :type: FrozenSet[str]

        All flags carried by any of the affixes.

    Usage::

        rules = RuleSet(
            SFX={'G': [Affix.suffix('G', add='ing', flags={'G'})]},
            BREAK=[BreakPattern(' ')]
        )
    """

    #: Break points for splitting words and checking word parts separately. See :class:`BreakPattern`.
    #:
    #: *Usage:* :func:`break_word <hunstem.algo.decompose.break_word>`
    BREAK: List[BreakPattern] = \
        field(default_factory=lambda: [BreakPattern('-'), BreakPattern('^-'), BreakPattern('-$')])

    #: Allow twofold prefixes stripping (by default, only one prefix and two suffixes are chopped off).
    #: Used in dictionaries for right-to-left writing languages and agglutinative ones.
    #:
    #: *Usage:* :func:`deprefix <hunstem.algo.decompose.deprefix>`,
    #: :func:`affix_forms <hunstem.algo.decompose.affix_forms>`
    COMPLEXPREFIXES: bool = False

    #: Dictionary of ``flag => prefixes with this flag``.
    PFX: Dict[str, List[Affix]] = field(default_factory=dict)

    #: Dictionary of ``flag => suffixes with this flag``.
    SFX: Dict[str, List[Affix]] = field(default_factory=dict)

    def __post_init__(self):
        self.BREAK = [pat if isinstance(pat, BreakPattern) else BreakPattern(pat) for pat in self.BREAK]

        prefixes = defaultdict(list)
        for pfx in itertools.chain.from_iterable(self.PFX.values()):
            if not pfx.is_prefix:
                raise ValueError(f'{pfx!r} is declared in PFX table')
            prefixes[pfx.add].append(pfx)

        suffixes = defaultdict(list)
        for sfx in itertools.chain.from_iterable(self.SFX.values()):
            if not sfx.is_suffix:
                raise ValueError(f'{sfx!r} is declared in SFX table')
            suffixes[sfx.add[::-1]].append(sfx)

        self.prefixes_index = Trie(prefixes)
        self.suffixes_index = Trie(suffixes)

        self.flags = frozenset(
            flag
            for affix in itertools.chain(*self.PFX.values(), *self.SFX.values())
            for flag in affix.flags
        )
