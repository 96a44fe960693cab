from hunstem.data.aff import RuleSet, Affix, BreakPattern
from hunstem.algo.decompose import (
    AffixForm, DecomposeOptions, break_word, is_good_affix, desuffix, deprefix, affix_forms
)
from hunstem.algo.lookup import Lookup

__all__ = [
    "RuleSet",
    "Affix",
    "BreakPattern",
    "AffixForm",
    "DecomposeOptions",
    "break_word",
    "is_good_affix",
    "desuffix",
    "deprefix",
    "affix_forms",
    "Lookup"
]
