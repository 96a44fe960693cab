from collections import defaultdict
from typing import Optional, List


class Leaf:     # pylint: disable=too-few-public-methods,missing-class-docstring
    def __init__(self):
        self.payloads = []
        self.children = defaultdict(Leaf)


class Trie:
    """
    `Trie <https://en.wikipedia.org/wiki/Trie>`_ is a data structure for effective prefix search. It
    is used in hunstem as an index of prefixes and suffixes. For example, if we have suffixes "s",
    "ions", "ications", they are stored (reversed) this way:

    .. code-block:: text

        root
        +-s           ... suffixes with add="s"
          +-noi       ... suffixes with add="ions"
              +-taci  ... suffixes with add="ications"

    So, for the word "complications", we can receive all its possible suffixes (all three) in one
    pass through trie.

    Decomposition uses :meth:`segments`, which keeps the payloads grouped by node (e.g. by the length
    of the matched part), from the shortest match to the longest one.
    """
    def __init__(self, data=None):
        self.root = Leaf()
        if data:
            for key, val in data.items():
                self.set(key, val)

    def set(self, path, payloads):
        cur = self.root
        for p in path:
            cur = cur.children[p]

        cur.payloads = list(payloads)

    def segments(self, path) -> Optional[List[list]]:
        """
        All payloads reachable by ``path``, one group per matched node. Returns ``None`` (not an
        empty list) if there are none, so "no candidates at all" is easy to tell.

            >>> trie = Trie({'s': ['S1', 'S2'], 'sei': ['IES']})
            >>> trie.segments('seilppa')
            [['S1', 'S2'], ['IES']]
            >>> trie.segments('xyz') is None
            True
        """
        groups = [list(leaf.payloads) for _, leaf in self.traverse(self.root, path) if leaf.payloads]
        return groups or None

    def traverse(self, cur, path, traversed=()):
        yield (traversed, cur)
        if not path or path[0] not in cur.children:
            return
        yield from self.traverse(cur.children[path[0]], path[1:], (*traversed, path[0]))
