""" Result types of the dominance analysis.

All of these are computed once and not modified afterwards.
"""

from ..utils.bitset import BitSet


class DominatorSets:
    """ For every node, the set of nodes that dominate it """
    def __init__(self, entry, sets, passes=0):
        self.entry = entry
        self._sets = tuple(sets)
        self.passes = passes

    def __repr__(self):
        return 'DominatorSets(entry={}, nodes={})'.format(
            self.entry, len(self))

    def __len__(self):
        return len(self._sets)

    def __iter__(self):
        return iter(range(len(self._sets)))

    def __getitem__(self, node):
        return self._sets[node]

    def __eq__(self, other):
        if isinstance(other, DominatorSets):
            return self.entry == other.entry and self._sets == other._sets
        return NotImplemented

    def dominates(self, one, other):
        """ Test whether a node dominates another node """
        return one in self._sets[other]

    def strictly_dominates(self, one, other):
        """ Test whether a node strictly dominates another node """
        return one != other and one in self._sets[other]

    def strict_dominators(self, node):
        return self._sets[node].without(node)

    def to_dict(self):
        return {node: dom.to_set() for node, dom in enumerate(self._sets)}


class ImmediateDominators:
    """ Mapping from node to its immediate dominator.

    Nodes without strict dominators, the entry and nodes which cannot be
    reached from the entry, map to None.
    """
    def __init__(self, entry, idoms):
        self.entry = entry
        self._idoms = tuple(idoms)

    def __repr__(self):
        return 'ImmediateDominators(entry={}, nodes={})'.format(
            self.entry, len(self))

    def __len__(self):
        return len(self._idoms)

    def __iter__(self):
        return iter(range(len(self._idoms)))

    def __getitem__(self, node):
        return self._idoms[node]

    def __eq__(self, other):
        if isinstance(other, ImmediateDominators):
            return self.entry == other.entry and self._idoms == other._idoms
        return NotImplemented

    def items(self):
        """ Yield (node, idom) pairs for all nodes except the entry """
        for node, idom in enumerate(self._idoms):
            if node != self.entry:
                yield node, idom

    def to_dict(self):
        return dict(self.items())


class DominanceFrontier:
    """ For every node, the nodes where its dominance ends """
    def __init__(self, frontiers):
        self._frontiers = tuple(frontiers)

    def __repr__(self):
        return 'DominanceFrontier(nodes={})'.format(len(self))

    def __len__(self):
        return len(self._frontiers)

    def __iter__(self):
        return iter(range(len(self._frontiers)))

    def __getitem__(self, node):
        return self._frontiers[node]

    def __eq__(self, other):
        if isinstance(other, DominanceFrontier):
            return self._frontiers == other._frontiers
        return NotImplemented

    def to_dict(self):
        return {node: df.to_set() for node, df in enumerate(self._frontiers)}


def as_bitset(size, values):
    """ Turn an iterable of nodes into a bitset, unless it is one """
    if isinstance(values, BitSet) and values.size == size:
        return values
    return BitSet.from_iterable(size, values)
