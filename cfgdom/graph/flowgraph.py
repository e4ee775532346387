""" Dense control flow graph.

Nodes are the numbers 0 .. n-1 and the graph stores, for each node, the
ordered list of its predecessors. This is the orientation the dominator
equations are written in. Graphs described by successor lists must be
transposed first, use `FlowGraph.from_successors` for that.
"""

import logging
from ..common import InvalidGraph
from ..utils.bitset import BitSet


logger = logging.getLogger('flowgraph')


class FlowGraph:
    """ Control flow graph indexed by dense node numbers. """
    def __init__(self, predecessors):
        self.pre_map = [list(preds) for preds in predecessors]
        self._suc_map = None

    @classmethod
    def from_successors(cls, successors):
        """ Create a flow graph from successor (forward edge) lists """
        successors = [list(sucs) for sucs in successors]
        n = len(successors)
        pre_map = [[] for _ in range(n)]
        for node, sucs in enumerate(successors):
            for successor in sucs:
                if not _is_node(successor, n):
                    raise InvalidGraph(
                        'Successor {} of node {} is not a node of this'
                        ' {}-node graph'.format(successor, node, n))
                pre_map[successor].append(node)
        return cls(pre_map)

    def __repr__(self):
        return 'FlowGraph(nodes={})'.format(len(self))

    def __len__(self):
        return len(self.pre_map)

    def __iter__(self):
        return iter(range(len(self.pre_map)))

    def __eq__(self, other):
        if isinstance(other, FlowGraph):
            return self.pre_map == other.pre_map
        return NotImplemented

    def validate(self, entry):
        """ Check that all node references fall inside the graph.

        Raises InvalidGraph for an out of range predecessor or entry.
        """
        n = len(self)
        if not _is_node(entry, n):
            raise InvalidGraph(
                'Entry node {} is not a node of this {}-node graph'.format(
                    entry, n))
        for node, preds in enumerate(self.pre_map):
            for p in preds:
                if not _is_node(p, n):
                    raise InvalidGraph(
                        'Predecessor {} of node {} is not a node of this'
                        ' {}-node graph'.format(p, node, n))

    def predecessors(self, node):
        """ Get the predecessors of the node """
        return self.pre_map[node]

    def successors(self, node):
        """ Get the successors of the node """
        if self._suc_map is None:
            self._suc_map = [[] for _ in self.pre_map]
            for m, preds in enumerate(self.pre_map):
                for p in preds:
                    if m not in self._suc_map[p]:
                        self._suc_map[p].append(m)
        return self._suc_map[node]

    def has_edge(self, n, m):
        """ Test if there exist and edge from n to m """
        return n in self.pre_map[m]

    def reversed(self):
        """ Create the graph with all edges reversed """
        pre_map = [[] for _ in self.pre_map]
        for node, preds in enumerate(self.pre_map):
            for p in preds:
                pre_map[p].append(node)
        return FlowGraph(pre_map)

    def reachable(self, entry):
        """ Determine the set of nodes reachable from entry """
        self.validate(entry)
        seen = BitSet.single(len(self), entry)
        for _, node in dfs(self, entry):
            seen = seen.with_member(node)
        return seen

    def without_unreachable(self, entry):
        """ Create a copy without edges that leave unreachable nodes.

        Node numbers are retained, unreachable nodes remain present but
        do not feed into any other node anymore.
        """
        reach = self.reachable(entry)
        pre_map = [
            [p for p in preds if p in reach] for preds in self.pre_map]
        dropped = sum(map(len, self.pre_map)) - sum(map(len, pre_map))
        logger.debug(
            'Dropped %s edges from %s unreachable nodes',
            dropped, len(self) - len(reach))
        return FlowGraph(pre_map)


def _is_node(value, n):
    return isinstance(value, int) and not isinstance(value, bool) \
        and 0 <= value < n


def dfs(graph, start_node, reverse=False):
    """ Visit nodes in depth-first-search order.

    Args:
        - graph: the flow graph to walk
        - start_node: node to start with
        - reverse: traverse the graph by reversing the edge directions.
    """
    visited = set()
    worklist = [(None, start_node)]
    while worklist:
        parent, node = worklist.pop()
        if node not in visited:
            visited.add(node)
            yield parent, node
            if reverse:
                for predecessor in graph.predecessors(node):
                    worklist.append((node, predecessor))
            else:
                for successor in graph.successors(node):
                    worklist.append((node, successor))
