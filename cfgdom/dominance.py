from .graph.flowgraph import FlowGraph
from .graph.algorithm.fixed_point_dominator import calculate_dominators
from .graph.algorithm.fixed_point_dominator import \
    calculate_dominators_worklist
from .graph.algorithm.fixed_point_dominator import calculate_post_dominators
from .graph.algorithm.immediate_dominator import \
    calculate_immediate_dominators
from .graph.algorithm.dominance_frontier import calculate_dominance_frontier
from .graph.algorithm.dominance_frontier import iterated_dominance_frontier


class DominanceInfo:
    """ Calculate control flow graph info, such as dominators,
    immediate dominators and dominance frontier.

    Each stage is calculated on first use and kept afterwards.
    """
    def __init__(self, graph, entry, worklist=False, max_passes=None):
        if not isinstance(graph, FlowGraph):
            graph = FlowGraph(graph)
        graph.validate(entry)
        self.graph = graph
        self.entry = entry
        self.worklist = worklist
        self.max_passes = max_passes
        self._dom = None
        self._idom = None
        self._df = None

    def __repr__(self):
        return 'DominanceInfo(graph={}, entry={})'.format(
            self.graph, self.entry)

    @property
    def dom(self):
        if self._dom is None:
            if self.worklist:
                self._dom = calculate_dominators_worklist(
                    self.graph, self.entry)
            else:
                self._dom = calculate_dominators(
                    self.graph, self.entry, max_passes=self.max_passes)
        return self._dom

    @property
    def idom(self):
        if self._idom is None:
            self._idom = calculate_immediate_dominators(
                self.dom, self.entry, len(self.graph))
        return self._idom

    @property
    def frontier(self):
        if self._df is None:
            self._df = calculate_dominance_frontier(self.graph, self.idom)
        return self._df

    def dominates(self, one, other):
        """ Test whether a node dominates another node """
        return self.dom.dominates(one, other)

    def strictly_dominates(self, one, other):
        """ Test whether a node strictly dominates another node """
        return self.dom.strictly_dominates(one, other)

    def get_immediate_dominator(self, node):
        """ Retrieve a nodes immediate dominator """
        return self.idom[node]

    def get_dominance_frontier(self, node):
        return self.frontier[node]

    def iterated_frontier(self, nodes):
        """ Merge points requiring a phi for definitions in nodes """
        return iterated_dominance_frontier(self.frontier, nodes)

    def post_dominators(self, exit_node):
        """ Calculate post dominator sets with respect to exit_node """
        return calculate_post_dominators(
            self.graph, exit_node, max_passes=self.max_passes)
