""" Dominator sets by fixed point iteration.

A node is dominated by itself and by the intersection of the dominators
of its predecessors. Starting from the full node set for every node but
the entry, the sets only shrink, so iterating until nothing changes
reaches the fixed point.

Nodes which cannot be reached from the entry have no dominators besides
themselves. They are fixed to that value up front and never revisited.
"""

import logging
from collections import deque
from ...common import NonConvergence
from ...utils.bitset import BitSet
from ..domsets import DominatorSets, as_bitset


logger = logging.getLogger('dominators')


def calculate_dominators(
        graph, entry, order=None, initial=None, max_passes=None):
    """ Calculate the dominator sets iteratively

    Args:
        graph: the FlowGraph to analyze
        entry: the entry node
        order: optional permutation of all nodes, giving the order in
            which nodes are visited during each pass. Defaults to
            ascending node number.
        initial: optional dominator sets to start from instead of the
            full node set. These must not be smaller than the final
            sets, for example the result of an earlier run.
        max_passes: optional limit on the number of passes. When the
            sets still change in the last allowed pass, NonConvergence
            is raised.
    """
    graph.validate(entry)
    n = len(graph)
    order = node_order(n, order)
    reach = graph.reachable(entry)
    _dom = initial_sets(graph, entry, reach, initial)

    # Run fixed point iteration:
    passes = 0
    change = True
    while change:
        if max_passes is not None and passes >= max_passes:
            raise NonConvergence(passes)
        passes += 1
        change = False
        for node in order:
            if node == entry or node not in reach:
                continue
            new_dom_n = meet(graph, node, _dom)
            if new_dom_n != _dom[node]:
                change = True
                _dom[node] = new_dom_n

    logger.debug(
        'Dominators of %s nodes converged after %s passes', n, passes)
    return DominatorSets(entry, _dom, passes=passes)


def calculate_dominators_worklist(graph, entry):
    """ Calculate the dominator sets using a worklist.

    Only successors of nodes whose set changed are revisited. The result
    is identical to the one of `calculate_dominators`.
    """
    graph.validate(entry)
    reach = graph.reachable(entry)
    _dom = initial_sets(graph, entry, reach, None)

    worklist = deque(
        node for node in graph if node != entry and node in reach)
    queued = set(worklist)
    visits = 0
    while worklist:
        node = worklist.popleft()
        queued.remove(node)
        visits += 1
        new_dom_n = meet(graph, node, _dom)
        if new_dom_n != _dom[node]:
            _dom[node] = new_dom_n
            for successor in graph.successors(node):
                if successor != entry and successor not in queued:
                    worklist.append(successor)
                    queued.add(successor)

    logger.debug(
        'Dominators of %s nodes converged after %s visits',
        len(graph), visits)
    return DominatorSets(entry, _dom)


def calculate_post_dominators(graph, exit_node, **kwargs):
    """ Calculate the post dominator sets iteratively.

    Post domination is the same as domination, but then starting at
    the exit node.
    """
    return calculate_dominators(graph.reversed(), exit_node, **kwargs)


def meet(graph, node, _dom):
    """ A node is dominated by itself and by the intersection of
    the dominators of its predecessors """
    n = len(graph)
    preds = graph.predecessors(node)
    if preds:
        new_dom = BitSet.full(n)
        for p in preds:
            new_dom &= _dom[p]
    else:
        new_dom = BitSet.empty(n)
    return new_dom.with_member(node)


def initial_sets(graph, entry, reach, initial):
    """ Initialize dominator map """
    n = len(graph)
    all_nodes = BitSet.full(n)
    _dom = []
    for node in graph:
        if node == entry or node not in reach:
            _dom.append(BitSet.single(n, node))
        elif initial is None:
            _dom.append(all_nodes)
        else:
            _dom.append(as_bitset(n, initial[node]))
    return _dom


def node_order(n, order):
    if order is None:
        return range(n)
    order = list(order)
    if sorted(order) != list(range(n)):
        raise ValueError(
            'Visit order must be a permutation of the {} nodes'.format(n))
    return order
