""" Dominance frontier construction.

Algorithm from Ron Cytron et al., in the formulation of Cooper, Harvey
and Kennedy: only merge points (nodes with two or more predecessors)
end up in a dominance frontier. For each predecessor of a merge point,
walk up the dominator tree until the immediate dominator of the merge
point is reached. Every node passed on the way has the merge point in
its dominance frontier.
"""

import logging
from ...common import ChainViolation, UnreachablePredecessor
from ...utils.bitset import BitSet
from ..domsets import DominanceFrontier


logger = logging.getLogger('frontier')


def calculate_dominance_frontier(graph, idom):
    """ Calculate the dominance frontier of all nodes.

    Args:
        graph: the FlowGraph which was analyzed
        idom: the ImmediateDominators of this graph
    """
    n = len(graph)
    if len(idom) != n:
        raise ValueError(
            'Immediate dominators cover {} nodes, graph has {}'.format(
                len(idom), n))
    entry = idom.entry

    df = [set() for _ in range(n)]
    for node in graph:
        preds = graph.predecessors(node)
        if len(preds) < 2:
            continue

        # The entry has no immediate dominator, walks towards a back
        # edge into the entry include the entry itself.
        stop = idom[node]
        for p in preds:
            runner = p
            steps = 0
            while runner != stop:
                parent = idom[runner]
                if parent is None and runner != entry:
                    raise UnreachablePredecessor(runner, node)
                df[runner].add(node)
                if parent is None:
                    break
                runner = parent
                steps += 1
                if steps > n:
                    raise ChainViolation(
                        'Immediate dominators above node {} form a'
                        ' cycle'.format(p), p)

    logger.debug(
        'Dominance frontier of %s nodes has %s entries',
        n, sum(map(len, df)))
    return DominanceFrontier(BitSet.from_iterable(n, f) for f in df)


def iterated_dominance_frontier(frontier, nodes):
    """ Determine the iterated dominance frontier of a set of nodes.

    This is the closure of the dominance frontier, and gives the merge
    points which need a phi node for a variable defined in the given
    nodes.
    """
    n = len(frontier)
    worklist = list(BitSet.from_iterable(n, nodes))
    result = set()
    while worklist:
        x = worklist.pop()
        for y in frontier[x]:
            if y not in result:
                result.add(y)
                worklist.append(y)
    return BitSet.from_iterable(n, result)
