""" Immediate dominators from dominator sets.

The strict dominators of a reachable node form a chain: of every two
of them, one dominates the other. The immediate dominator is the end of
that chain closest to the node.
"""

import logging
from ...common import ChainViolation
from ..domsets import ImmediateDominators, as_bitset


logger = logging.getLogger('idom')


def calculate_immediate_dominators(dom, entry, n):
    """ Determine immediate dominators from dominator sets.

    Args:
        dom: mapping from node to the nodes dominating it, for example
            the result of `calculate_dominators`.
        entry: the entry node, which has no immediate dominator.
        n: the amount of nodes.
    """
    _dom = [as_bitset(n, dom[node]) for node in range(n)]
    _idom = [None] * n

    for node in range(n):
        if node == entry:
            continue

        sdom = list(_dom[node].without(node))
        if not sdom:
            # No strict dominators, hence also no immediate dominator:
            continue

        check_chain(node, sdom, _dom)

        for x in sdom:
            if not any(x in _dom[other] for other in sdom if other != x):
                _idom[node] = x
                break
        else:  # pragma: no cover
            raise ChainViolation(
                'No closest strict dominator for node {}'.format(node), node)

    logger.debug(
        'Found %s immediate dominators among %s nodes',
        sum(1 for i in _idom if i is not None), n)
    return ImmediateDominators(entry, _idom)


def check_chain(node, sdom, _dom):
    """ Verify that strict dominators are totally ordered """
    for i, a in enumerate(sdom):
        for b in sdom[i + 1:]:
            a_dominates_b = a in _dom[b]
            b_dominates_a = b in _dom[a]
            if a_dominates_b == b_dominates_a:
                raise ChainViolation(
                    'Strict dominators {} and {} of node {} are not'
                    ' ordered'.format(a, b, node), node)
