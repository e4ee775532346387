"""
The api module contains the functions to run a complete dominance
analysis on a control flow graph.
"""

import logging
from .dominance import DominanceInfo
from .graph.flowgraph import FlowGraph


logger = logging.getLogger('api')

# When using 'from cfgdom.api import *' include the following:
__all__ = ['analyze', 'from_successors']


def from_successors(successors):
    """ Create a flow graph from successor lists """
    return FlowGraph.from_successors(successors)


def analyze(
        predecessors, entry, worklist=False, prune_unreachable=False,
        max_passes=None):
    """ Run dominators, immediate dominators and dominance frontier.

    Args:
        predecessors: a FlowGraph, or for every node the list of its
            predecessors.
        entry: the entry node.
        worklist: use the worklist solver instead of full passes.
        prune_unreachable: drop edges leaving nodes which cannot be
            reached from the entry before analysis.
        max_passes: limit on the fixed point passes.

    All stages are run before returning, so that any failure is raised
    here and never later on.
    """
    if isinstance(predecessors, FlowGraph):
        graph = predecessors
    else:
        graph = FlowGraph(predecessors)

    # Check entry and edges before doing anything else:
    graph.validate(entry)

    if prune_unreachable:
        graph = graph.without_unreachable(entry)

    info = DominanceInfo(
        graph, entry, worklist=worklist, max_passes=max_passes)
    logger.debug('Analyzing %s nodes from entry %s', len(graph), entry)
    frontier = info.frontier
    logger.debug('Frontier of %s nodes calculated', len(frontier))
    return info
