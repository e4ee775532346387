""" Graph algorithms module.

"""

from .flowgraph import FlowGraph
from .domsets import DominatorSets, ImmediateDominators, DominanceFrontier


__all__ = (
    'FlowGraph', 'DominatorSets', 'ImmediateDominators', 'DominanceFrontier')
