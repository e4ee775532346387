"""
   Error handling routines
   Shared logging format
"""


logformat = '%(asctime)s | %(levelname)8s | %(name)10.10s | %(message)s'


class AnalysisError(Exception):
    """ Base class for all failures of a dominance analysis run """
    def __init__(self, msg):
        super().__init__(msg)
        self.msg = msg

    def __repr__(self):
        return '"{}"'.format(self.msg)

    def print(self, file=None):
        """ Print the error """
        print(self.msg, file=file)


class InvalidGraph(AnalysisError):
    """ A predecessor id or the entry lies outside the node range """
    pass


class ChainViolation(AnalysisError):
    """ Strict dominators of a node do not form a chain """
    def __init__(self, msg, node):
        super().__init__(msg)
        self.node = node


class UnreachablePredecessor(AnalysisError):
    """ A frontier walk ran into a node without immediate dominator """
    def __init__(self, node, merge_node):
        super().__init__(
            'Node {} has no immediate dominator but is a predecessor of'
            ' merge node {}'.format(node, merge_node))
        self.node = node
        self.merge_node = merge_node


class NonConvergence(AnalysisError):
    """ The fixed point iteration exceeded its pass limit """
    def __init__(self, passes):
        super().__init__(
            'Dominator sets did not converge within {} passes'.format(passes))
        self.passes = passes


class ParseError(AnalysisError):
    """ Malformed textual graph description """
    def __init__(self, msg, row=None):
        super().__init__(msg)
        self.row = row

    def print(self, file=None):
        if self.row is None:
            print(self.msg, file=file)
        else:
            print('Line {}: {}'.format(self.row, self.msg), file=file)
