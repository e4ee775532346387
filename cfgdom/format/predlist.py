""" Module to read and write graphs as predecessor lists.

Every line holds a node followed by the nodes it has an edge with:

    4: 2,3

Empty lines and everything after a '#' are ignored. Every node from 0
up to the number of nodes minus one must be listed exactly once.

"""

import logging
from ..common import ParseError
from ..graph.flowgraph import FlowGraph


logger = logging.getLogger('predlist')


class PredLine:
    """ A single line in a predecessor list file """
    def __init__(self, node, nodes, row=None):
        self.node = node
        self.nodes = nodes
        self.row = row

    def __repr__(self):
        return 'PredLine({}, {})'.format(self.node, self.nodes)

    @classmethod
    def from_line(cls, line: str, row=None):
        """ Parses a line into the node and its adjacent nodes """
        if ':' not in line:
            raise ParseError('Expected "<node>: <node>,..."', row)
        head, tail = line.split(':', 1)
        node = parse_node(head, row)
        tail = tail.strip()
        if tail:
            nodes = [parse_node(part, row) for part in tail.split(',')]
        else:
            nodes = []
        return cls(node, nodes, row=row)

    def to_line(self) -> str:
        return '{}: {}'.format(self.node, ','.join(map(str, self.nodes)))


def parse_node(text, row):
    text = text.strip()
    if not text.isdecimal():
        raise ParseError('Invalid node "{}"'.format(text), row)
    return int(text)


def pred_lines(f):
    for row, line in enumerate(f, 1):
        # Strip comments, spaces and newlines:
        line = line.split('#', 1)[0].strip()

        if not line:
            # Skip empty lines
            continue

        yield PredLine.from_line(line, row=row)


def read_graph(f, successors=False):
    """ Read a flow graph from file f.

    When successors is True, the lists in the file are taken to be
    successors and the graph is transposed while loading.
    """
    lines = list(pred_lines(f))
    n = len(lines)
    adjacency = [None] * n
    for line in lines:
        if line.node >= n:
            raise ParseError(
                'Node {} out of range, {} nodes are listed'.format(
                    line.node, n), line.row)
        if adjacency[line.node] is not None:
            raise ParseError(
                'Node {} is listed twice'.format(line.node), line.row)
        adjacency[line.node] = line.nodes

    logger.debug('Read graph with %s nodes', n)
    if successors:
        return FlowGraph.from_successors(adjacency)
    else:
        return FlowGraph(adjacency)


def write_graph(graph, f=None):
    """ Write the predecessor lists of graph to file f """
    for node in graph:
        print(PredLine(node, graph.predecessors(node)).to_line(), file=f)


def format_nodes(nodes):
    return '{' + ', '.join(map(str, nodes)) + '}'


def write_results(idom, frontier, f=None):
    """ Print immediate dominators and dominance frontier tables """
    print('idom:', file=f)
    for node, dominator in idom.items():
        value = 'none' if dominator is None else str(dominator)
        print('{} -> {}'.format(node, value), file=f)
    print('frontier:', file=f)
    for node in frontier:
        print('{} -> {}'.format(node, format_nodes(frontier[node])), file=f)
