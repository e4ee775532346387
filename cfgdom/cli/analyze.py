""" Compute immediate dominators and dominance frontier of a graph """

import argparse
import sys
from .base import base_parser, out_parser, LogSetup
from ..api import analyze as analyze_graph
from ..format.predlist import read_graph, write_results


parser = argparse.ArgumentParser(
    description=__doc__, parents=[base_parser, out_parser])
parser.add_argument(
    'graph', metavar='graph-file', type=argparse.FileType('r'),
    help='File with one "node: pred,pred,..." line per node')
parser.add_argument(
    '--entry', '-e', type=int, default=0, help='The entry node')
parser.add_argument(
    '--successors', action='store_true', default=False,
    help='The file lists successors instead of predecessors')
parser.add_argument(
    '--prune-unreachable', action='store_true', default=False,
    help='Ignore edges leaving nodes unreachable from the entry')
parser.add_argument(
    '--worklist', action='store_true', default=False,
    help='Use the worklist solver')
parser.add_argument(
    '--max-passes', type=int, default=None, metavar='passes',
    help='Fail when the dominators do not converge in this many passes')


def analyze(args=None):
    """ Compute immediate dominators and dominance frontier of a graph """
    args = parser.parse_args(args)
    with LogSetup(args) as log_setup:
        graph = read_graph(args.graph, successors=args.successors)
        args.graph.close()
        log_setup.logger.info('Loaded graph with %s nodes', len(graph))
        info = analyze_graph(
            graph, args.entry, worklist=args.worklist,
            prune_unreachable=args.prune_unreachable,
            max_passes=args.max_passes)
        write_results(info.idom, info.frontier, f=args.output)
        if args.output and args.output is not sys.stdout:
            args.output.close()


if __name__ == '__main__':
    analyze()
