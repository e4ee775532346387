""" Package for textual graph formats """

from .predlist import read_graph, write_graph, write_results


__all__ = ('read_graph', 'write_graph', 'write_results')
