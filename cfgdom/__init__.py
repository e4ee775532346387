""" Dominance analysis for control flow graphs, implemented in pure Python.

Example usage:

>>> from cfgdom.api import analyze
>>> info = analyze([[], [0], [1], [1], [2, 3]], 0)
>>> info.get_immediate_dominator(4)
1
>>> sorted(info.get_dominance_frontier(2))
[4]

"""

# Define version here. Used in docs, and setup script:
__version_info__ = (0, 1, 0)
__version__ = '.'.join(map(str, __version_info__))
