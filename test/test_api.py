""" Test the complete dominance analysis """

import unittest
from unittest.mock import patch
from cfgdom import api
from cfgdom.common import InvalidGraph, NonConvergence
from cfgdom.common import UnreachablePredecessor
from cfgdom.dominance import DominanceInfo
from cfgdom.graph import FlowGraph


DIAMOND = [[], [0], [1], [1], [2, 3]]


class AnalyzeTestCase(unittest.TestCase):
    def test_diamond(self):
        info = api.analyze(DIAMOND, 0)
        self.assertEqual({1: 0, 2: 1, 3: 1, 4: 1}, info.idom.to_dict())
        self.assertEqual(
            {0: set(), 1: set(), 2: {4}, 3: {4}, 4: set()},
            info.frontier.to_dict())

    def test_unreachable_node(self):
        info = api.analyze(DIAMOND + [[]], 0)
        self.assertEqual({5}, info.dom[5].to_set())
        self.assertIsNone(info.get_immediate_dominator(5))
        self.assertEqual(set(), info.get_dominance_frontier(5).to_set())
        for node in range(5):
            self.assertNotIn(5, info.get_dominance_frontier(node))

    def test_invalid_entry(self):
        with patch('cfgdom.dominance.calculate_dominators') as mock_calc:
            with self.assertRaises(InvalidGraph):
                api.analyze(DIAMOND, 99)
            self.assertFalse(mock_calc.called)

    def test_worklist(self):
        info = api.analyze(DIAMOND, 0, worklist=True)
        self.assertEqual({1: 0, 2: 1, 3: 1, 4: 1}, info.idom.to_dict())

    def test_max_passes(self):
        with self.assertRaises(NonConvergence):
            api.analyze(DIAMOND, 0, max_passes=1)

    def test_unreachable_predecessor(self):
        graph = [[], [0], [1], [1], [2, 3, 5], []]
        with self.assertRaises(UnreachablePredecessor):
            api.analyze(graph, 0)
        info = api.analyze(graph, 0, prune_unreachable=True)
        self.assertEqual(1, info.get_immediate_dominator(4))

    def test_from_successors(self):
        graph = api.from_successors([[1], [2, 3], [4], [4], []])
        info = api.analyze(graph, 0)
        self.assertEqual({1: 0, 2: 1, 3: 1, 4: 1}, info.idom.to_dict())


class DominanceInfoTestCase(unittest.TestCase):
    def test_queries(self):
        info = DominanceInfo(FlowGraph(DIAMOND), 0)
        self.assertTrue(info.dominates(0, 4))
        self.assertTrue(info.dominates(4, 4))
        self.assertFalse(info.strictly_dominates(4, 4))
        self.assertFalse(info.dominates(2, 4))
        self.assertEqual(1, info.get_immediate_dominator(2))
        self.assertEqual([4], list(info.iterated_frontier([3])))

    def test_stages_are_calculated_once(self):
        info = DominanceInfo(DIAMOND, 0)
        self.assertIs(info.dom, info.dom)
        self.assertIs(info.idom, info.idom)
        self.assertIs(info.frontier, info.frontier)

    def test_post_dominators(self):
        info = DominanceInfo(DIAMOND, 0)
        pdom = info.post_dominators(4)
        self.assertEqual({1, 4}, pdom[1].to_set())

    def test_invalid_entry(self):
        with self.assertRaises(InvalidGraph):
            DominanceInfo(DIAMOND, 5)


if __name__ == '__main__':
    unittest.main()
