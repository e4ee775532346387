""" Test the dense flow graph """

import unittest
from cfgdom.common import InvalidGraph
from cfgdom.graph import FlowGraph
from cfgdom.graph.flowgraph import dfs


class FlowGraphTestCase(unittest.TestCase):
    def setUp(self):
        # Diamond: 0 -> 1 -> {2, 3} -> 4
        self.graph = FlowGraph([[], [0], [1], [1], [2, 3]])

    def test_predecessors_and_successors(self):
        self.assertEqual(5, len(self.graph))
        self.assertEqual([0, 1, 2, 3, 4], list(self.graph))
        self.assertEqual([2, 3], self.graph.predecessors(4))
        self.assertEqual([2, 3], self.graph.successors(1))
        self.assertEqual([], self.graph.successors(4))
        self.assertTrue(self.graph.has_edge(2, 4))
        self.assertFalse(self.graph.has_edge(4, 2))

    def test_from_successors(self):
        graph = FlowGraph.from_successors([[1], [2, 3], [4], [4], []])
        self.assertEqual(self.graph, graph)

    def test_from_successors_invalid(self):
        with self.assertRaises(InvalidGraph):
            FlowGraph.from_successors([[1], [7]])

    def test_reversed(self):
        rev = self.graph.reversed()
        self.assertEqual([[1], [2, 3], [4], [4], []], rev.pre_map)
        self.assertEqual(self.graph, rev.reversed())

    def test_validate(self):
        self.graph.validate(0)
        with self.assertRaises(InvalidGraph):
            self.graph.validate(99)
        with self.assertRaises(InvalidGraph):
            self.graph.validate(-1)
        with self.assertRaises(InvalidGraph):
            FlowGraph([[], [5]]).validate(0)
        with self.assertRaises(InvalidGraph):
            FlowGraph([[], [True]]).validate(0)

    def test_empty_graph_has_no_entry(self):
        with self.assertRaises(InvalidGraph):
            FlowGraph([]).validate(0)

    def test_reachable(self):
        graph = FlowGraph([[], [0], [1], [1], [2, 3], [], [5]])
        self.assertEqual([0, 1, 2, 3, 4], list(graph.reachable(0)))
        self.assertEqual([5, 6], list(graph.reachable(5)))

    def test_without_unreachable(self):
        # Node 5 is unreachable but jumps into node 4:
        graph = FlowGraph([[], [0], [1], [1], [2, 3, 5], []])
        pruned = graph.without_unreachable(0)
        self.assertEqual(6, len(pruned))
        self.assertEqual([2, 3], pruned.predecessors(4))
        self.assertEqual([], pruned.predecessors(5))

    def test_dfs(self):
        order = [node for _, node in dfs(self.graph, 0)]
        self.assertEqual(0, order[0])
        self.assertEqual({0, 1, 2, 3, 4}, set(order))
        backwards = [node for _, node in dfs(self.graph, 4, reverse=True)]
        self.assertEqual({0, 1, 2, 3, 4}, set(backwards))


if __name__ == '__main__':
    unittest.main()
