import unittest
import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from maze_carver.core.disjoint_set import DisjointSet

class TestDisjointSet(unittest.TestCase):
    def test_singletons(self):
        sets = DisjointSet(5)
        self.assertEqual(len(sets), 5)
        for i in range(5):
            self.assertEqual(sets.find(i), i)

    def test_union(self):
        sets = DisjointSet(6)
        self.assertTrue(sets.union(0, 1))
        self.assertTrue(sets.union(2, 3))
        self.assertFalse(sets.connected(1, 2))

        self.assertTrue(sets.union(1, 3))
        self.assertTrue(sets.connected(0, 2))
        # Already in the same set
        self.assertFalse(sets.union(0, 3))
        self.assertFalse(sets.connected(0, 5))

    def test_path_compression(self):
        sets = DisjointSet(5)
        # Build a chain 4 -> 3 -> 2 -> 1 -> 0
        for i in range(4, 0, -1):
            sets.parent[i] = i - 1

        self.assertEqual(sets.find(4), 0)
        # Whole chain now points straight at the root
        self.assertEqual(list(sets.parent), [0, 0, 0, 0, 0])

if __name__ == '__main__':
    unittest.main()
