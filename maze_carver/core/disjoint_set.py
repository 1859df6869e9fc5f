from array import array


class DisjointSet:
    """
    Union-find over the integers 0..size-1.
    find() compresses paths; union() just hangs one root under the other.
    """

    __slots__ = ('parent',)

    def __init__(self, size: int):
        # 'l' (signed long) so ids of large grids still fit
        self.parent = array('l', range(size))

    def __len__(self):
        return len(self.parent)

    def find(self, item: int) -> int:
        parent = self.parent

        root = item
        while parent[root] != root:
            root = parent[root]

        # Path compression: point everything on the chain at the root
        while parent[item] != root:
            parent[item], item = root, parent[item]

        return root

    def union(self, a: int, b: int) -> bool:
        """Merges the sets holding a and b. Returns False if already merged."""
        root_a = self.find(a)
        root_b = self.find(b)
        if root_a == root_b:
            return False
        self.parent[root_b] = root_a
        return True

    def connected(self, a: int, b: int) -> bool:
        return self.find(a) == self.find(b)
