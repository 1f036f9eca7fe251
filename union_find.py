class WeightedQuickUnionUF:
    """
    Weighted quick-union with path compression.

    Sites are indexed 0 through n-1 and each starts in its own component.
    The smaller tree is always linked below the root of the larger one, so
    together with path compression every operation runs in near-constant
    amortized time.
    """

    def __init__(self, n):
        """
        :param n: The number of sites.
        """
        if n <= 0:
            raise ValueError("n must be > 0")

        # parent[i] = parent of site i, a root is its own parent
        self.parent = list(range(n))

        # size[i] = number of sites in the tree rooted at i
        self.size = [1] * n

        self.count = n

    def __len__(self):
        return len(self.parent)

    def get_count(self):
        """
        Returns the number of disjoint sets.
        """
        return self.count

    def _validate(self, p):
        n = len(self.parent)
        if p < 0 or p >= n:
            raise IndexError(f"index {p} is not between 0 and {n-1}")

    def find(self, p):
        """
        Returns the root (canonical element) of the set containing site 'p'.
        Every site on the path is relinked directly to the root.
        """
        self._validate(p)

        root = p
        while root != self.parent[root]:
            root = self.parent[root]

        while p != root:
            next_p = self.parent[p]
            self.parent[p] = root
            p = next_p

        return root

    def connected(self, p, q):
        return self.find(p) == self.find(q)

    def union(self, p, q):
        """
        Merges the set containing site 'p' with the set containing site 'q'.
        On equal sizes the root of 'q' goes below the root of 'p'.
        """
        rootP = self.find(p)
        rootQ = self.find(q)

        if rootP == rootQ:
            return

        if self.size[rootP] < self.size[rootQ]:
            self.parent[rootP] = rootQ
            self.size[rootQ] += self.size[rootP]
        else:
            self.parent[rootQ] = rootP
            self.size[rootP] += self.size[rootQ]

        self.count -= 1
