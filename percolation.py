import numpy as np

from union_find import WeightedQuickUnionUF


class Percolation:
    """
    An n-by-n grid of sites, each either open or closed. The system
    percolates when a chain of open, adjacent sites joins the top row to
    the bottom row.

    Connectivity is kept in two union-find structures. wqfTop links the
    open sites of row 1 to a virtual top, wqfBottom links the open sites of
    row n to a virtual bottom, and both link every pair of adjacent open
    sites. A single structure holding both virtual sites would suffer from
    backwash: once the grid percolates, any open bottom-row site would look
    full through the virtual bottom.

    Sites are addressed with 1-based (row, col) coordinates.
    """

    def __init__(self, n: int):
        if not isinstance(n, (int, np.integer)) or n <= 0:
            raise ValueError("n must be a positive integer")

        self.gridSize = int(n)
        self.gridSquare = self.gridSize * self.gridSize
        self.grid = np.zeros((self.gridSize, self.gridSize), dtype=bool)

        # index n*n is the virtual site in both structures
        self.wqfTop = WeightedQuickUnionUF(self.gridSquare + 1)
        self.wqfBottom = WeightedQuickUnionUF(self.gridSquare + 1)
        self.virtualTop = self.gridSquare
        self.virtualBottom = self.gridSquare

        self.openSite = 0
        self.percolationAchieved = False

    @property
    def size(self) -> int:
        return self.gridSize

    # open the site (row, col) if it's not open yet
    def open(self, row: int, col: int):
        if self.isOpen(row, col):
            return

        self.grid[row - 1][col - 1] = True
        self.openSite += 1

        p = self.flattenGrid(row, col)

        ## top row
        if row == 1:
            self.wqfTop.union(p, self.virtualTop)

        ## bottom row
        if row == self.gridSize:
            self.wqfBottom.union(p, self.virtualBottom)

        ## up, down, left, right
        for nRow, nCol in ((row - 1, col), (row + 1, col), (row, col - 1), (row, col + 1)):
            if self.isOnGrid(nRow, nCol) and self.grid[nRow - 1][nCol - 1]:
                q = self.flattenGrid(nRow, nCol)
                self.wqfTop.union(p, q)
                self.wqfBottom.union(p, q)

        if (self.wqfTop.connected(p, self.virtualTop)
                and self.wqfBottom.connected(p, self.virtualBottom)):
            self.percolationAchieved = True

    # is site (row, col) open?
    def isOpen(self, row: int, col: int) -> bool:
        self.validState(row, col)
        return bool(self.grid[row - 1][col - 1])

    # is site (row, col) open and connected to the top row?
    def isFull(self, row: int, col: int) -> bool:
        if not self.isOpen(row, col):
            return False
        return self.wqfTop.connected(self.flattenGrid(row, col), self.virtualTop)

    def numberOfOpenSites(self) -> int:
        return self.openSite

    def percolates(self) -> bool:
        return self.percolationAchieved

    def validState(self, row: int, col: int):
        if not self.isOnGrid(row, col):
            raise ValueError(
                f"site ({row}, {col}) is outside the {self.gridSize}x{self.gridSize} grid"
            )

    def flattenGrid(self, row: int, col: int) -> int:
        return self.gridSize * (row - 1) + (col - 1)

    def isOnGrid(self, row: int, col: int) -> bool:
        if not isinstance(row, (int, np.integer)) or not isinstance(col, (int, np.integer)):
            return False
        return 1 <= row <= self.gridSize and 1 <= col <= self.gridSize

    def __str__(self):
        return "\n".join(
            "".join(f"{int(site):3d} " for site in gridRow) for gridRow in self.grid
        )

    def show_material(self) -> str:
        """
        Renders the grid of open (1) and closed (0) sites, followed by the
        root of every site in wqfTop. Sites sharing a root are connected.
        Used for debugging.
        """
        lines = [str(self), ""]
        lines.append(f"virtual top: {self.wqfTop.find(self.virtualTop):3d}")
        for row in range(1, self.gridSize + 1):
            lines.append("".join(
                f"{self.wqfTop.find(self.flattenGrid(row, col)):3d} "
                for col in range(1, self.gridSize + 1)
            ))
        return "\n".join(lines)
