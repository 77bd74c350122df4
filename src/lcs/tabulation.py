import logging
import sys
from typing import Sequence

from .utils import RecursionDepthExceeded, Table, make_table, recursion_limit

logger = logging.getLogger(__name__)

UNSOLVED = -1


def build_bottom_up(r_seq: Sequence[str], c_seq: Sequence[str]) -> Table:
    m, n = len(r_seq), len(c_seq)
    table = make_table(m + 1, n + 1)
    for i in range(1, m + 1):
        row, prev = table[i], table[i - 1]
        for j in range(1, n + 1):
            if r_seq[i - 1] == c_seq[j - 1]:
                row[j] = prev[j - 1] + 1
            else:
                row[j] = max(prev[j], row[j - 1])
    logger.debug("bottom-up table %dx%d filled", m + 1, n + 1)
    return table


class MemoizedTable:
    """Top-down LCS table.

    Cells start as UNSOLVED so that a solved length of zero is never
    mistaken for a missing entry. The gutters are the base case and are
    written as zeros on first visit.
    """

    def __init__(self, r_seq: Sequence[str], c_seq: Sequence[str], max_recursion_depth: int = 10_000):
        self.r_seq = r_seq
        self.c_seq = c_seq
        self.m = len(r_seq)
        self.n = len(c_seq)
        self.max_recursion_depth = max_recursion_depth
        self.memo: Table = make_table(self.m + 1, self.n + 1, UNSOLVED)

    def solve(self, i: int, j: int) -> int:
        cached = self.memo[i][j]
        if cached != UNSOLVED:
            return cached
        if i == 0 or j == 0:
            value = 0
        elif self.r_seq[i - 1] == self.c_seq[j - 1]:
            value = self.solve(i - 1, j - 1) + 1
        else:
            value = max(self.solve(i - 1, j), self.solve(i, j - 1))
        self.memo[i][j] = value
        return value

    def fill(self) -> Table:
        required = self.m + self.n + 1
        if required > self.max_recursion_depth:
            raise RecursionDepthExceeded(required, self.max_recursion_depth)
        with recursion_limit(sys.getrecursionlimit() + required):
            self.solve(self.m, self.n)
        # cells off the recursion path; each resolves from already-solved neighbours
        unreached = 0
        for i in range(self.m + 1):
            for j in range(self.n + 1):
                if self.memo[i][j] == UNSOLVED:
                    unreached += 1
                    self.solve(i, j)
        logger.debug("top-down table %dx%d filled, %d cells swept after recursion",
                     self.m + 1, self.n + 1, unreached)
        return self.memo


def build_top_down(r_seq: Sequence[str], c_seq: Sequence[str], max_recursion_depth: int = 10_000) -> Table:
    return MemoizedTable(r_seq, c_seq, max_recursion_depth).fill()

