import logging
from typing import Dict, FrozenSet, List, Optional, Sequence, Tuple

from .utils import SolutionLimitExceeded

logger = logging.getLogger(__name__)

Cell = Tuple[int, int]

EMPTY_PREFIX: FrozenSet[str] = frozenset([''])


class SolutionCollector:
    """Walks a finished LCS table back from its last cell.

    Every distinct longest common subsequence is reconstructed: a match
    extends the diagonal set, a strictly larger neighbour is followed alone
    and a tie follows both neighbours and merges the two sets.

    The cells reachable from the last cell are found first, together with
    how many reachable cells consume each of them. Sets are then built in
    row-major order and a cell's set is dropped as soon as its last consumer
    has read it, so only about one row of sets is alive at a time. Cells that
    only forward a neighbour's set share that set object instead of copying it.
    """

    def __init__(self, table: Sequence[Sequence[int]], r_seq: Sequence[str], c_seq: Sequence[str],
                 max_solutions: Optional[int] = None):
        self.table = table
        self.r_seq = r_seq
        self.c_seq = c_seq
        self.max_solutions = max_solutions
        self.peak_held = 0

    def collect(self) -> FrozenSet[str]:
        start = (len(self.r_seq), len(self.c_seq))
        consumers = self._count_consumers(start)
        memo: Dict[Cell, FrozenSet[str]] = {}
        self.peak_held = 0
        for cell in sorted(consumers):
            deps = self._predecessors(*cell)
            memo[cell] = self._merge(cell, [memo[d] for d in deps])
            self.peak_held = max(self.peak_held, len(memo))
            for dep in deps:
                consumers[dep] -= 1
                if not consumers[dep]:
                    del memo[dep]
        solutions = memo[start]
        logger.debug("collected %d solutions over %d cells, at most %d sets held",
                     len(solutions), len(consumers), self.peak_held)
        return solutions

    def collect_one(self) -> str:
        chars: List[str] = []
        r, c = len(self.r_seq), len(self.c_seq)
        while r > 0 and c > 0:
            if self.r_seq[r - 1] == self.c_seq[c - 1]:
                chars.append(self.r_seq[r - 1])
                r, c = r - 1, c - 1
            elif self.table[r][c - 1] > self.table[r - 1][c]:
                c -= 1
            else:
                r -= 1
        chars.reverse()
        return ''.join(chars)

    def _count_consumers(self, start: Cell) -> Dict[Cell, int]:
        consumers: Dict[Cell, int] = {start: 0}
        stack: List[Cell] = [start]
        while stack:
            for dep in self._predecessors(*stack.pop()):
                if dep not in consumers:
                    consumers[dep] = 0
                    stack.append(dep)
                consumers[dep] += 1
        return consumers

    def _predecessors(self, r: int, c: int) -> List[Cell]:
        if r == 0 or c == 0:
            return []
        if self.r_seq[r - 1] == self.c_seq[c - 1]:
            return [(r - 1, c - 1)]
        up, left = self.table[r - 1][c], self.table[r][c - 1]
        if up > left:
            return [(r - 1, c)]
        if left > up:
            return [(r, c - 1)]
        return [(r - 1, c), (r, c - 1)]

    def _merge(self, cell: Cell, parts: List[FrozenSet[str]]) -> FrozenSet[str]:
        r, c = cell
        if not parts:
            return EMPTY_PREFIX
        if self.r_seq[r - 1] == self.c_seq[c - 1]:
            ch = self.r_seq[r - 1]
            merged = frozenset(s + ch for s in parts[0])
        elif len(parts) == 1:
            return parts[0]
        else:
            up, left = parts
            if left is up or left <= up:
                return up
            if up <= left:
                return left
            merged = up | left
        if self.max_solutions is not None and len(merged) > self.max_solutions:
            raise SolutionLimitExceeded(self.max_solutions, len(merged))
        return merged


def collect_solutions(table: Sequence[Sequence[int]], r_seq: Sequence[str], c_seq: Sequence[str],
                      max_solutions: Optional[int] = None) -> FrozenSet[str]:
    return SolutionCollector(table, r_seq, c_seq, max_solutions).collect()


def collect_one(table: Sequence[Sequence[int]], r_seq: Sequence[str], c_seq: Sequence[str]) -> str:
    return SolutionCollector(table, r_seq, c_seq).collect_one()
