import logging
from typing import Optional

from .collector import SolutionCollector
from .tabulation import build_bottom_up, build_top_down
from .utils import (
    CharSequence, LCSResult, SolverConfig, Strategy, Table, TableInvariantError,
    as_char_sequence, freeze_table, is_subsequence, tables_equal, validate_table
)

logger = logging.getLogger(__name__)


class LCSEngine:
    def __init__(self, config: Optional[SolverConfig] = None):
        self.config = config or SolverConfig()

    def solve(self, r_seq: CharSequence, c_seq: CharSequence,
              strategy: Optional[Strategy] = None) -> LCSResult:
        strategy = Strategy(strategy or self.config.strategy)
        r_seq, c_seq = as_char_sequence(r_seq), as_char_sequence(c_seq)
        logger.debug("solving %s for %d x %d", strategy.value, len(r_seq), len(c_seq))
        table = self._build(r_seq, c_seq, strategy)
        if self.config.check_invariants:
            validate_table(table, r_seq, c_seq)
        collector = SolutionCollector(table, r_seq, c_seq, self.config.max_solutions)
        solutions = collector.collect()
        length = table[len(r_seq)][len(c_seq)]
        if self.config.check_invariants:
            self._check_solutions(solutions, length, r_seq, c_seq)
        logger.debug("%s found %d solutions of length %d", strategy.value, len(solutions), length)
        return LCSResult(length, solutions, freeze_table(table))

    def solve_bottom_up(self, r_seq: CharSequence, c_seq: CharSequence) -> LCSResult:
        return self.solve(r_seq, c_seq, Strategy.BOTTOM_UP)

    def solve_top_down(self, r_seq: CharSequence, c_seq: CharSequence) -> LCSResult:
        return self.solve(r_seq, c_seq, Strategy.TOP_DOWN)

    def compute_length(self, r_seq: CharSequence, c_seq: CharSequence) -> int:
        r_seq, c_seq = as_char_sequence(r_seq), as_char_sequence(c_seq)
        return build_bottom_up(r_seq, c_seq)[len(r_seq)][len(c_seq)]

    def compute_one(self, r_seq: CharSequence, c_seq: CharSequence) -> str:
        r_seq, c_seq = as_char_sequence(r_seq), as_char_sequence(c_seq)
        table = build_bottom_up(r_seq, c_seq)
        return SolutionCollector(table, r_seq, c_seq).collect_one()

    def cross_check(self, r_seq: CharSequence, c_seq: CharSequence) -> LCSResult:
        bottom_up = self.solve_bottom_up(r_seq, c_seq)
        top_down = self.solve_top_down(r_seq, c_seq)
        if not tables_equal(bottom_up.table, top_down.table):
            raise TableInvariantError(f"Strategies built different tables for {r_seq!r}, {c_seq!r}")
        if bottom_up.solutions != top_down.solutions:
            raise TableInvariantError(f"Strategies collected different solutions for {r_seq!r}, {c_seq!r}")
        return bottom_up

    def _check_solutions(self, solutions, length: int, r_seq, c_seq):
        for solution in solutions:
            if len(solution) != length:
                raise TableInvariantError(f"Solution {solution!r} has length {len(solution)}, expected {length}")
            if not (is_subsequence(solution, r_seq) and is_subsequence(solution, c_seq)):
                raise TableInvariantError(f"Solution {solution!r} is not common to both inputs")

    def _build(self, r_seq, c_seq, strategy: Strategy) -> Table:
        if strategy == Strategy.TOP_DOWN:
            return build_top_down(r_seq, c_seq, self.config.max_recursion_depth)
        return build_bottom_up(r_seq, c_seq)


def solve_bottom_up(r_seq: CharSequence, c_seq: CharSequence) -> LCSResult:
    return LCSEngine().solve_bottom_up(r_seq, c_seq)


def solve_top_down(r_seq: CharSequence, c_seq: CharSequence) -> LCSResult:
    return LCSEngine().solve_top_down(r_seq, c_seq)


def compute_all_lcs(r_seq: CharSequence, c_seq: CharSequence,
                    strategy: Strategy = Strategy.BOTTOM_UP) -> LCSResult:
    return LCSEngine().solve(r_seq, c_seq, strategy)


def compute_length(r_seq: CharSequence, c_seq: CharSequence) -> int:
    return LCSEngine().compute_length(r_seq, c_seq)


def longest_common_subsequence(r_seq: CharSequence, c_seq: CharSequence) -> str:
    return LCSEngine().compute_one(r_seq, c_seq)
