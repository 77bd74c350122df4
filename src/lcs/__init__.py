from lcs.utils import (
    Strategy, LCSResult, SolverConfig,
    LCSError, SolutionLimitExceeded, RecursionDepthExceeded, TableInvariantError,
    as_char_sequence, is_subsequence, validate_table, tables_equal,
)
from lcs.tabulation import build_bottom_up, build_top_down, MemoizedTable, UNSOLVED
from lcs.collector import SolutionCollector, collect_solutions, collect_one
from lcs.engine import (
    LCSEngine, solve_bottom_up, solve_top_down, compute_all_lcs, compute_length,
    longest_common_subsequence,
)


__all__ = [
    "Strategy", "LCSResult", "SolverConfig",
    "LCSError", "SolutionLimitExceeded", "RecursionDepthExceeded", "TableInvariantError",
    "as_char_sequence", "is_subsequence", "validate_table", "tables_equal",
    "build_bottom_up", "build_top_down", "MemoizedTable", "UNSOLVED",
    "SolutionCollector", "collect_solutions", "collect_one",
    "LCSEngine", "solve_bottom_up", "solve_top_down", "compute_all_lcs", "compute_length",
    "longest_common_subsequence",
]
