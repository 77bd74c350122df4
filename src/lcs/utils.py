import sys
from contextlib import contextmanager
from dataclasses import dataclass
from enum import Enum
from typing import FrozenSet, Iterator, List, NamedTuple, Optional, Sequence, Tuple, Union


Table = List[List[int]]
FrozenTable = Tuple[Tuple[int, ...], ...]
CharSequence = Union[str, Sequence[str]]


class Strategy(str, Enum):
    BOTTOM_UP = 'bottom-up'
    TOP_DOWN = 'top-down'


class LCSError(Exception):
    pass


class SolutionLimitExceeded(LCSError):
    def __init__(self, limit: int, reached: int):
        super().__init__(f"Solution set grew to {reached} strings, limit is {limit}")
        self.limit = limit
        self.reached = reached


class RecursionDepthExceeded(LCSError):
    def __init__(self, required: int, limit: int):
        super().__init__(
            f"Top-down build needs recursion depth {required}, limit is {limit}; "
            f"use the bottom-up strategy for inputs this long"
        )
        self.required = required
        self.limit = limit


class TableInvariantError(LCSError, AssertionError):
    pass


class LCSResult(NamedTuple):
    length: int
    solutions: FrozenSet[str]
    table: FrozenTable

    @property
    def rows(self) -> int:
        return len(self.table)

    @property
    def cols(self) -> int:
        return len(self.table[0]) if self.table else 0

    def sorted_solutions(self) -> List[str]:
        return sorted(self.solutions)


@dataclass
class SolverConfig:
    strategy: Strategy = Strategy.BOTTOM_UP
    max_solutions: Optional[int] = 100_000
    max_recursion_depth: int = 10_000
    check_invariants: bool = False

    def __post_init__(self):
        self.strategy = Strategy(self.strategy)
        if self.max_solutions is not None and self.max_solutions < 1:
            raise ValueError(f"max_solutions must be positive, got {self.max_solutions}")
        if self.max_recursion_depth < 1:
            raise ValueError(f"max_recursion_depth must be positive, got {self.max_recursion_depth}")


def as_char_sequence(seq: CharSequence) -> Sequence[str]:
    if isinstance(seq, str):
        return seq
    items = tuple(seq)
    for index, item in enumerate(items):
        if not isinstance(item, str) or len(item) != 1:
            raise TypeError(f"Expected a single character at index {index}, got {item!r}")
    return items


def make_table(rows: int, cols: int, fill: int = 0) -> Table:
    return [[fill] * cols for _ in range(rows)]


def freeze_table(table: Table) -> FrozenTable:
    return tuple(tuple(row) for row in table)


def tables_equal(a: Sequence[Sequence[int]], b: Sequence[Sequence[int]]) -> bool:
    if len(a) != len(b):
        return False
    return all(list(row_a) == list(row_b) for row_a, row_b in zip(a, b))


def is_subsequence(candidate: Sequence[str], seq: Sequence[str]) -> bool:
    it = iter(seq)
    return all(any(ch == item for item in it) for ch in candidate)


def validate_table(table: Sequence[Sequence[int]], r_seq: Sequence[str], c_seq: Sequence[str]):
    """Raise TableInvariantError on the first cell that breaks the LCS recurrence."""
    m, n = len(r_seq), len(c_seq)
    if len(table) != m + 1 or any(len(row) != n + 1 for row in table):
        raise TableInvariantError(f"Table must be {m + 1}x{n + 1}")
    for j in range(n + 1):
        if table[0][j] != 0:
            raise TableInvariantError(f"Non-zero gutter at (0, {j}): {table[0][j]}")
    for i in range(m + 1):
        if table[i][0] != 0:
            raise TableInvariantError(f"Non-zero gutter at ({i}, 0): {table[i][0]}")
    for i in range(1, m + 1):
        for j in range(1, n + 1):
            if r_seq[i - 1] == c_seq[j - 1]:
                expected = table[i - 1][j - 1] + 1
            else:
                expected = max(table[i - 1][j], table[i][j - 1])
            if table[i][j] != expected:
                raise TableInvariantError(f"Cell ({i}, {j}) is {table[i][j]}, expected {expected}")
            if table[i][j] < table[i - 1][j] or table[i][j] < table[i][j - 1]:
                raise TableInvariantError(f"Table decreases at ({i}, {j})")


@contextmanager
def recursion_limit(limit: int) -> Iterator[None]:
    original = sys.getrecursionlimit()
    sys.setrecursionlimit(max(original, limit))
    try:
        yield
    finally:
        sys.setrecursionlimit(original)
