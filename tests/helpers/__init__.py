from helpers.naive_lcs import (
    NaiveLCS,
    BruteForceLCS,
    is_subsequence,
    lcs_length,
    lcs_table,
    all_lcs,
)


__all__ = [
    "NaiveLCS",
    "BruteForceLCS",
    "is_subsequence",
    "lcs_length",
    "lcs_table",
    "all_lcs",
]
