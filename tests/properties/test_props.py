import unittest
import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..', 'src'))
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from lcs.utils import Strategy, validate_table, tables_equal
from lcs.engine import (
    LCSEngine, solve_bottom_up, solve_top_down, compute_all_lcs, compute_length,
    longest_common_subsequence
)

from helpers.naive_lcs import all_lcs, is_subsequence, lcs_length, lcs_table

from properties.generators import (
    GeneratorConfig,
    GeneratorMode,
    SequenceGenerator,
    RepetitiveSequenceGenerator,
    CaseGenerator,
    generate_random_pairs,
    generate_cases
)


class TestStrategyAgreement(unittest.TestCase):
    def setUp(self):
        self.case_gen = CaseGenerator(GeneratorConfig(seed=42, max_length=12))

    def test_tables_and_solutions_agree(self):
        cases = self.case_gen.generate_batch(15) + self.case_gen.generate_batch(15, GeneratorMode.REPETITIVE)
        for case in cases + self.case_gen.generate_edge_cases():
            bottom_up = solve_bottom_up(case.r_seq, case.c_seq)
            top_down = solve_top_down(case.r_seq, case.c_seq)
            self.assertEqual(bottom_up.table, top_down.table, case.name)
            self.assertEqual(bottom_up.solutions, top_down.solutions, case.name)
            self.assertEqual(bottom_up.length, top_down.length, case.name)

    def test_cross_check_never_raises(self):
        engine = LCSEngine()
        for r_seq, c_seq in generate_random_pairs(20):
            result = engine.cross_check(r_seq, c_seq)
            self.assertEqual(result.length, lcs_length(r_seq, c_seq))

    def test_tables_match_reference_recurrence(self):
        for case in generate_cases(20):
            for strategy in Strategy:
                result = compute_all_lcs(case.r_seq, case.c_seq, strategy)
                self.assertTrue(tables_equal(result.table, lcs_table(case.r_seq, case.c_seq)))
                validate_table(result.table, case.r_seq, case.c_seq)


class TestSolutionProperties(unittest.TestCase):
    def setUp(self):
        self.seq_gen = SequenceGenerator(GeneratorConfig(seed=123, max_length=10))
        self.repeat_gen = RepetitiveSequenceGenerator(GeneratorConfig(seed=456, max_length=10))

    def _check_solutions(self, r_seq: str, c_seq: str):
        result = solve_bottom_up(r_seq, c_seq)
        self.assertTrue(result.solutions)
        for solution in result.solutions:
            self.assertEqual(len(solution), result.length)
            self.assertTrue(is_subsequence(solution, r_seq))
            self.assertTrue(is_subsequence(solution, c_seq))
        return result

    def test_every_solution_is_a_common_subsequence(self):
        for _ in range(25):
            self._check_solutions(*self.seq_gen.generate_pair())
        for _ in range(25):
            self._check_solutions(*self.repeat_gen.generate_pair())

    def test_solution_set_is_complete(self):
        for _ in range(20):
            r_seq, c_seq = self.seq_gen.generate(8), self.seq_gen.generate(7)
            self.assertEqual(set(solve_top_down(r_seq, c_seq).solutions), all_lcs(r_seq, c_seq))
        for _ in range(20):
            r_seq, c_seq = self.repeat_gen.generate_pair(8)
            self.assertEqual(set(solve_bottom_up(r_seq, c_seq).solutions), all_lcs(r_seq, c_seq))

    def test_single_solution_belongs_to_full_set(self):
        for _ in range(20):
            r_seq, c_seq = self.seq_gen.generate_pair()
            self.assertIn(longest_common_subsequence(r_seq, c_seq),
                          solve_bottom_up(r_seq, c_seq).solutions)


class TestSymmetryAndIdempotence(unittest.TestCase):
    def setUp(self):
        self.seq_gen = SequenceGenerator(GeneratorConfig(seed=789, max_length=12))

    def test_length_symmetric(self):
        for _ in range(30):
            a, b = self.seq_gen.generate_pair()
            self.assertEqual(compute_length(a, b), compute_length(b, a))

    def test_solution_set_symmetric(self):
        for _ in range(20):
            a, b = self.seq_gen.generate_pair()
            self.assertEqual(solve_bottom_up(a, b).solutions, solve_top_down(b, a).solutions)

    def test_repeated_runs_identical(self):
        a, b = self.seq_gen.generate(10), self.seq_gen.generate(10)
        for strategy in Strategy:
            first = compute_all_lcs(a, b, strategy)
            for _ in range(3):
                again = compute_all_lcs(a, b, strategy)
                self.assertEqual(first.table, again.table)
                self.assertEqual(first.solutions, again.solutions)


class TestLengthBounds(unittest.TestCase):
    def setUp(self):
        self.seq_gen = SequenceGenerator(GeneratorConfig(seed=202, max_length=15))

    def test_length_bounds(self):
        for _ in range(30):
            a, b = self.seq_gen.generate_pair()
            length = compute_length(a, b)
            self.assertGreaterEqual(length, 0)
            self.assertLessEqual(length, min(len(a), len(b)))

    def test_identical_inputs_have_single_full_solution(self):
        for _ in range(15):
            seq = self.seq_gen.generate()
            result = solve_top_down(seq, seq)
            self.assertEqual(result.length, len(seq))
            self.assertEqual(result.solutions, {seq})

    def test_edge_cases_expected_lengths(self):
        for case in CaseGenerator().generate_edge_cases():
            self.assertEqual(compute_length(case.r_seq, case.c_seq), case.expected_length, case.name)


class TestGenerators(unittest.TestCase):
    def test_sequence_generators(self):
        gen = SequenceGenerator(GeneratorConfig(min_length=3, max_length=6, alphabet="XY"))
        for _ in range(6):
            seq = gen.generate()
            self.assertTrue(3 <= len(seq) <= 6)
            self.assertTrue(set(seq) <= {"X", "Y"})
        rgen = RepetitiveSequenceGenerator()
        a, b = rgen.generate_pair(9)
        self.assertEqual((len(a), len(b)), (9, 9))
        self.assertTrue(set(a + b) <= {"A", "B"})


if __name__ == '__main__':
    unittest.main(verbosity=2)
