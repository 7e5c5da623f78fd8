import unittest
from chardiff.utils import SimilarityCalculator
from chardiff.engine import AlignmentEngine, align, calculate_edit_distance
from chardiff.exceptions import ComputationTimeout
from chardiff.models import Operation


class TestUtils(unittest.TestCase):
    def test_levenshtein_ratio(self):
        self.assertAlmostEqual(SimilarityCalculator.levenshtein_ratio(0, 3, 3), 1.0)
        self.assertAlmostEqual(SimilarityCalculator.levenshtein_ratio(3, 3, 3), 0.0)
        self.assertAlmostEqual(SimilarityCalculator.levenshtein_ratio(3, 6, 7), 0.57, places=2)
        self.assertEqual(SimilarityCalculator.levenshtein_ratio(0, 0, 0), 1.0)
        self.assertEqual(SimilarityCalculator.levenshtein_ratio(9, 2, 3), 0.0)

    def test_similarity_percent(self):
        self.assertEqual(SimilarityCalculator.similarity_percent("kitten", "sitting", 3), 57.14)
        self.assertEqual(SimilarityCalculator.similarity_percent("", "", 0), 100.0)
        self.assertEqual(SimilarityCalculator.similarity_percent("abc", "xyz", 3), 0.0)
        self.assertEqual(SimilarityCalculator.similarity_percent("", "abc", 3), 0.0)

    def test_round_percent_ties_go_up(self):
        # 0.125 and 0.375 are exact in binary, so these are true ties.
        self.assertEqual(SimilarityCalculator.round_percent(0.125), 0.13)
        self.assertEqual(SimilarityCalculator.round_percent(0.375), 0.38)
        self.assertEqual(SimilarityCalculator.round_percent(100.0), 100.0)
        self.assertEqual(SimilarityCalculator.round_percent(0.0), 0.0)


class TestMatrix(unittest.TestCase):
    def setUp(self):
        self.engine = AlignmentEngine(list("kitten"), list("sitting"))
        self.matrix = self.engine.build_matrix()

    def test_matrix_shape(self):
        self.assertEqual(len(self.matrix), 7)
        self.assertTrue(all(len(row) == 8 for row in self.matrix))

    def test_identity_borders(self):
        self.assertEqual(self.matrix[0], list(range(8)))
        self.assertEqual([row[0] for row in self.matrix], list(range(7)))

    def test_cell_recurrence(self):
        a, b, dp = "kitten", "sitting", self.matrix
        for i in range(1, 7):
            for j in range(1, 8):
                if a[i - 1] == b[j - 1]:
                    expected = dp[i - 1][j - 1]
                else:
                    expected = 1 + min(dp[i - 1][j], dp[i][j - 1], dp[i - 1][j - 1])
                self.assertEqual(dp[i][j], expected, (i, j))

    def test_final_cell(self):
        self.assertEqual(self.matrix[6][7], 3)


class TestBacktrace(unittest.TestCase):
    def test_kitten_sitting(self):
        result = align(list("kitten"), list("sitting"))
        self.assertEqual(result.edit_distance, 3)
        self.assertEqual(result.operations, (
            Operation("replace", 0, ("k",), ("s",)),
            Operation("replace", 4, ("e",), ("i",)),
            Operation("insert", 6, (), ("g",)),
        ))

    def test_identical_emits_nothing(self):
        result = align(list("same"), list("same"))
        self.assertEqual(result.edit_distance, 0)
        self.assertEqual(result.operations, ())

    def test_insert_anchored_at_source_index(self):
        # Every insert lands before source unit 0, in document order.
        result = align([], list("abc"))
        self.assertEqual([op.kind for op in result.operations], ["insert"] * 3)
        self.assertEqual([op.position for op in result.operations], [0, 0, 0])
        self.assertEqual("".join(op.new_text for op in result.operations), "abc")

    def test_deletes_in_document_order(self):
        result = align(list("abc"), [])
        self.assertEqual([(op.kind, op.position, op.old_text) for op in result.operations],
                         [("delete", 0, "a"), ("delete", 1, "b"), ("delete", 2, "c")])

    def test_replace_preferred_over_delete(self):
        result = align(list("ab"), list("c"))
        self.assertEqual(result.operations, (
            Operation("delete", 0, ("a",)),
            Operation("replace", 1, ("b",), ("c",)),
        ))

    def test_replace_preferred_over_insert(self):
        result = align(["x"], ["a", "b"])
        self.assertEqual(result.operations, (
            Operation("insert", 0, (), ("a",)),
            Operation("replace", 0, ("x",), ("b",)),
        ))

    def test_distance_matches_operation_count(self):
        for a, b in [("kitten", "sitting"), ("flaw", "lawn"), ("", "xyz"), ("intention", "execution")]:
            result = align(list(a), list(b))
            self.assertEqual(result.edit_distance, len(result.operations), (a, b))

    def test_distance_is_symmetric(self):
        for a, b in [("kitten", "sitting"), ("abc", "yabd"), ("sunday", "saturday")]:
            self.assertEqual(calculate_edit_distance(list(a), list(b)),
                             calculate_edit_distance(list(b), list(a)))

    def test_key_function(self):
        result = align(["A", "b"], ["a", "B"], key=str.lower)
        self.assertEqual(result.edit_distance, 0)
        self.assertEqual(result.operations, ())

    def test_matrix_released_after_run(self):
        engine = AlignmentEngine(list("abc"), list("abd"))
        engine.run()
        self.assertEqual(engine.matrix, [])


class TestTimeout(unittest.TestCase):
    def test_timeout_raises_without_partial_result(self):
        engine = AlignmentEngine(list("ab" * 1500), list("ba" * 1500))
        with self.assertRaises(ComputationTimeout) as ctx:
            engine.run(timeout_ms=1)
        self.assertEqual(engine.matrix, [])
        self.assertEqual(ctx.exception.timeout_ms, 1)
        self.assertEqual(ctx.exception.total_rows, 3000)
        self.assertLess(ctx.exception.rows_completed, 3000)

    def test_generous_timeout_completes(self):
        result = align(list("abc" * 20), list("abd" * 20), timeout_ms=60000)
        self.assertEqual(result.edit_distance, 20)


if __name__ == '__main__':
    unittest.main()
