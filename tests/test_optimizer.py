import unittest
from chardiff.engine import align
from chardiff.models import Operation
from chardiff.optimizer import OperationOptimizer, optimize


def ins(pos, text):
    return Operation("insert", pos, (), tuple(text))


def rep(pos, old, new):
    return Operation("replace", pos, (old,), (new,))


def dele(pos, old):
    return Operation("delete", pos, (old,))


class TestOptimizer(unittest.TestCase):
    def test_empty(self):
        self.assertEqual(optimize([]), [])

    def test_merges_inserts_at_same_anchor(self):
        merged = optimize([ins(2, "a"), ins(2, "b"), ins(2, "c")])
        self.assertEqual(merged, [Operation("insert", 2, (), ("a", "b", "c"))])
        self.assertEqual(merged[0].new_text, "abc")

    def test_inserts_at_different_anchors_kept(self):
        ops = [ins(0, "a"), ins(3, "b")]
        self.assertEqual(optimize(ops), ops)

    def test_insert_run_absorbs_following_replace(self):
        merged = optimize([ins(0, "a"), ins(0, "b"), rep(0, "x", "c")])
        self.assertEqual(merged, [Operation("replace", 0, ("x",), ("a", "b", "c"))])

    def test_replace_at_other_anchor_not_absorbed(self):
        ops = [ins(0, "a"), rep(1, "x", "y")]
        self.assertEqual(optimize(ops), ops)

    def test_guard_drops_non_replace_at_insert_anchor(self):
        self.assertEqual(optimize([ins(1, "a"), dele(1, "x")]), [ins(1, "a")])

    def test_contiguous_deletes_merge(self):
        merged = optimize([dele(0, "a"), dele(1, "b"), dele(2, "c")])
        self.assertEqual(merged, [Operation("delete", 0, ("a", "b", "c"))])

    def test_separated_deletes_kept(self):
        ops = [dele(0, "a"), dele(2, "c")]
        self.assertEqual(optimize(ops), ops)

    def test_replaces_untouched(self):
        ops = [rep(0, "k", "s"), rep(4, "e", "i")]
        self.assertEqual(optimize(ops), ops)

    def test_idempotent_on_arbitrary_sequences(self):
        sequences = [
            [ins(0, "a"), dele(0, "x"), ins(0, "b")],
            [ins(0, "a"), rep(0, "x", "b"), ins(0, "c"), rep(0, "y", "d")],
            [dele(0, "a"), ins(1, "z"), dele(1, "b"), dele(2, "c")],
            [rep(0, "a", "b"), ins(1, "c"), ins(1, "d"), rep(1, "e", "f"), dele(2, "g")],
        ]
        for ops in sequences:
            once = optimize(ops)
            self.assertEqual(optimize(once), once, ops)

    def test_idempotent_on_alignment_output(self):
        for a, b in [("x", "ab"), ("kitten", "sitting"), ("abc", ""), ("", "abc"), ("hello", "yellow!")]:
            ops = align(list(a), list(b)).operations
            once = optimize(ops)
            self.assertEqual(optimize(once), once, (a, b))

    def test_does_not_mutate_input(self):
        ops = [ins(0, "a"), ins(0, "b")]
        OperationOptimizer(ops).optimize()
        self.assertEqual(ops, [ins(0, "a"), ins(0, "b")])


if __name__ == '__main__':
    unittest.main()
