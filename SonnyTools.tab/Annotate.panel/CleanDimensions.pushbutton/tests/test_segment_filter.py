import os
import sys
import unittest

THIS_DIR = os.path.dirname(__file__)
ROOT_DIR = os.path.dirname(THIS_DIR)
if ROOT_DIR not in sys.path:
    sys.path.insert(0, ROOT_DIR)

from segment_filter import (
    ACTION_DELETE,
    ACTION_KEEP,
    ACTION_NO_REPLACEMENT,
    ACTION_REBUILD,
    can_create_dimension,
    filter_references,
    has_degenerate_segment,
    plan_segment_cleanup,
    should_include_last_reference,
)


def refs(n):
    return ["r{}".format(i) for i in range(n)]


class SegmentFilterTests(unittest.TestCase):
    def test_small_middle_segment_keeps_trailing_duplicate(self):
        r = refs(4)
        plan = plan_segment_cleanup([5.0, 0.00001, 8.0], r, 13.00001, 1.0)
        self.assertEqual(plan["action"], ACTION_REBUILD)
        self.assertEqual(plan["references"], ["r0", "r1", "r3", "r3"])

    def test_collapse_flag_drops_trailing_duplicate(self):
        r = refs(4)
        plan = plan_segment_cleanup([5.0, 0.00001, 8.0], r, 13.0, 1.0, collapse_trailing_duplicate=True)
        self.assertEqual(plan["references"], ["r0", "r1", "r3"])

    def test_zero_length_two_reference_dimension_is_deleted(self):
        plan = plan_segment_cleanup([], refs(2), 0.00005, 1.0)
        self.assertEqual(plan["action"], ACTION_DELETE)
        self.assertEqual(plan["references"], [])

    def test_two_reference_dimension_without_value_is_kept(self):
        plan = plan_segment_cleanup([], refs(2), None, 1.0)
        self.assertEqual(plan["action"], ACTION_KEEP)

    def test_single_segment_without_degenerate_value_is_kept(self):
        r = refs(2)
        plan = plan_segment_cleanup([3.0], r, 3.0, 1.0)
        self.assertEqual(plan["action"], ACTION_KEEP)
        self.assertEqual(plan["references"], r)

    def test_small_but_not_degenerate_segments_are_kept(self):
        # 0.5 is below the threshold but well above the degeneracy tolerance.
        plan = plan_segment_cleanup([4.0, 0.5, 4.0], refs(4), 8.5, 1.0)
        self.assertEqual(plan["action"], ACTION_KEEP)

    def test_none_segments_are_not_degenerate(self):
        self.assertFalse(has_degenerate_segment([None, 2.0]))
        self.assertTrue(has_degenerate_segment([None, 0.0]))

    def test_threshold_boundary_uses_two_comparisons(self):
        # Loop keeps r3 (1.0 >= 1.0); the trailing check does not (1.0 > 1.0 is false).
        plan = plan_segment_cleanup([2.0, 0.0, 1.0], refs(4), 3.0, 1.0)
        self.assertEqual(plan["references"], ["r0", "r1", "r3"])

    def test_threshold_uses_signed_value(self):
        plan = plan_segment_cleanup([-5.0, 0.0, 3.0], refs(4), 8.0, 1.0)
        self.assertEqual(plan["references"], ["r0", "r3", "r3"])

    def test_fewer_than_two_references_means_no_replacement(self):
        plan = plan_segment_cleanup([None, 0.0], refs(3), 0.0, 1.0)
        self.assertEqual(plan["action"], ACTION_NO_REPLACEMENT)
        self.assertEqual(plan["references"], ["r0"])

    def test_dropped_references_follow_small_segments(self):
        values = [3.0, 0.00002, 0.4, 6.0, 0.0, 2.5]
        r = refs(len(values) + 1)
        plan = plan_segment_cleanup(values, r, 12.0, 1.0)
        out = plan["references"]
        self.assertEqual(out[0], "r0")
        for i, v in enumerate(values):
            if v < 1.0:
                self.assertNotIn(r[i + 1], out)

    def test_custom_tolerance_is_used(self):
        plan = plan_segment_cleanup([4.0, 0.004, 4.0], refs(4), 8.0, 1.0, tolerances={"standard": 0.01})
        self.assertEqual(plan["action"], ACTION_REBUILD)

    def test_inputs_are_not_mutated(self):
        values = [5.0, 0.0, 8.0]
        r = refs(4)
        plan_segment_cleanup(values, r, 13.0, 1.0)
        self.assertEqual(values, [5.0, 0.0, 8.0])
        self.assertEqual(r, refs(4))

    def test_helpers(self):
        self.assertEqual(filter_references([], [], 1.0), [])
        self.assertEqual(filter_references([2.0], ["a", "b"], 1.0), ["a", "b"])
        self.assertFalse(should_include_last_reference([], 1.0))
        self.assertFalse(should_include_last_reference([None], 1.0))
        self.assertTrue(should_include_last_reference([1.5], 1.0))
        self.assertFalse(can_create_dimension(["a"]))
        self.assertTrue(can_create_dimension(["a", "b"]))


if __name__ == "__main__":
    unittest.main()
