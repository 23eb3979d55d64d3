from __future__ import annotations

import unittest

from iconpick.render import FramePlan, FrameSnapshot, plan_frame


class FramePlannerTests(unittest.TestCase):
    def test_first_frame_is_full_redraw(self) -> None:
        plan = plan_frame(None, FrameSnapshot(generation=1, items_per_row=4, selected_index=0))

        self.assertEqual(plan, FramePlan(full_redraw=True, clear_index=None, paint_index=0))

    def test_new_generation_forces_full_redraw(self) -> None:
        previous = FrameSnapshot(generation=1, items_per_row=4, selected_index=3)
        current = FrameSnapshot(generation=2, items_per_row=4, selected_index=0)

        self.assertTrue(plan_frame(previous, current).full_redraw)

    def test_relayout_forces_full_redraw(self) -> None:
        previous = FrameSnapshot(generation=1, items_per_row=4, selected_index=0)
        current = FrameSnapshot(generation=1, items_per_row=6, selected_index=0)

        self.assertTrue(plan_frame(previous, current).full_redraw)

    def test_selection_move_clears_old_cell_and_paints_new_one(self) -> None:
        previous = FrameSnapshot(generation=1, items_per_row=4, selected_index=2)
        current = FrameSnapshot(generation=1, items_per_row=4, selected_index=6)

        self.assertEqual(plan_frame(previous, current), FramePlan(full_redraw=False, clear_index=2, paint_index=6))

    def test_unchanged_selection_only_repaints_highlight(self) -> None:
        snapshot = FrameSnapshot(generation=1, items_per_row=4, selected_index=2)

        self.assertEqual(plan_frame(snapshot, snapshot), FramePlan(full_redraw=False, clear_index=None, paint_index=2))

    def test_empty_result_set_paints_nothing(self) -> None:
        plan = plan_frame(None, FrameSnapshot(generation=1, items_per_row=4, selected_index=None))

        self.assertTrue(plan.full_redraw)
        self.assertIsNone(plan.paint_index)


if __name__ == "__main__":
    unittest.main()
