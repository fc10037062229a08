from __future__ import annotations

import unittest

from rotaug.config.models import MarkerConfig
from rotaug.errors import InvalidStepError
from rotaug.manifest.expand import (
    expand_record,
    expand_records,
    format_angle,
    rotation_angles,
    variants_per_record,
)
from rotaug.types import InputRecord


class ExpandTests(unittest.TestCase):
    def test_quarter_turn_example(self) -> None:
        lines = [item.to_line() for item in expand_record(InputRecord("images/cat.jpg", "0"), 90)]
        self.assertEqual(
            lines,
            [
                "images/cat_rot_000_flip_v.jpg 0",
                "images/cat_rot_000_flip_n.jpg 0",
                "images/cat_rot_090_flip_v.jpg 0",
                "images/cat_rot_090_flip_n.jpg 0",
                "images/cat_rot_180_flip_v.jpg 0",
                "images/cat_rot_180_flip_n.jpg 0",
                "images/cat_rot_270_flip_v.jpg 0",
                "images/cat_rot_270_flip_n.jpg 0",
            ],
        )

    def test_variant_count_matches_truncating_loop(self) -> None:
        record = InputRecord("a/b.png", "1")
        for step in (1, 7, 45, 100, 359):
            expected = 2 * ((360 - 1) // step + 1)
            self.assertEqual(len(expand_record(record, step)), expected, step)
            self.assertEqual(variants_per_record(step), expected)

    def test_non_divisor_step_drops_partial_last_step(self) -> None:
        self.assertEqual(list(rotation_angles(100)), [0, 100, 200, 300])
        self.assertEqual(list(rotation_angles(360)), [0])
        self.assertEqual(list(rotation_angles(500)), [0])

    def test_angle_padding(self) -> None:
        self.assertEqual(format_angle(7), "007")
        self.assertEqual(format_angle(45), "045")
        self.assertEqual(format_angle(120), "120")
        for angle in range(360):
            padded = format_angle(angle)
            self.assertEqual(len(padded), 3)
            self.assertEqual(int(padded), angle)

    def test_invalid_steps_raise(self) -> None:
        record = InputRecord("a.jpg", "0")
        for step in (0, -15, True, 1.5, "90"):
            with self.assertRaises(InvalidStepError):
                expand_record(record, step)  # type: ignore[arg-type]

    def test_zero_step_fails_before_any_record_is_expanded(self) -> None:
        with self.assertRaises(InvalidStepError):
            expand_records([], 0)

    def test_records_keep_input_order(self) -> None:
        records = [InputRecord("z/zebra.jpg", "2"), InputRecord("a/ant.jpg", "1")]
        output = expand_records(records, 180)
        self.assertEqual(
            [item.path for item in output],
            [
                "z/zebra_rot_000_flip_v.jpg",
                "z/zebra_rot_000_flip_n.jpg",
                "z/zebra_rot_180_flip_v.jpg",
                "z/zebra_rot_180_flip_n.jpg",
                "a/ant_rot_000_flip_v.jpg",
                "a/ant_rot_000_flip_n.jpg",
                "a/ant_rot_180_flip_v.jpg",
                "a/ant_rot_180_flip_n.jpg",
            ],
        )

    def test_sort_output_orders_lexicographically(self) -> None:
        records = [InputRecord("z/zebra.jpg", "2"), InputRecord("a/ant.jpg", "1")]
        lines = [item.to_line() for item in expand_records(records, 180, sort_output=True)]
        self.assertEqual(lines, sorted(lines))
        self.assertTrue(lines[0].startswith("a/ant_rot_000_flip_n.jpg"))

    def test_thread_pool_matches_sequential_order(self) -> None:
        records = [InputRecord(f"class{i % 3}/img_{i:04d}.jpg", str(i % 3)) for i in range(50)]
        sequential = expand_records(records, 30)
        parallel = expand_records(records, 30, workers=4)
        self.assertEqual(parallel, sequential)

    def test_expansion_is_repeatable(self) -> None:
        records = [InputRecord("images/cat.jpg", "0"), InputRecord("images/dog.png", "1")]
        self.assertEqual(expand_records(records, 45), expand_records(records, 45))

    def test_custom_markers(self) -> None:
        markers = MarkerConfig(rotation="-r", flip_vertical="-fv", flip_none="-fn")
        output = expand_record(InputRecord("cat.jpg", "0"), 270, markers=markers)
        self.assertEqual(
            [item.path for item in output],
            ["cat-r000-fv.jpg", "cat-r000-fn.jpg", "cat-r270-fv.jpg", "cat-r270-fn.jpg"],
        )

    def test_path_without_extension(self) -> None:
        output = expand_record(InputRecord("images/cat", "0"), 180)
        self.assertEqual(output[0].path, "images/cat_rot_000_flip_v")

    def test_empty_stem_keeps_extension_last(self) -> None:
        output = expand_record(InputRecord("images/.jpg", "0"), 180)
        self.assertEqual(output[0].path, "images/_rot_000_flip_v.jpg")
        self.assertEqual(output[-1].path, "images/_rot_180_flip_n.jpg")


if __name__ == "__main__":
    unittest.main()
