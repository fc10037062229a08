from __future__ import annotations

import unittest

from rotaug.types import PathParts


class PathPartsTests(unittest.TestCase):
    def test_splits_directory_stem_and_extension(self) -> None:
        parts = PathParts.from_path("data/images/cat.01.jpg")
        self.assertEqual(parts, PathParts(directory="data/images", stem="cat.01", extension=".jpg"))
        self.assertEqual(parts.name, "cat.01.jpg")

    def test_missing_extension_is_empty(self) -> None:
        parts = PathParts.from_path("images/cat")
        self.assertEqual(parts.extension, "")
        self.assertEqual(parts.with_stem_suffix("_x"), "images/cat_x")

    def test_no_directory(self) -> None:
        parts = PathParts.from_path("cat.png")
        self.assertEqual(parts.directory, "")
        self.assertEqual(parts.with_stem_suffix("_x"), "cat_x.png")

    def test_absolute_root_directory(self) -> None:
        self.assertEqual(PathParts.from_path("/cat.png").with_stem_suffix("_x"), "/cat_x.png")

    def test_extension_starts_at_last_dot_even_when_leading(self) -> None:
        parts = PathParts.from_path("images/.jpg")
        self.assertEqual(parts, PathParts(directory="images", stem="", extension=".jpg"))
        self.assertEqual(parts.with_stem_suffix("_x"), "images/_x.jpg")

    def test_trailing_dot_is_the_extension(self) -> None:
        parts = PathParts.from_path("images/cat.")
        self.assertEqual(parts, PathParts(directory="images", stem="cat", extension="."))

    def test_trailing_slash_leaves_empty_name(self) -> None:
        parts = PathParts.from_path("images/")
        self.assertEqual(parts, PathParts(directory="images", stem="", extension=""))
        self.assertEqual(parts.with_stem_suffix("_x"), "images/_x")


if __name__ == "__main__":
    unittest.main()
