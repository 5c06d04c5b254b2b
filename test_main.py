# test_main.py
"""Tests for the command line entry point."""

import contextlib
import io
import os
import shutil
import tempfile
import unittest

import cv2
import numpy as np

from config import REPORT_HEADER
from main import main
from ResourcePath import get_executable_dir, resource_path
from test_focus_measures import make_checkerboard


class TestMain(unittest.TestCase):
    def setUp(self):
        self.temp_dir = tempfile.mkdtemp()

    def tearDown(self):
        shutil.rmtree(self.temp_dir, ignore_errors=True)

    def _run(self, argv):
        out, err = io.StringIO(), io.StringIO()
        with contextlib.redirect_stdout(out), contextlib.redirect_stderr(err):
            code = main(argv)
        return code, out.getvalue(), err.getvalue()

    def test_success(self):
        gray = os.path.join(self.temp_dir, "gray.png")
        cv2.imwrite(gray, np.full((10, 10), 128, dtype=np.uint8))
        cv2.imwrite(os.path.join(self.temp_dir, "checker.png"), make_checkerboard())

        code, out, err = self._run([self.temp_dir])

        self.assertEqual(code, 0)
        self.assertIn("Lapm :", out)
        self.assertIn(REPORT_HEADER, out)
        report = out[out.index(REPORT_HEADER):]
        self.assertTrue(report.splitlines()[1].startswith(f"{gray} (lapm): "))
        self.assertEqual(err, "")

    def test_quiet_and_by_image(self):
        cv2.imwrite(os.path.join(self.temp_dir, "checker.png"), make_checkerboard())

        code, out, _ = self._run([self.temp_dir, "--quiet", "--by-image"])

        self.assertEqual(code, 0)
        self.assertNotIn("Lapm :", out)
        self.assertIn("Ranks per image", out)

    def test_empty_directory(self):
        code, out, _ = self._run([self.temp_dir])
        self.assertEqual(code, 0)
        self.assertEqual(out, REPORT_HEADER + "\n")

    def test_missing_directory(self):
        code, out, err = self._run([os.path.join(self.temp_dir, "nope")])
        self.assertEqual(code, 2)
        self.assertEqual(out, "")
        self.assertIn("Cannot read directory", err)

    def test_partial_failure_exit_code(self):
        cv2.imwrite(os.path.join(self.temp_dir, "gray.png"), np.full((10, 10), 128, dtype=np.uint8))
        with open(os.path.join(self.temp_dir, "notes.txt"), "w") as f:
            f.write("not an image")

        code, out, err = self._run([self.temp_dir, "--quiet"])

        self.assertEqual(code, 1)
        self.assertIn("gray.png (lapm)", out)
        self.assertIn("notes.txt", err)

    def test_bad_ksize(self):
        with self.assertRaises(SystemExit) as ctx:
            self._run([self.temp_dir, "--ksize", "4"])
        self.assertEqual(ctx.exception.code, 2)


class TestResourcePath(unittest.TestCase):
    def test_absolute_path_unchanged(self):
        path = os.path.abspath("somewhere")
        self.assertEqual(resource_path(path), path)

    def test_relative_path_next_to_tool(self):
        self.assertEqual(resource_path("dataset"), os.path.join(get_executable_dir(), "dataset"))
        self.assertTrue(os.path.isabs(resource_path("dataset")))


if __name__ == "__main__":
    unittest.main()
