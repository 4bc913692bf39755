"""Tests for utility helpers."""

from __future__ import annotations

import unittest
from pathlib import Path

from filecrypt.utils import (
    AuthenticationFailedError,
    FileCryptError,
    MalformedContainerError,
    clean_path,
    format_bytes,
)


class TestUtils(unittest.TestCase):
    def test_format_bytes(self) -> None:
        self.assertEqual(format_bytes(0), "0 B")
        self.assertEqual(format_bytes(44), "44 B")
        self.assertEqual(format_bytes(2048), "2.00 KB")
        self.assertEqual(format_bytes(5 * 1024 * 1024), "5.00 MB")
        with self.assertRaises(ValueError):
            format_bytes(-1)

    def test_clean_path(self) -> None:
        self.assertEqual(clean_path("  'my file.txt' "), Path("my file.txt"))
        self.assertEqual(clean_path('"a\\ b"'), Path("a b"))

    def test_error_hierarchy(self) -> None:
        self.assertTrue(issubclass(MalformedContainerError, FileCryptError))
        self.assertTrue(issubclass(AuthenticationFailedError, FileCryptError))
        self.assertFalse(issubclass(AuthenticationFailedError, MalformedContainerError))


if __name__ == "__main__":
    unittest.main()
