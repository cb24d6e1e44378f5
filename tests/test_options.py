from __future__ import annotations

import os
import sys
import unittest
from pathlib import Path
from unittest import mock


REPO_DIR = Path(__file__).resolve().parents[1]
if str(REPO_DIR) not in sys.path:
    sys.path.insert(0, str(REPO_DIR))


from core.options import RuleOptions, parse_flag  # noqa: E402


class RuleOptionsTests(unittest.TestCase):
    def test_defaults_leave_captures_optional(self) -> None:
        self.assertFalse(RuleOptions().mandatory_capture)

    def test_from_env(self) -> None:
        with mock.patch.dict(os.environ, {"CHECKERS_MANDATORY_CAPTURE": "yes"}):
            self.assertTrue(RuleOptions.from_env().mandatory_capture)
        with mock.patch.dict(os.environ, {"CHECKERS_MANDATORY_CAPTURE": "0"}):
            self.assertFalse(RuleOptions.from_env().mandatory_capture)
        with mock.patch.dict(os.environ, {}, clear=True):
            self.assertFalse(RuleOptions.from_env().mandatory_capture)

    def test_parse_flag_rejects_garbage(self) -> None:
        self.assertTrue(parse_flag(" TRUE "))
        with self.assertRaises(ValueError):
            parse_flag("maybe")


if __name__ == "__main__":
    unittest.main()
