"""
Layered configuration: embedded defaults < defaults.ini < env < user ini.
Uses unittest to mirror the other core tests.
"""

from __future__ import annotations

import tempfile
import unittest
from pathlib import Path

from core.config.config_service import ConfigService


class TestConfigService(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.tmp = Path(self._tmp.name)
        self.missing = self.tmp / "missing.ini"

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def test_embedded_defaults(self) -> None:
        cfg = ConfigService(defaults_ini=self.missing, user_ini=self.missing, environ={})
        self.assertEqual(cfg.export.filename, "leistungsnachweis.pdf")
        self.assertEqual(cfg.signature.stroke_width, 2.0)
        self.assertEqual(cfg.signature.background, "#ffffff")
        self.assertEqual(cfg.logging.level, "INFO")
        self.assertIsInstance(cfg.export.output_dir, Path)
        self.assertEqual(cfg.meta_source("Export", "filename")["layer"], "code")

    def test_env_overrides_defaults_ini(self) -> None:
        ini = self.tmp / "defaults.ini"
        ini.write_text("[Signature]\nstroke_width = 3\nstroke = #111111\n", encoding="utf-8")
        cfg = ConfigService(defaults_ini=ini, user_ini=self.missing,
                            environ={"LNW_SIGNATURE__STROKE_WIDTH": "4.5", "OTHER": "x"})
        self.assertEqual(cfg.signature.stroke_width, 4.5)
        self.assertEqual(cfg.signature.stroke, "#111111")
        self.assertEqual(cfg.meta_source("Signature", "stroke_width")["layer"], "env")

    def test_user_ini_wins(self) -> None:
        user = self.tmp / "user.ini"
        user.write_text(f"[Export]\noutput_dir = {self.tmp.as_posix()}\nfilename = out.pdf\n", encoding="utf-8")
        cfg = ConfigService(defaults_ini=self.missing, user_ini=user,
                            environ={"LNW_EXPORT__FILENAME": "env.pdf"})
        self.assertEqual(cfg.export.filename, "out.pdf")
        self.assertEqual(cfg.export.output_dir, self.tmp)
        self.assertEqual(cfg.get("Export", "filename"), "out.pdf")
        self.assertIsNone(cfg.get("Export", "nope"))


if __name__ == "__main__":
    unittest.main()
